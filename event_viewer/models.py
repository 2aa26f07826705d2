"""Event and coordinate models.

:class:`Event` is a frozen pydantic model: one field per name, no
extra keys, coordinates range-checked. Records without an ``id`` get
one derived from the title and the start date so that markers and
selection never depend on list position.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, NamedTuple

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator

_SLUG_RE = re.compile(r"[^a-z0-9]+")


class Coordinate(NamedTuple):
    """A latitude/longitude pair in degrees."""

    lat: float
    lng: float


def slugify(text: str) -> str:
    """Lower-case *text* and collapse everything but letters and digits to ``-``."""
    return _SLUG_RE.sub("-", text.lower()).strip("-")


def make_event_id(name: str, start: Any) -> str:
    """Build the stable id used when a record does not carry one."""
    if isinstance(start, datetime):
        day = start.date().isoformat()
    else:
        day = str(start)[:10]
    return f"{slugify(name)}-{day}"


class Event(BaseModel):
    """A named activity with a time range and a place on the map.

    Parameters
    ----------
    id : str
        Stable identifier used for marker clicks and selection.
    name : str
        Display title.
    start, end : datetime
        Timezone-aware bounds of the event.
    lat, lng : float
        Position in degrees.
    url : str
        Reference link, possibly empty.
    description : str
        Free text shown in the sidebar.
    venue : str
        Optional place label.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    start: AwareDatetime
    end: AwareDatetime
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    url: str = ""
    description: str = ""
    venue: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fill_id(cls, values: Any) -> Any:
        name = values.get("name") if isinstance(values, dict) else None
        if isinstance(name, str) and name and not values.get("id"):
            values = {**values, "id": make_event_id(name, values.get("start", ""))}
        return values

    @property
    def position(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)
