"""
Location tracker
================
Holds the user's position and the map view, and drives one-shot locate
requests against the browser.

A request is identified by an increasing id. Only the latest id is
pending; an outcome carrying any other id belongs to a cancelled request
and is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from event_viewer.config import DEFAULT_POSITION, LOCATE_ZOOM
from event_viewer.exceptions import LocateOutcomeError
from event_viewer.models import Coordinate

_logger = logging.getLogger(__name__)

POSITION_KEY = "current_position"
CENTER_KEY = "map_center"
ZOOM_KEY = "map_zoom"
PENDING_KEY = "locate_pending"
COUNTER_KEY = "locate_counter"
NOTIFICATION_KEY = "locate_notification"
MOUNTED_KEY = "location_mounted"


class PositionFix(BaseModel):
    """Successful answer to a locate request."""

    model_config = ConfigDict(frozen=True)

    request_id: int
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    @property
    def position(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)


class LocateFailure(BaseModel):
    """Failed locate request with the browser's reason."""

    model_config = ConfigDict(frozen=True)

    request_id: int
    message: str = ""


LocateOutcome = PositionFix | LocateFailure


def parse_locate_outcome(payload: Mapping[str, Any]) -> LocateOutcome:
    """Convert a ``located`` / ``locate_error`` component value."""
    kind = payload.get("kind")
    try:
        if kind == "located":
            return PositionFix.model_validate(
                {"request_id": payload.get("request_id"), "lat": payload.get("lat"), "lng": payload.get("lng")}
            )
        if kind == "locate_error":
            return LocateFailure.model_validate(
                {"request_id": payload.get("request_id"), "message": payload.get("message") or ""}
            )
    except ValidationError as e:
        raise LocateOutcomeError(f"Malformed {kind} payload: {e}") from e
    raise LocateOutcomeError(f"Not a locate outcome: {kind!r}")


class LocationTracker:
    """Position state plus the map center and zoom it drives."""

    def __init__(self, state: MutableMapping[str, Any]):
        self._state = state
        state.setdefault(POSITION_KEY, None)
        state.setdefault(PENDING_KEY, None)
        state.setdefault(COUNTER_KEY, 0)
        state.setdefault(NOTIFICATION_KEY, None)
        state.setdefault(MOUNTED_KEY, False)

    @property
    def current_position(self) -> Coordinate | None:
        return self._state[POSITION_KEY]

    @property
    def center(self) -> Coordinate | None:
        return self._state.get(CENTER_KEY)

    @property
    def zoom(self) -> int | None:
        return self._state.get(ZOOM_KEY)

    @property
    def pending_request(self) -> int | None:
        return self._state[PENDING_KEY]

    @property
    def notification(self) -> str | None:
        return self._state[NOTIFICATION_KEY]

    def mount(self) -> None:
        """Center on the default position the first time the map is shown."""
        if self._state[MOUNTED_KEY]:
            return
        default = Coordinate(*DEFAULT_POSITION)
        self._state[POSITION_KEY] = default
        self._recenter(default)
        self._state[MOUNTED_KEY] = True

    def request_fix(self) -> int:
        previous = self.pending_request
        request_id = self._state[COUNTER_KEY] + 1
        self._state[COUNTER_KEY] = request_id
        self._state[PENDING_KEY] = request_id
        if previous is not None:
            _logger.debug("Locate request %s superseded by %s", previous, request_id)
        return request_id

    def resolve(self, outcome: LocateOutcome) -> bool:
        """Apply *outcome* if it answers the pending request."""
        if outcome.request_id != self.pending_request:
            _logger.warning(
                "Dropping locate outcome for request %s (pending: %s)",
                outcome.request_id,
                self.pending_request,
            )
            return False
        self._state[PENDING_KEY] = None

        if isinstance(outcome, PositionFix):
            self._state[POSITION_KEY] = outcome.position
            self._recenter(outcome.position)
            _logger.info("Located user at %.5f, %.5f", outcome.lat, outcome.lng)
        else:
            self._state[NOTIFICATION_KEY] = f"Location access denied: {outcome.message}"
            _logger.info("Locate request %s failed: %s", outcome.request_id, outcome.message)
        return True

    def acknowledge(self) -> None:
        self._state[NOTIFICATION_KEY] = None

    def _recenter(self, position: Coordinate) -> None:
        self._state[CENTER_KEY] = position
        self._state[ZOOM_KEY] = LOCATE_ZOOM
