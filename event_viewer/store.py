"""
Event store
===========
Builds the read-only sequence of events shown on the map: the bundled
JSON dataset followed by the records defined inline below.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from event_viewer.config import EVENTS_DATA_PATH
from event_viewer.exceptions import EventDataError
from event_viewer.models import Event

_logger = logging.getLogger(__name__)

# Records that are not part of the bundled dataset.
SUPPLEMENTARY_EVENTS: tuple[Event, ...] = (
    Event(
        name="Japan Summer Program 2025",
        venue="Tokyo Studio, Japan",
        start="2025-05-17T00:00:00+00:00",
        end="2025-06-15T00:00:00+00:00",
        lat=35.64126013351904,
        lng=139.60309040974118,
        url="https://coaa.charlotte.edu/architecture/study-abroad/japan-summer-program/",
        description=(
            "The Japan Summer Program is a study abroad experience for architecture students, "
            "featuring visits to architectural sites, including Tokyo and World Expo 2025 in Osaka. "
            "Led by Professor Chris Jarrett, the program includes coursework, site visits, "
            "and collaborations with Meiji University."
        ),
    ),
)


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for key, value in pairs:
        if key in record:
            raise EventDataError(f"Duplicate field {key!r} in event record")
        record[key] = value
    return record


def load_events(path: Path | str = EVENTS_DATA_PATH) -> list[Event]:
    """Read and validate the event list stored at *path*."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f, object_pairs_hook=_reject_duplicate_keys)
    except EventDataError as e:
        raise EventDataError(str(e), source=str(path)) from e
    except (OSError, json.JSONDecodeError) as e:
        raise EventDataError(f"Cannot read event data: {e}", source=str(path)) from e

    if not isinstance(raw, list):
        raise EventDataError("Event data must be a JSON list", source=str(path))

    events = []
    for index, record in enumerate(raw):
        try:
            events.append(Event.model_validate(record))
        except ValidationError as e:
            raise EventDataError(f"Invalid event at index {index}: {e}", source=str(path)) from e
    _logger.info("Loaded %d events from %s", len(events), path)
    return events


def build_event_store(base: Iterable[Event], supplementary: Iterable[Event] = ()) -> tuple[Event, ...]:
    """Concatenate *base* and *supplementary* into an immutable store.

    Raises :class:`EventDataError` when two records share an id.
    """
    store = tuple(base) + tuple(supplementary)
    seen: set[str] = set()
    for event in store:
        if event.id in seen:
            raise EventDataError(f"Duplicate event id {event.id!r}")
        seen.add(event.id)
        if event.end < event.start:
            _logger.warning("Event %s ends before it starts", event.id)
    return store


def default_event_store(path: Path | str = EVENTS_DATA_PATH) -> tuple[Event, ...]:
    return build_event_store(load_events(path), SUPPLEMENTARY_EVENTS)


def get_event(store: Sequence[Event], event_id: str) -> Event:
    for event in store:
        if event.id == event_id:
            return event
    raise KeyError(event_id)
