"""Marker layer: turns the event store into map markers."""

from __future__ import annotations

import copy
from collections.abc import Sequence

from event_viewer.config import EVENT_ICON
from event_viewer.models import Event


def build_markers(events: Sequence[Event]) -> list[dict]:
    """One JSON-ready marker per event, in store order.

    Markers carry the event id; the frontend reports clicks with it.
    """
    return [
        {
            "id": event.id,
            "lat": event.lat,
            "lng": event.lng,
            "name": event.name,
        }
        for event in events
    ]


def marker_icon() -> dict:
    return copy.deepcopy(EVENT_ICON)
