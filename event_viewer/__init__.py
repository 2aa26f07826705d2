from event_viewer.exceptions import EventDataError, EventViewerError, LocateOutcomeError
from event_viewer.models import Coordinate, Event
from event_viewer.store import build_event_store, default_event_store, load_events

__all__ = [
    "Coordinate",
    "Event",
    "EventDataError",
    "EventViewerError",
    "LocateOutcomeError",
    "build_event_store",
    "default_event_store",
    "load_events",
]
