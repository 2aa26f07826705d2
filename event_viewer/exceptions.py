"""Exception hierarchy for the events map."""

from __future__ import annotations


class EventViewerError(Exception):
    """Base exception for all event viewer errors."""


class EventDataError(EventViewerError):
    """The event dataset is malformed or contains conflicting records."""

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class LocateOutcomeError(EventViewerError):
    """A locate payload from the map component could not be understood."""
