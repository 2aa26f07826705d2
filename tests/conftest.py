from __future__ import annotations

from collections.abc import Callable

import pytest

from event_viewer.models import Event
from event_viewer.store import default_event_store


@pytest.fixture
def events() -> tuple[Event, ...]:
    return default_event_store()


@pytest.fixture
def state() -> dict:
    # Stands in for st.session_state
    return {}


@pytest.fixture
def make_event() -> Callable[..., Event]:
    def _make_event(**overrides) -> Event:
        fields = {
            "name": "Sample Event",
            "start": "2025-01-01T10:00:00+00:00",
            "end": "2025-01-01T12:00:00+00:00",
            "lat": 10.0,
            "lng": 20.0,
            "url": "",
            "description": "Something happens.",
        }
        fields.update(overrides)
        return Event(**fields)

    return _make_event
