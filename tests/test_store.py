from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from event_viewer.exceptions import EventDataError
from event_viewer.store import (
    SUPPLEMENTARY_EVENTS,
    build_event_store,
    default_event_store,
    get_event,
    load_events,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "events.json"
    path.write_text(text, encoding="utf-8")
    return path


def test_default_store_is_bundled_data_then_supplementary(events) -> None:
    bundled = load_events()

    assert isinstance(events, tuple)
    assert list(events[: len(bundled)]) == bundled
    assert events[len(bundled):] == SUPPLEMENTARY_EVENTS


def test_supplementary_record_keeps_program_title(events) -> None:
    japan = events[-1]

    assert japan.name == "Japan Summer Program 2025"
    assert japan.venue == "Tokyo Studio, Japan"
    assert (japan.lat, japan.lng) == (35.64126013351904, 139.60309040974118)


def test_ids_are_unique(events) -> None:
    ids = [event.id for event in events]

    assert len(ids) == len(set(ids))


def test_duplicate_keys_in_a_record_are_rejected(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        '[{"name": "Program", "name": "Studio", "start": "2025-01-01T00:00:00+00:00",'
        ' "end": "2025-01-02T00:00:00+00:00", "lat": 1, "lng": 2}]',
    )

    with pytest.raises(EventDataError, match="Duplicate field 'name'") as exc_info:
        load_events(path)
    assert exc_info.value.source == str(path)


def test_invalid_record_reports_its_index(tmp_path: Path) -> None:
    good = {"name": "A", "start": "2025-01-01T00:00:00+00:00", "end": "2025-01-01T01:00:00+00:00", "lat": 1, "lng": 2}
    bad = {**good, "name": "B", "lat": 120}
    path = _write(tmp_path, json.dumps([good, bad]))

    with pytest.raises(EventDataError, match="index 1"):
        load_events(path)


def test_non_list_data_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(EventDataError, match="JSON list"):
        load_events(_write(tmp_path, '{"events": []}'))


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(EventDataError, match="Cannot read"):
        load_events(tmp_path / "nope.json")


def test_build_rejects_duplicate_ids(make_event) -> None:
    with pytest.raises(EventDataError, match="Duplicate event id"):
        build_event_store([make_event(id="x")], [make_event(id="x", name="Other")])


def test_build_warns_when_event_ends_before_it_starts(make_event, caplog: pytest.LogCaptureFixture) -> None:
    backwards = make_event(start="2025-01-02T00:00:00+00:00", end="2025-01-01T00:00:00+00:00")

    with caplog.at_level(logging.WARNING, logger="event_viewer.store"):
        store = build_event_store([backwards])

    assert store == (backwards,)
    assert "ends before it starts" in caplog.text


def test_get_event(events) -> None:
    assert get_event(events, events[2].id) is events[2]
    with pytest.raises(KeyError):
        get_event(events, "no-such-event")


def test_non_string_name_is_reported_as_data_error(tmp_path: Path) -> None:
    record = {"name": 5, "start": "2025-01-01T00:00:00+00:00", "end": "2025-01-01T01:00:00+00:00", "lat": 1, "lng": 2}
    path = _write(tmp_path, json.dumps([record]))

    with pytest.raises(EventDataError, match="index 0"):
        load_events(path)


def test_timestamp_without_offset_is_reported_as_data_error(tmp_path: Path) -> None:
    record = {"name": "A", "start": "2025-01-01T00:00:00", "end": "2025-01-01T01:00:00+00:00", "lat": 1, "lng": 2}
    path = _write(tmp_path, json.dumps([record]))

    with pytest.raises(EventDataError, match="index 0"):
        default_event_store(path)
