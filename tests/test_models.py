from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from event_viewer.models import Coordinate, make_event_id, slugify


def test_id_is_derived_from_name_and_start_date(make_event) -> None:
    event = make_event(name="Rome Studio: Open House!", start="2025-04-03T09:00:00+02:00")

    assert event.id == "rome-studio-open-house-2025-04-03"


def test_explicit_id_is_kept(make_event) -> None:
    assert make_event(id="fair").id == "fair"


def test_timestamps_keep_their_offset(make_event) -> None:
    event = make_event(start="2025-02-12T10:00:00-05:00")

    assert event.start.utcoffset() == timedelta(hours=-5)


def test_extra_fields_are_rejected(make_event) -> None:
    with pytest.raises(ValidationError):
        make_event(title="duplicate of name")


@pytest.mark.parametrize(("lat", "lng"), [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_out_of_range_coordinates_are_rejected(make_event, lat: float, lng: float) -> None:
    with pytest.raises(ValidationError):
        make_event(lat=lat, lng=lng)


def test_empty_name_is_rejected(make_event) -> None:
    with pytest.raises(ValidationError):
        make_event(name="")


def test_event_is_frozen(make_event) -> None:
    event = make_event()

    with pytest.raises(ValidationError):
        event.name = "Renamed"


def test_position(make_event) -> None:
    assert make_event(lat=35.5, lng=-80.25).position == Coordinate(35.5, -80.25)


def test_slugify_and_make_event_id() -> None:
    assert slugify("  Japan Summer Program 2025 ") == "japan-summer-program-2025"
    assert make_event_id("Commencement", "2025-05-10T09:00:00-04:00") == "commencement-2025-05-10"


@pytest.mark.parametrize("field", ["start", "end"])
def test_naive_timestamps_are_rejected(make_event, field: str) -> None:
    with pytest.raises(ValidationError):
        make_event(**{field: "2025-01-01T11:00:00"})


def test_non_string_name_fails_validation(make_event) -> None:
    with pytest.raises(ValidationError):
        make_event(name=5)
