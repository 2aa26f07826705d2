"""
Geo helpers for the sidebar
===========================
Distances and reverse geocoding through geopy, plus date formatting.
"""

from __future__ import annotations

import logging

from geopy.distance import geodesic
from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from event_viewer.config import GEOCODER_TIMEOUT, GEOCODER_USER_AGENT
from event_viewer.models import Coordinate, Event

_logger = logging.getLogger(__name__)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return geodesic(tuple(a), tuple(b)).km


def format_distance(km: float) -> str:
    if km < 1:
        return f"{km * 1000:.0f} m"
    return f"{km:,.1f} km"


def make_geocoder():
    return Nominatim(user_agent=GEOCODER_USER_AGENT, timeout=GEOCODER_TIMEOUT)


def describe_position(position: Coordinate, geocoder=None) -> str | None:
    """Reverse-geocode *position* to an address, or ``None`` if unavailable."""
    geocoder = geocoder or make_geocoder()
    try:
        location = geocoder.reverse(f"{position.lat}, {position.lng}")
    except GeopyError as e:
        _logger.warning("Reverse geocoding failed for %s: %s", position, e)
        return None
    return location.address if location else None


def format_event_window(event: Event) -> str:
    """Human-readable date range, e.g. ``May 17, 2025 to Jun 15, 2025``."""
    start = event.start.strftime("%b %d, %Y").replace(" 0", " ")
    if event.start.date() == event.end.date():
        hours = f"{event.start:%H:%M} to {event.end:%H:%M}"
        return f"{start}, {hours}"
    end = event.end.strftime("%b %d, %Y").replace(" 0", " ")
    return f"{start} to {end}"
