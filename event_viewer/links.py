"""Outbound links for the sidebar."""

from __future__ import annotations

from event_viewer.config import DIRECTIONS_BASE_URL
from event_viewer.models import Event


def navigate_url(event: Event) -> str:
    """Google Maps directions to the event.

    Coordinates go in as they are stored, no range check or rounding.
    """
    return f"{DIRECTIONS_BASE_URL}&destination={event.lat},{event.lng}"


def sidebar_links(event: Event) -> list[tuple[str, str]]:
    """Label and URL for each link button under the event details."""
    links = []
    if event.url:
        links.append(("More info", event.url))
    links.append(("Navigate", navigate_url(event)))
    return links
