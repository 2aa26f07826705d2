"""Routes values returned by the map component to the controllers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from event_viewer.exceptions import LocateOutcomeError
from event_viewer.location import LocationTracker, parse_locate_outcome
from event_viewer.models import Event
from event_viewer.selection import SidebarController
from event_viewer.store import get_event

_logger = logging.getLogger(__name__)

LAST_TOKEN_KEY = "last_map_token"


def handle_map_event(
    value: Mapping[str, Any] | None,
    state: MutableMapping[str, Any],
    events: Sequence[Event],
    selection: SidebarController,
    tracker: LocationTracker,
) -> bool:
    """Apply one component value. Returns ``True`` if state changed.

    The component keeps returning its last value on every rerun; the
    ``token`` it attaches makes sure each interaction is applied once.
    """
    if not value:
        return False
    token = value.get("token")
    if token is not None and token == state.get(LAST_TOKEN_KEY):
        return False
    state[LAST_TOKEN_KEY] = token

    kind = value.get("kind")
    if kind == "marker_click":
        try:
            event = get_event(events, value.get("id"))
        except KeyError:
            _logger.warning("Click on unknown event id %r", value.get("id"))
            return False
        selection.select(event)
        return True

    if kind in ("located", "locate_error"):
        try:
            outcome = parse_locate_outcome(value)
        except LocateOutcomeError as e:
            _logger.warning("%s", e)
            return False
        return tracker.resolve(outcome)

    _logger.warning("Ignoring map value of kind %r", kind)
    return False
