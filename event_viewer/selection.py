"""
Selection / sidebar controller
==============================
Tracks which event the sidebar shows and whether it is visible.

State lives in a mutable mapping (``st.session_state`` in the app) so it
survives Streamlit reruns. Closing the sidebar only hides it: the last
selected event is kept until another marker is clicked, and
:meth:`SidebarController.reopen` brings it back.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from event_viewer.models import Event

_logger = logging.getLogger(__name__)

SELECTED_KEY = "selected_event"
OPEN_KEY = "sidebar_open"


class SidebarController:
    def __init__(self, state: MutableMapping[str, Any]):
        self._state = state
        state.setdefault(SELECTED_KEY, None)
        state.setdefault(OPEN_KEY, False)

    @property
    def selected_event(self) -> Event | None:
        return self._state[SELECTED_KEY]

    @property
    def is_open(self) -> bool:
        return bool(self._state[OPEN_KEY])

    def select(self, event: Event) -> None:
        self._state[SELECTED_KEY] = event
        self._state[OPEN_KEY] = True
        _logger.debug("Sidebar opened for %s", event.id)

    def close(self) -> None:
        self._state[OPEN_KEY] = False
        _logger.debug("Sidebar closed")

    def reopen(self) -> bool:
        """Show the retained event again. Returns ``False`` if there is none."""
        if self.selected_event is None:
            return False
        self._state[OPEN_KEY] = True
        return True
