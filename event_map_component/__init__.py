import os
import streamlit.components.v1 as components

from event_viewer.config import (
    MAP_HEIGHT,
    MAX_BOUNDS_VISCOSITY,
    MAX_ZOOM,
    MIN_ZOOM,
    TILE_ATTRIBUTION,
    TILE_URL,
    WORLD_BOUNDS,
)
from event_viewer.markers import marker_icon

# Static Leaflet page speaking the Streamlit component protocol
_component_dir = os.path.join(os.path.dirname(__file__), "frontend", "build")

# Declare the component, referencing that build folder
event_map_component = components.declare_component(
    "event_map_component",
    path=_component_dir
)


def event_map(markers, center, zoom, user_position=None, locate_request=None, key=None):
    """
    Renders the events map. 'markers' is a list of dicts:
      [{"id": "study-abroad-fair-2025", "name": "Study Abroad Fair", "lat": 35.3, "lng": -80.7}, ...]
    'locate_request' is the id of a pending locate request, or None.
    Returns the last interaction as a dict, one of:
      {"kind": "marker_click", "id": ..., "token": ...}
      {"kind": "located", "request_id": ..., "lat": ..., "lng": ..., "token": ...}
      {"kind": "locate_error", "request_id": ..., "message": ..., "token": ...}
    """
    return event_map_component(
        markers=markers,
        center=list(center),
        zoom=zoom,
        user_position=list(user_position) if user_position else None,
        locate_request=locate_request,
        icon=marker_icon(),
        tiles={"url": TILE_URL, "attribution": TILE_ATTRIBUTION},
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        max_bounds=[list(corner) for corner in WORLD_BOUNDS],
        max_bounds_viscosity=MAX_BOUNDS_VISCOSITY,
        height=MAP_HEIGHT,
        key=key,
        default=None,
    )
