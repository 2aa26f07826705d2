import logging

import streamlit as st
from event_map_component import event_map

from event_viewer.config import GEOCODE_CACHE_TTL, LOG_FORMAT, LOG_LEVEL, STYLE_PATH
from event_viewer.dispatch import handle_map_event
from event_viewer.exceptions import EventDataError
from event_viewer.geo import describe_position, distance_km, format_distance, format_event_window
from event_viewer.links import sidebar_links
from event_viewer.location import LocationTracker
from event_viewer.markers import build_markers
from event_viewer.models import Coordinate
from event_viewer.selection import SidebarController
from event_viewer.store import default_event_store

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
_logger = logging.getLogger("events_map")

st.set_page_config(page_title="Campus Events Map", layout="wide")


#____Load Events and Style_______________________________________________________________________________
# Built once per process; the store is immutable
@st.cache_resource(show_spinner=False)
def load_store():
    return default_event_store()

@st.cache_resource
def load_css():
    with open(STYLE_PATH, 'r', encoding='utf-8') as f:
        css = f.read()
    return f"<style>{css}</style>"

@st.cache_data(ttl=GEOCODE_CACHE_TTL, show_spinner=False)
def position_address(lat: float, lng: float):
    return describe_position(Coordinate(lat, lng))

st.markdown(load_css(), unsafe_allow_html=True)

try:
    events = load_store()
except EventDataError as e:
    _logger.error("Event data rejected (%s): %s", e.source, e)
    st.error(f"Could not load events: {e}")
    st.stop()

markers = build_markers(events)


#____Session State_______________________________________________________________________________________
selection = SidebarController(st.session_state)
tracker = LocationTracker(st.session_state)
tracker.mount()


#____Location Error Notification_________________________________________________________________________
@st.dialog("Location unavailable")
def location_error_dialog(message):
    st.write(message)
    if st.button("OK", key="location_error_ok"):
        st.rerun()

if tracker.notification:
    message = tracker.notification
    tracker.acknowledge()
    location_error_dialog(message)


#____Sidebar_____________________________________________________________________________________________
def render_sidebar(container, event):
    if container.button("✕", key="sidebar_close"):
        selection.close()
        st.rerun()

    container.markdown(f"### {event.name}")
    if event.venue:
        container.caption(event.venue)
    container.markdown(f'<div class="eventwhen">{format_event_window(event)}</div>', unsafe_allow_html=True)
    container.write(event.description)

    position = tracker.current_position
    if position is not None:
        away = format_distance(distance_km(position, event.position))
        container.markdown(f'<div class="eventdistance">{away} from you</div>', unsafe_allow_html=True)

    for label, url in sidebar_links(event):
        container.link_button(label, url, type="primary" if label == "Navigate" else "secondary")


#____Map and Interactions________________________________________________________________________________
if st.button("Current Location", key="current_location"):
    tracker.request_fix()

map_col, side_col = st.columns([3, 1])

with map_col:
    value = event_map(
        markers,
        center=tracker.center,
        zoom=tracker.zoom,
        user_position=tracker.current_position,
        locate_request=tracker.pending_request,
        key="events_map",
    )
    if handle_map_event(value, st.session_state, events, selection, tracker):
        st.rerun()

    position = tracker.current_position
    if position is not None:
        address = position_address(position.lat, position.lng)
        if address:
            st.caption(f"📍 {address}")

with side_col:
    side = st.container()
    if selection.is_open:
        render_sidebar(side, selection.selected_event)
    elif selection.selected_event is not None:
        if side.button("Show last event", key="sidebar_reopen"):
            selection.reopen()
            st.rerun()
    else:
        side.info("ℹ️ Click a marker to see the event details.")
