"""
Configuration for the campus events map
=======================================
Paths, map defaults and external endpoints in one place.
"""

import logging
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent

EVENTS_DATA_PATH = PACKAGE_ROOT / 'data' / 'events.json'
STYLE_PATH = PROJECT_ROOT / 'style.css'

# =============================================================================
# MAP DEFAULTS
# =============================================================================

# Student Union, UNC Charlotte
DEFAULT_POSITION = (35.30881988721451, -80.73359802880277)
LOCATE_ZOOM = 17

MIN_ZOOM = 2
MAX_ZOOM = 18

WORLD_BOUNDS = ((-90, -180), (90, 180))
MAX_BOUNDS_VISCOSITY = 1.0

TILE_URL = 'https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png'
TILE_ATTRIBUTION = '&copy; OpenStreetMap contributors'

EVENT_ICON = {
    'iconUrl': 'https://cdn-icons-png.flaticon.com/512/1673/1673188.png',
    'iconSize': [32, 32],
    'iconAnchor': [16, 32],
    'popupAnchor': [0, -32],
}

MAP_HEIGHT = 640

# =============================================================================
# EXTERNAL SERVICES
# =============================================================================

DIRECTIONS_BASE_URL = 'https://www.google.com/maps/dir/?api=1'
GEOCODER_USER_AGENT = 'campus_events_map'
GEOCODER_TIMEOUT = 5
GEOCODE_CACHE_TTL = 3600

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
