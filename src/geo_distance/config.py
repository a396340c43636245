"""Runtime settings, overridable through environment variables."""

from __future__ import annotations

import os

GLOBE_IMAGE_URL = os.getenv(
    "GEO_DISTANCE_GLOBE_IMAGE_URL",
    "https://unpkg.com/three-globe/example/img/earth-blue-marble.jpg",
)

TILE_URL = os.getenv(
    "GEO_DISTANCE_TILE_URL",
    "https://tile.openstreetmap.org/{z}/{x}/{y}.png",
)
TILE_ATTRIBUTION = os.getenv(
    "GEO_DISTANCE_TILE_ATTRIBUTION",
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors',
)

MAP_ZOOM = int(os.getenv("GEO_DISTANCE_MAP_ZOOM", "3"))
WEB_PORT = int(os.getenv("GEO_DISTANCE_WEB_PORT", "8501"))
LOG_LEVEL = os.getenv("GEO_DISTANCE_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
