"""Geographic utility functions, pure Python with no external deps."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in kilometers.

    Uses the Haversine formula. Inputs are WGS84 decimal degrees.
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # rounding can push a past 1 for near-antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def to_cartesian(lat: float, lon: float, radius: float = EARTH_RADIUS_KM) -> tuple[float, float, float]:
    """Project a surface point to Earth-centered (x, y, z), same unit as ``radius``."""
    rlat, rlon = math.radians(lat), math.radians(lon)
    return (
        radius * math.cos(rlat) * math.cos(rlon),
        radius * math.cos(rlat) * math.sin(rlon),
        radius * math.sin(rlat),
    )


def euclidean_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Straight-line (chord) distance through the Earth in kilometers.

    Both points are treated as lying on a sphere of radius EARTH_RADIUS_KM,
    altitude is ignored.
    """
    x1, y1, z1 = to_cartesian(lat1, lon1)
    x2, y2, z2 = to_cartesian(lat2, lon2)
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2 + (z2 - z1) ** 2)
