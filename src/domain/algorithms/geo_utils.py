from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.geo import ILatLng

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Mean Earth radius.
EARTH_RADIUS_METERS = 6371000.0


def wrap(value: float, min_value: float, max_value: float) -> float:
    """Wrap ``value`` into the half-open range ``[min_value, max_value)``."""

    delta = max_value - min_value
    return min_value + math.fmod(math.fmod(value - min_value, delta) + delta, delta)


def wrap_longitude(lon: float) -> float:
    return wrap(lon, MIN_LONGITUDE, MAX_LONGITUDE)


def great_circle_distance_m(a: ILatLng, b: ILatLng) -> float:
    """Great-circle distance in meters (spherical law of cosines).

    Altitude is ignored. Points sharing latitude and longitude are exactly
    0.0 apart.
    """

    if a.latitude == b.latitude and a.longitude == b.longitude:
        return 0.0

    a1 = math.radians(a.latitude)
    a2 = math.radians(a.longitude)
    b1 = math.radians(b.latitude)
    b2 = math.radians(b.longitude)

    cos_a1 = math.cos(a1)
    cos_b1 = math.cos(b1)

    t1 = cos_a1 * math.cos(a2) * cos_b1 * math.cos(b2)
    t2 = cos_a1 * math.sin(a2) * cos_b1 * math.sin(b2)
    t3 = math.sin(a1) * math.sin(b1)
    # Rounding can push near-identical points just past 1.0.
    cos_term = max(-1.0, min(1.0, t1 + t2 + t3))

    return EARTH_RADIUS_METERS * math.acos(cos_term)


def haversine_distance_m(a: ILatLng, b: ILatLng) -> float:
    """Great-circle distance in meters, stable for short distances."""

    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_METERS * math.asin(math.sqrt(s))
