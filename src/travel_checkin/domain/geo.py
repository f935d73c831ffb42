"""Great-circle distance and coordinate validation."""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from travel_checkin.domain.models.coordinate import Coordinate

EARTH_RADIUS_KM = 6371.0


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def is_valid_coordinate(candidate: Any) -> bool:
    """Check that ``candidate`` carries finite numeric ``lat`` and ``lng``.

    Accepts ``Coordinate`` instances, any object exposing ``lat``/``lng``
    attributes, or mappings with those keys. Never raises.
    """
    if candidate is None:
        return False
    if isinstance(candidate, Mapping):
        lat, lng = candidate.get("lat"), candidate.get("lng")
    else:
        lat, lng = getattr(candidate, "lat", None), getattr(candidate, "lng", None)
    return _is_finite_number(lat) and _is_finite_number(lng)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two coordinates in kilometres."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.lng - a.lng)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    h = min(1.0, h)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
