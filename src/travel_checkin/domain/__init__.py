"""Domain layer - core models, geo math and errors."""

from travel_checkin.domain.address import build_address
from travel_checkin.domain.geo import distance_km, is_valid_coordinate
from travel_checkin.domain.models import (
    Coordinate,
    Location,
    PoliceStation,
    Ticket,
)
from travel_checkin.domain.ports import (
    GeocodingService,
    GeolocationProvider,
    PoliceFeatureRepository,
    ProfileStore,
)

__all__ = [
    "Coordinate",
    "GeocodingService",
    "GeolocationProvider",
    "Location",
    "PoliceFeatureRepository",
    "PoliceStation",
    "ProfileStore",
    "Ticket",
    "build_address",
    "distance_km",
    "is_valid_coordinate",
]
