"""Ports (interfaces) for the ports-and-adapters architecture."""

from travel_checkin.domain.ports.geocoding_service import GeocodingService
from travel_checkin.domain.ports.geolocation_provider import GeolocationProvider
from travel_checkin.domain.ports.police_feature_repository import PoliceFeatureRepository
from travel_checkin.domain.ports.profile_store import (
    LINKED_STATION_KEY,
    REGISTRATION_KEY,
    ProfileStore,
)

__all__ = [
    "LINKED_STATION_KEY",
    "REGISTRATION_KEY",
    "GeocodingService",
    "GeolocationProvider",
    "PoliceFeatureRepository",
    "ProfileStore",
]
