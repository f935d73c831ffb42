"""Overpass (OpenStreetMap) nearby feature adapters."""

from travel_checkin.adapters.overpass.overpass_police_feature_repository import (
    OverpassPoliceFeatureRepository,
)

__all__ = ["OverpassPoliceFeatureRepository"]
