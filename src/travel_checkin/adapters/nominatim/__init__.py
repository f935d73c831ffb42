"""Nominatim (OpenStreetMap) geocoding adapters."""

from travel_checkin.adapters.nominatim.nominatim_geocoding_service import (
    NominatimGeocodingService,
)

__all__ = ["NominatimGeocodingService"]
