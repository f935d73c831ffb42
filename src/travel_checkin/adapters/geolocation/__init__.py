"""Geolocation adapters."""

from travel_checkin.adapters.geolocation.static_geolocation_provider import (
    StaticGeolocationProvider,
)

__all__ = ["StaticGeolocationProvider"]
