"""Geocoding service port."""

from typing import Protocol

from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.location import AddressDetails, Location


class GeocodingService(Protocol):
    """Port for forward and reverse geocoding."""

    async def search(self, query: str, country_code: str) -> list[Location]:
        """Find places matching a free-text query within one country.

        Raises:
            GeocodeError: On transport or parsing failure.
        """
        ...

    async def reverse(self, coordinate: Coordinate) -> AddressDetails:
        """Describe the place at a coordinate.

        Raises:
            GeocodeError: On transport or parsing failure.
        """
        ...
