"""Geocoding service adapter backed by Nominatim."""

import logging
from typing import TYPE_CHECKING, Any

from travel_checkin.adapters.nominatim.constants import CITY_KEYS
from travel_checkin.adapters.nominatim.http_client import NominatimHttpClient
from travel_checkin.domain.errors import GeocodeError
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.location import AddressDetails, Location
from travel_checkin.domain.ports.geocoding_service import GeocodingService

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def _address_details(payload: dict[str, Any]) -> AddressDetails:
    address = payload.get("address")
    if not isinstance(address, dict):
        address = {}
    city = next((address[key] for key in CITY_KEYS if address.get(key)), None)
    return AddressDetails(
        address=payload.get("display_name"),
        city=city,
        state=address.get("state"),
        country=address.get("country"),
    )


class NominatimGeocodingService(GeocodingService):
    """Adapter for forward and reverse geocoding using the Nominatim API."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        user_agent: str,
        timeout_seconds: float = 10.0,
        min_delay_seconds: float = 1.0,
    ) -> None:
        """Initialize with a shared aiohttp session and service settings."""
        self._http_client = NominatimHttpClient(
            session,
            base_url=base_url,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
            min_delay_seconds=min_delay_seconds,
        )

    async def search(self, query: str, country_code: str) -> list[Location]:
        """Find the best matching place for a query within one country.

        Args:
            query: Free-text place name (e.g., "Ranchi").
            country_code: Two-letter country code the search is limited to.

        Returns:
            At most one Location; empty if nothing matched.
        """
        results = await self._http_client.search(query, country_code, limit=1)
        return [self._build_location(result) for result in results[:1]]

    async def reverse(self, coordinate: Coordinate) -> AddressDetails:
        """Describe the place at a coordinate."""
        payload = await self._http_client.reverse(coordinate.lat, coordinate.lng)
        return _address_details(payload)

    @staticmethod
    def _build_location(result: dict[str, Any]) -> Location:
        """Build a Location from a Nominatim search result.

        Nominatim serializes coordinates as strings.
        """
        try:
            coordinate = Coordinate(lat=float(result["lat"]), lng=float(result["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodeError(f"Nominatim result without usable coordinates: {e!r}") from e

        details = _address_details(result)
        return Location(coordinate=coordinate).with_details(details)
