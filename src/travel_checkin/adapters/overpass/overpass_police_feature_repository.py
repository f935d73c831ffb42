"""Police feature repository adapter backed by the Overpass API."""

import logging
from typing import TYPE_CHECKING

from travel_checkin.adapters.overpass.element_parser import parse_elements
from travel_checkin.adapters.overpass.http_client import OverpassHttpClient
from travel_checkin.adapters.overpass.query_builder import build_police_query
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.geo_feature import GeoFeature
from travel_checkin.domain.ports.police_feature_repository import PoliceFeatureRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class OverpassPoliceFeatureRepository(PoliceFeatureRepository):
    """Adapter querying OSM police facilities through Overpass."""

    def __init__(
        self,
        session: "ClientSession",
        url: str,
        user_agent: str,
        server_timeout_seconds: int = 25,
        client_timeout_seconds: float = 30.0,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Shared aiohttp session.
            url: Overpass interpreter endpoint.
            user_agent: User-Agent header for the requests.
            server_timeout_seconds: Timeout hint embedded in the query.
            client_timeout_seconds: Total client-side timeout per request.
        """
        self._server_timeout_seconds = server_timeout_seconds
        self._http_client = OverpassHttpClient(
            session, url=url, user_agent=user_agent, timeout_seconds=client_timeout_seconds
        )

    async def find_police_features(
        self, center: Coordinate, radius_meters: int
    ) -> list[GeoFeature]:
        """Return police facilities around ``center`` in upstream order."""
        query = build_police_query(
            center.lat, center.lng, radius_meters, self._server_timeout_seconds
        )
        payload = await self._http_client.run_query(query)
        features = parse_elements(payload)
        logger.info(
            f"Overpass returned {len(features)} police feature(s) within {radius_meters}m "
            f"of ({center.lat:.5f}, {center.lng:.5f})"
        )
        return features
