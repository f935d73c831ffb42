"""Nearby police feature port."""

from typing import Protocol

from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.geo_feature import GeoFeature


class PoliceFeatureRepository(Protocol):
    """Port for querying police-tagged map features around a point."""

    async def find_police_features(
        self, center: Coordinate, radius_meters: int
    ) -> list[GeoFeature]:
        """Return police facilities within ``radius_meters`` of ``center``.

        Raises:
            UpstreamFailureError: On transport failure or malformed payloads.
        """
        ...
