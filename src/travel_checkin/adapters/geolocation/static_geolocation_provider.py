"""Geolocation provider reporting a fixed position."""

import asyncio
from collections.abc import AsyncIterator

from travel_checkin.domain.errors import GeolocationError
from travel_checkin.domain.geo import is_valid_coordinate
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.ports.geolocation_provider import GeolocationProvider


class StaticGeolocationProvider(GeolocationProvider):
    """Reports a position given up front, e.g. on the command line."""

    def __init__(self, coordinate: Coordinate | None, update_interval_seconds: float = 5.0) -> None:
        self._coordinate = coordinate
        self._update_interval_seconds = update_interval_seconds

    async def current_position(self) -> Coordinate:
        if self._coordinate is None or not is_valid_coordinate(self._coordinate):
            raise GeolocationError("No position available")
        return self._coordinate

    async def watch_position(self) -> AsyncIterator[Coordinate]:
        while True:
            yield await self.current_position()
            await asyncio.sleep(self._update_interval_seconds)
