"""Geolocation provider port."""

from collections.abc import AsyncIterator
from typing import Protocol

from travel_checkin.domain.models.coordinate import Coordinate


class GeolocationProvider(Protocol):
    """Port for the device position."""

    async def current_position(self) -> Coordinate:
        """Return the current position once.

        Raises:
            GeolocationError: If no position can be obtained.
        """
        ...

    def watch_position(self) -> AsyncIterator[Coordinate]:
        """Stream position updates until the consumer stops iterating."""
        ...
