"""The traveler's linked police station."""

import logging
from collections.abc import AsyncIterator

from travel_checkin.domain.errors import CorruptStateError
from travel_checkin.domain.geo import distance_km, is_valid_coordinate
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.police_station import PoliceStation
from travel_checkin.domain.models.records import decode_station, encode_station
from travel_checkin.domain.ports.geolocation_provider import GeolocationProvider
from travel_checkin.domain.ports.profile_store import LINKED_STATION_KEY, ProfileStore

logger = logging.getLogger(__name__)


class LinkStateService:
    """Owns the current link and is the only writer of its persisted form."""

    def __init__(self, profile_store: ProfileStore) -> None:
        self._profile_store = profile_store
        self._linked_station: PoliceStation | None = None

    @property
    def linked_station(self) -> PoliceStation | None:
        return self._linked_station

    def link_station(self, station: PoliceStation) -> bool:
        """Link and persist a station.

        Returns:
            True if the link changed; False if the station was already linked
            or has an invalid position.
        """
        if not is_valid_coordinate(station.coordinate):
            logger.warning(f"Refusing to link {station.id}: invalid position")
            return False
        if station == self._linked_station:
            return False

        self._profile_store.set(LINKED_STATION_KEY, encode_station(station))
        self._linked_station = station
        logger.info(f"Linked to {station.name} ({station.id})")
        return True

    def unlink_station(self) -> None:
        """Clear the link and its persisted form."""
        self._profile_store.delete(LINKED_STATION_KEY)
        if self._linked_station is not None:
            logger.info(f"Unlinked from {self._linked_station.name}")
        self._linked_station = None

    def restore_link(self) -> PoliceStation | None:
        """Load the persisted link, discarding it if corrupt or invalid."""
        raw = self._profile_store.get(LINKED_STATION_KEY)
        if raw is None:
            self._linked_station = None
            return None

        try:
            station = decode_station(raw)
            if not is_valid_coordinate(station.coordinate):
                raise CorruptStateError(f"Linked station {station.id} has an invalid position")
        except CorruptStateError as e:
            logger.warning(f"Discarding persisted linked station: {e}")
            self._profile_store.delete(LINKED_STATION_KEY)
            self._linked_station = None
            return None

        self._linked_station = station
        return station

    def current_distance(self, user_location: Coordinate | None) -> float | None:
        """Live distance in km to the linked station, when both positions are valid."""
        station = self._linked_station
        if station is None or user_location is None:
            return None
        if not is_valid_coordinate(user_location) or not is_valid_coordinate(station.coordinate):
            return None
        return distance_km(user_location, station.coordinate)

    async def track_distance(self, provider: GeolocationProvider) -> AsyncIterator[float | None]:
        """Yield the live distance for every position update from ``provider``."""
        async for position in provider.watch_position():
            yield self.current_distance(position)
