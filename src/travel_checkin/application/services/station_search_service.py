"""Session-level station search with last-request-wins ordering."""

import logging
from dataclasses import dataclass, field

from travel_checkin.application.services.station_resolver import StationResolver
from travel_checkin.domain.geo import is_valid_coordinate
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.location import Location
from travel_checkin.domain.models.police_station import PoliceStation

logger = logging.getLogger(__name__)


@dataclass
class NearbySearchState:
    """Candidate stations from the most recently issued search."""

    query_location: Location | None = None
    candidates: list[PoliceStation] = field(default_factory=list)
    request_id: int = 0

    def find_candidate(self, station_id: str) -> PoliceStation | None:
        """Look up a candidate by id."""
        return next((s for s in self.candidates if s.id == station_id), None)

    @property
    def selectable_candidates(self) -> list[PoliceStation]:
        """Candidates whose position can be shown and linked."""
        return [s for s in self.candidates if is_valid_coordinate(s.coordinate)]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one committed search."""

    request_id: int
    location: Location
    stations: list[PoliceStation]


class StationSearchService:
    """Runs searches and commits only the newest one to the session state.

    Requests are ordered by issuance. A search that completes after a newer
    one was issued is discarded, even if it finishes last.
    """

    def __init__(self, resolver: StationResolver, state: NearbySearchState | None = None) -> None:
        self._resolver = resolver
        self.state = state or NearbySearchState()
        self._latest_request_id = 0

    def _issue(self) -> int:
        self._latest_request_id += 1
        return self._latest_request_id

    def _commit(
        self, request_id: int, location: Location, stations: list[PoliceStation]
    ) -> SearchResult | None:
        if request_id != self._latest_request_id:
            logger.info(
                f"Discarding stale search #{request_id} (latest is #{self._latest_request_id})"
            )
            return None
        self.state.query_location = location
        self.state.candidates = stations
        self.state.request_id = request_id
        return SearchResult(request_id=request_id, location=location, stations=stations)

    async def search_by_place(
        self, name: str, radius_meters: int | None = None
    ) -> SearchResult | None:
        """Geocode a place name and look up stations around it.

        Returns:
            The committed result, or None if a newer search superseded it.

        Raises:
            InvalidInputError, NotFoundError, GeocodeError: From geocoding.
        """
        request_id = self._issue()
        location = await self._resolver.geocode_city(name)
        stations = await self._resolver.find_nearby_police_stations(
            location.coordinate, radius_meters
        )
        return self._commit(request_id, location, stations)

    async def search_by_coordinate(
        self, coordinate: Coordinate, radius_meters: int | None = None
    ) -> SearchResult | None:
        """Look up stations around a coordinate, e.g. the device position.

        Returns:
            The committed result, or None if a newer search superseded it.
        """
        request_id = self._issue()
        stations = await self._resolver.find_nearby_police_stations(coordinate, radius_meters)
        details = await self._resolver.reverse_geocode(coordinate)
        location = Location(coordinate=coordinate).with_details(details)
        return self._commit(request_id, location, stations)
