"""Resolution of place names and coordinates into nearby police stations."""

import asyncio
import logging
from collections.abc import Mapping

from travel_checkin.domain.address import ADDRESS_NOT_AVAILABLE, build_address
from travel_checkin.domain.errors import (
    GeocodeError,
    GeolocationError,
    InvalidInputError,
    NotFoundError,
    TravelCheckinError,
)
from travel_checkin.domain.geo import distance_km, is_valid_coordinate
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.geo_feature import GeoFeature, feature_key
from travel_checkin.domain.models.location import AddressDetails, Location
from travel_checkin.domain.models.police_station import PoliceStation
from travel_checkin.domain.ports.geocoding_service import GeocodingService
from travel_checkin.domain.ports.geolocation_provider import GeolocationProvider
from travel_checkin.domain.ports.police_feature_repository import PoliceFeatureRepository

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_METERS = 10000
DEFAULT_MAX_STATIONS = 10
DEFAULT_STATION_NAME = "Police Station"
UNKNOWN_REGION = "Unknown"

NAME_TAGS = ("name", "name:en", "official_name")
CONTACT_TAGS = ("phone", "contact:phone")

# (name, lat offset, lng offset) in degrees from the query point
FALLBACK_STATIONS = (
    ("Local Police Station", 0.01, 0.01),
    ("Central Police Station", -0.01, -0.01),
    ("Traffic Police Station", 0.005, -0.005),
)


def _first_tag(tags: Mapping[str, str], keys: tuple[str, ...]) -> str | None:
    return next((tags[key] for key in keys if tags.get(key)), None)


def fallback_stations(origin: Coordinate) -> list[PoliceStation]:
    """Deterministic placeholder stations around ``origin``.

    Used when the nearby-feature service cannot be reached so that the
    traveler always has candidates to choose from.
    """
    stations = []
    for index, (name, d_lat, d_lng) in enumerate(FALLBACK_STATIONS):
        coordinate = origin.offset(d_lat, d_lng)
        stations.append(
            PoliceStation(
                id=f"fallback_{index}",
                name=name,
                coordinate=coordinate,
                address=ADDRESS_NOT_AVAILABLE,
                city=UNKNOWN_REGION,
                state=UNKNOWN_REGION,
                distance=distance_km(origin, coordinate),
            )
        )
    return stations


def station_from_feature(origin: Coordinate, feature: GeoFeature) -> PoliceStation | None:
    """Build a station from a feature; None if its position is unusable."""
    coordinate = feature.representative_coordinate()
    if not is_valid_coordinate(coordinate):
        return None

    tags = feature.tags
    return PoliceStation(
        id=feature_key(feature),
        name=_first_tag(tags, NAME_TAGS) or DEFAULT_STATION_NAME,
        coordinate=coordinate,
        address=build_address(tags),
        city=tags.get("addr:city", ""),
        state=tags.get("addr:state", ""),
        contact=_first_tag(tags, CONTACT_TAGS),
        distance=distance_km(origin, coordinate),
    )


def rank_stations(
    origin: Coordinate, features: list[GeoFeature], max_stations: int = DEFAULT_MAX_STATIONS
) -> list[PoliceStation]:
    """Deduplicate, sort nearest-first (stable) and truncate."""
    seen: set[str] = set()
    stations: list[PoliceStation] = []
    for feature in features:
        station = station_from_feature(origin, feature)
        if station is None:
            logger.debug(f"Dropping {feature_key(feature)}: invalid position")
            continue
        if station.id in seen:
            continue
        seen.add(station.id)
        stations.append(station)

    stations.sort(key=lambda s: s.distance)
    return stations[:max_stations]


class StationResolver:
    """Turns place names or coordinates into ranked nearby police stations."""

    def __init__(
        self,
        geocoding_service: GeocodingService,
        feature_repository: PoliceFeatureRepository,
        country_code: str = "in",
        default_radius_meters: int = DEFAULT_RADIUS_METERS,
        max_stations: int = DEFAULT_MAX_STATIONS,
        lookup_timeout_seconds: float = 30.0,
    ) -> None:
        """Initialize the resolver.

        Args:
            geocoding_service: Forward/reverse geocoder.
            feature_repository: Source of police-tagged features.
            country_code: Country forward geocoding is restricted to.
            default_radius_meters: Search radius when the caller gives none.
            max_stations: Upper bound on returned stations.
            lookup_timeout_seconds: Client-side bound on the feature lookup.
        """
        self._geocoding_service = geocoding_service
        self._feature_repository = feature_repository
        self._country_code = country_code
        self._default_radius_meters = default_radius_meters
        self._max_stations = max_stations
        self._lookup_timeout_seconds = lookup_timeout_seconds

    async def geocode_city(self, name: str) -> Location:
        """Resolve a place name to its best (first) match.

        Raises:
            InvalidInputError: If the name is blank.
            NotFoundError: If nothing matched.
            GeocodeError: On transport or parsing failure.
        """
        query = (name or "").strip()
        if not query:
            raise InvalidInputError("Place name is required")

        try:
            results = await self._geocoding_service.search(query, self._country_code)
        except GeocodeError:
            raise
        except TravelCheckinError as e:
            raise GeocodeError(f'Failed to geocode "{query}": {e}') from e
        except Exception as e:
            raise GeocodeError(f'Failed to geocode "{query}": {e!r}') from e

        if not results:
            raise NotFoundError(f'Location "{query}" not found')

        location = results[0]
        if not is_valid_coordinate(location.coordinate):
            raise GeocodeError(f'Geocoder returned an invalid position for "{query}"')

        logger.info(
            f'Geocoded "{query}" to ({location.coordinate.lat:.5f}, {location.coordinate.lng:.5f})'
        )
        return location

    async def reverse_geocode(self, coordinate: Coordinate) -> AddressDetails:
        """Best-effort address lookup; an empty result on any failure."""
        try:
            return await self._geocoding_service.reverse(coordinate)
        except Exception as e:
            logger.warning(f"Reverse geocoding failed: {e!r}")
            return AddressDetails()

    async def locate_user(self, provider: GeolocationProvider) -> Location:
        """Current device position, enriched with its address when available.

        Raises:
            GeolocationError: If the provider fails or reports an invalid position.
        """
        try:
            coordinate = await provider.current_position()
        except GeolocationError:
            raise
        except Exception as e:
            raise GeolocationError(f"Could not determine current position: {e!r}") from e

        if not is_valid_coordinate(coordinate):
            raise GeolocationError("Geolocation provider reported an invalid position")

        details = await self.reverse_geocode(coordinate)
        return Location(coordinate=coordinate).with_details(details)

    async def find_nearby_police_stations(
        self, coordinate: Coordinate, radius_meters: int | None = None
    ) -> list[PoliceStation]:
        """Police stations around ``coordinate``, nearest first.

        Never fails for a valid coordinate: any upstream error, malformed
        response or timeout yields the fallback set instead.

        Raises:
            InvalidInputError: If ``coordinate`` is not a valid position or
                ``radius_meters`` is not positive.
        """
        if not is_valid_coordinate(coordinate):
            raise InvalidInputError("A valid coordinate is required to search for stations")

        radius = self._default_radius_meters if radius_meters is None else radius_meters
        if radius <= 0:
            raise InvalidInputError(f"Search radius must be positive, got {radius}")
        try:
            features = await asyncio.wait_for(
                self._feature_repository.find_police_features(coordinate, radius),
                timeout=self._lookup_timeout_seconds,
            )
            stations = rank_stations(coordinate, features, self._max_stations)
        except Exception as e:
            logger.error(f"Failed to fetch nearby police stations, using fallback: {e!r}")
            return fallback_stations(coordinate)

        logger.info(f"Resolved {len(stations)} police station(s) within {radius}m")
        return stations
