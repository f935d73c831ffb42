"""Shared fixtures."""

from collections.abc import Callable

import pytest
from fakes import RANCHI, FakeFeatureRepository, FakeGeocodingService

from travel_checkin.adapters.storage import InMemoryProfileStore
from travel_checkin.application.services import StationResolver
from travel_checkin.domain.models import Location


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def ranchi_location() -> Location:
    return Location(
        coordinate=RANCHI,
        address="Ranchi, Jharkhand, India",
        city="Ranchi",
        state="Jharkhand",
        country="India",
    )


@pytest.fixture
def make_resolver() -> Callable[..., StationResolver]:
    def _make(
        geocoder: FakeGeocodingService | None = None,
        repository: FakeFeatureRepository | None = None,
        **kwargs: object,
    ) -> StationResolver:
        return StationResolver(
            geocoder or FakeGeocodingService(),
            repository or FakeFeatureRepository(),
            **kwargs,
        )

    return _make
