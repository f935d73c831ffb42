"""Application services (use cases)."""

from travel_checkin.application.services.link_state_service import LinkStateService
from travel_checkin.application.services.registration_service import RegistrationService
from travel_checkin.application.services.station_resolver import (
    StationResolver,
    fallback_stations,
)
from travel_checkin.application.services.station_search_service import (
    NearbySearchState,
    SearchResult,
    StationSearchService,
)
from travel_checkin.application.services.ticket_lifecycle import (
    TicketLifecycle,
    format_countdown,
)

__all__ = [
    "LinkStateService",
    "NearbySearchState",
    "RegistrationService",
    "SearchResult",
    "StationResolver",
    "StationSearchService",
    "TicketLifecycle",
    "fallback_stations",
    "format_countdown",
]
