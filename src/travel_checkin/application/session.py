"""Session context owning the traveler's state."""

import logging
from collections.abc import Callable
from datetime import date, datetime, time

from travel_checkin.application.services.link_state_service import LinkStateService
from travel_checkin.application.services.registration_service import RegistrationService
from travel_checkin.application.services.station_resolver import StationResolver
from travel_checkin.application.services.station_search_service import StationSearchService
from travel_checkin.application.services.ticket_lifecycle import TicketLifecycle
from travel_checkin.domain.contracts.tick_timer import TickTimerProtocol
from travel_checkin.domain.errors import RegistrationRequiredError
from travel_checkin.domain.models.ticket import Ticket
from travel_checkin.domain.ports.profile_store import ProfileStore

logger = logging.getLogger(__name__)


class TravelSession:
    """Explicit owner of search results, the linked station and the ticket.

    Create one per local traveler session and pass it to the presentation
    layer instead of keeping state in module globals.
    """

    def __init__(
        self,
        resolver: StationResolver,
        profile_store: ProfileStore,
        timer: TickTimerProtocol,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.resolver = resolver
        self.search = StationSearchService(resolver)
        self.link = LinkStateService(profile_store)
        self.registration = RegistrationService(profile_store, clock)
        self.tickets = TicketLifecycle(timer, clock)

    def start(self) -> None:
        """Restore persisted state."""
        station = self.link.restore_link()
        if station is not None:
            logger.info(f"Restored link to {station.name}")

    def open_ticket(
        self,
        destination: str,
        return_time: time | str | None,
        travel_date: date | str | None = None,
        transport: str | None = None,
    ) -> Ticket:
        """Open a ticket for a registered traveler.

        Raises:
            RegistrationRequiredError: If no valid registration is stored.
            InvalidInputError: If the ticket fields are invalid.
        """
        if not self.registration.is_registered():
            raise RegistrationRequiredError("Complete registration before opening a ticket")
        return self.tickets.open_ticket(destination, return_time, travel_date, transport)

    def close(self) -> None:
        """Release the ticket timer."""
        self.tickets.close_ticket()

    def __enter__(self) -> "TravelSession":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
