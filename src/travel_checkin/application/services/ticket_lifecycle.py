"""Travel ticket lifecycle and countdown."""

import logging
import math
from collections.abc import Callable
from datetime import date, datetime, time
from types import TracebackType

from travel_checkin.domain.contracts.tick_timer import TickTimerProtocol
from travel_checkin.domain.errors import InvalidInputError
from travel_checkin.domain.models.ticket import CountdownStatus, Ticket, TicketState

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def format_countdown(seconds: int) -> str:
    """Format a duration as zero-padded ``HH:MM:SS``."""
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _parse_return_time(value: time | str | None) -> time:
    if isinstance(value, time):
        return value
    text = (value or "").strip()
    if not text:
        raise InvalidInputError("Return time is required")
    try:
        return time.fromisoformat(text)
    except ValueError as e:
        raise InvalidInputError(f"Return time must be HH:MM, got {text!r}") from e


def _parse_travel_date(value: date | str | None, today: date) -> date:
    if value is None:
        return today
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return today
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidInputError(f"Travel date must be YYYY-MM-DD, got {text!r}") from e


class TicketLifecycle:
    """State machine for the single active travel ticket.

    ``NO_TICKET`` -> ``ACTIVE`` on open, back to ``NO_TICKET`` on close.
    Reaching zero does not close the ticket; it only flags it as expired.
    The tick timer is live exactly while the state is ``ACTIVE``.
    """

    def __init__(self, timer: TickTimerProtocol, clock: Clock = datetime.now) -> None:
        """Initialize the lifecycle.

        Args:
            timer: Recurring timer driving the one-second countdown.
            clock: Source of the current wall-clock time.
        """
        self._timer = timer
        self._clock = clock
        self._ticket: Ticket | None = None
        self._time_remaining = 0

    @property
    def state(self) -> TicketState:
        return TicketState.ACTIVE if self._ticket is not None else TicketState.NO_TICKET

    @property
    def ticket(self) -> Ticket | None:
        return self._ticket

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    def _seconds_until_return(self, ticket: Ticket) -> int:
        delta = (ticket.return_datetime - self._clock()).total_seconds()
        return max(0, math.floor(delta))

    def open_ticket(
        self,
        destination: str,
        return_time: time | str | None,
        travel_date: date | str | None = None,
        transport: str | None = None,
    ) -> Ticket:
        """Open a ticket, replacing any active one.

        Raises:
            InvalidInputError: If destination or return time is missing or
                malformed. Nothing changes in that case.
        """
        destination = (destination or "").strip()
        if not destination:
            raise InvalidInputError("Destination is required")
        parsed_return_time = _parse_return_time(return_time)

        now = self._clock()
        ticket = Ticket(
            destination=destination,
            return_time=parsed_return_time,
            travel_date=_parse_travel_date(travel_date, now.date()),
            created_at=now,
            transport=(transport or "").strip() or None,
        )

        self._timer.cancel()
        self._ticket = ticket
        self._time_remaining = self._seconds_until_return(ticket)
        self._timer.start(self._tick)

        logger.info(
            f"Opened ticket to {ticket.destination}, return by "
            f"{ticket.return_datetime.isoformat(timespec='minutes')} "
            f"({format_countdown(self._time_remaining)} remaining)"
        )
        return ticket

    def close_ticket(self) -> None:
        """Stop the countdown and discard the ticket; a no-op without one."""
        self._timer.cancel()
        if self._ticket is None:
            logger.debug("close_ticket called without an active ticket")
            return
        logger.info(f"Closed ticket to {self._ticket.destination}")
        self._ticket = None
        self._time_remaining = 0

    def resync(self) -> int:
        """Recompute the remaining time from the wall clock."""
        if self._ticket is not None:
            self._time_remaining = self._seconds_until_return(self._ticket)
        return self._time_remaining

    def status(self) -> CountdownStatus | None:
        """Countdown snapshot, or None without an active ticket."""
        if self._ticket is None:
            return None
        return CountdownStatus(
            time_remaining=self._time_remaining,
            display=format_countdown(self._time_remaining),
            expired=self._time_remaining == 0,
        )

    def _tick(self) -> None:
        if self._ticket is None:
            return
        if self._time_remaining > 0:
            self._time_remaining -= 1
            if self._time_remaining == 0:
                logger.warning(f"Ticket to {self._ticket.destination} has expired")

    def __enter__(self) -> "TicketLifecycle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close_ticket()
