"""Travel ticket domain models."""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum

EXPIRED_LABEL = "Time Expired!"


class TicketState(Enum):
    """Lifecycle state of the travel ticket."""

    NO_TICKET = "no_ticket"
    ACTIVE = "active"


@dataclass(frozen=True)
class Ticket:
    """A time-boxed travel plan with a target return time."""

    destination: str
    return_time: time
    travel_date: date
    created_at: datetime
    transport: str | None = None

    @property
    def return_datetime(self) -> datetime:
        """Wall-clock moment the traveler is expected back."""
        return datetime.combine(self.travel_date, self.return_time)


@dataclass(frozen=True)
class CountdownStatus:
    """Snapshot of the ticket countdown for display."""

    time_remaining: int
    display: str
    expired: bool

    @property
    def label(self) -> str:
        """Human readable status line."""
        if self.expired:
            return EXPIRED_LABEL
        return f"Time Remaining: {self.display}"
