"""Traveler registration domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Registration:
    """The completed registration of the local traveler."""

    full_name: str
    phone_number: str
    email: str
    emergency_contact: str
    city: str
    registered_at: datetime
    opt_in: bool = True
    terms_accepted: bool = True
