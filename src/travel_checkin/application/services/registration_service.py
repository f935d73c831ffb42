"""Traveler registration."""

import logging
from collections.abc import Callable
from datetime import datetime

from travel_checkin.domain.errors import CorruptStateError, InvalidInputError
from travel_checkin.domain.models.records import decode_registration, encode_registration
from travel_checkin.domain.models.registration import Registration
from travel_checkin.domain.ports.profile_store import REGISTRATION_KEY, ProfileStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("full_name", "phone_number", "email", "emergency_contact", "city")


class RegistrationService:
    """Validates, persists and restores the traveler registration."""

    def __init__(
        self, profile_store: ProfileStore, clock: Callable[[], datetime] = datetime.now
    ) -> None:
        self._profile_store = profile_store
        self._clock = clock

    def register(
        self,
        full_name: str,
        phone_number: str,
        email: str,
        emergency_contact: str,
        city: str,
        terms_accepted: bool,
        opt_in: bool = True,
    ) -> Registration:
        """Validate and store a registration.

        Raises:
            InvalidInputError: If a required field is blank or the terms
                were not accepted.
        """
        values = {
            "full_name": (full_name or "").strip(),
            "phone_number": (phone_number or "").strip(),
            "email": (email or "").strip(),
            "emergency_contact": (emergency_contact or "").strip(),
            "city": (city or "").strip(),
        }
        missing = [name for name in REQUIRED_FIELDS if not values[name]]
        if missing:
            raise InvalidInputError(f"Missing required field(s): {', '.join(missing)}")
        if not terms_accepted:
            raise InvalidInputError("The terms and privacy policy must be accepted")

        registration = Registration(
            **values,
            registered_at=self._clock(),
            opt_in=opt_in,
            terms_accepted=True,
        )
        self._profile_store.set(REGISTRATION_KEY, encode_registration(registration))
        logger.info(f"Registered {registration.full_name} ({registration.city})")
        return registration

    def load_registration(self) -> Registration | None:
        """Return the stored registration; corrupt data is cleared."""
        raw = self._profile_store.get(REGISTRATION_KEY)
        if raw is None:
            return None
        try:
            return decode_registration(raw)
        except CorruptStateError as e:
            logger.warning(f"Discarding persisted registration: {e}")
            self._profile_store.delete(REGISTRATION_KEY)
            return None

    def is_registered(self) -> bool:
        return self.load_registration() is not None
