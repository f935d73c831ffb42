"""Serialized forms of the records kept in the profile store.

The profile store holds opaque JSON strings. These schemas define their shape
and are the single place where persisted data is parsed; any failure surfaces
as ``CorruptStateError``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, ValidationError

from travel_checkin.domain.errors import CorruptStateError
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.police_station import PoliceStation
from travel_checkin.domain.models.registration import Registration


class StationRecord(BaseModel):
    """Persisted form of the linked police station."""

    model_config = ConfigDict(strict=True, frozen=True)

    id: str
    name: str
    lat: float
    lng: float
    address: str = "Address not available"
    city: str = ""
    state: str = ""
    contact: str | None = None
    distance: float | None = None

    @classmethod
    def from_station(cls, station: PoliceStation) -> "StationRecord":
        return cls(
            id=station.id,
            name=station.name,
            lat=station.coordinate.lat,
            lng=station.coordinate.lng,
            address=station.address,
            city=station.city,
            state=station.state,
            contact=station.contact,
            distance=station.distance,
        )

    def to_station(self) -> PoliceStation:
        return PoliceStation(
            id=self.id,
            name=self.name,
            coordinate=Coordinate(lat=self.lat, lng=self.lng),
            address=self.address,
            city=self.city,
            state=self.state,
            contact=self.contact,
            distance=self.distance,
        )


class RegistrationRecord(BaseModel):
    """Persisted form of the traveler registration."""

    model_config = ConfigDict(frozen=True)

    full_name: str
    phone_number: str
    email: str
    emergency_contact: str
    city: str
    opt_in: bool = True
    terms: bool
    registered_at: datetime
    is_registered: bool = True

    @classmethod
    def from_registration(cls, registration: Registration) -> "RegistrationRecord":
        return cls(
            full_name=registration.full_name,
            phone_number=registration.phone_number,
            email=registration.email,
            emergency_contact=registration.emergency_contact,
            city=registration.city,
            opt_in=registration.opt_in,
            terms=registration.terms_accepted,
            registered_at=registration.registered_at,
        )

    def to_registration(self) -> Registration:
        return Registration(
            full_name=self.full_name,
            phone_number=self.phone_number,
            email=self.email,
            emergency_contact=self.emergency_contact,
            city=self.city,
            registered_at=self.registered_at,
            opt_in=self.opt_in,
            terms_accepted=self.terms,
        )


def encode_station(station: PoliceStation) -> str:
    """Serialize a station for the profile store."""
    return StationRecord.from_station(station).model_dump_json()


def decode_station(raw: str) -> PoliceStation:
    """Parse a persisted station.

    Raises:
        CorruptStateError: If the payload is not valid JSON or misses fields.
    """
    try:
        return StationRecord.model_validate_json(raw).to_station()
    except ValidationError as e:
        raise CorruptStateError(f"Invalid linked station record: {e.error_count()} error(s)") from e


def encode_registration(registration: Registration) -> str:
    """Serialize a registration for the profile store."""
    return RegistrationRecord.from_registration(registration).model_dump_json()


def decode_registration(raw: str) -> Registration:
    """Parse a persisted registration.

    Raises:
        CorruptStateError: If the payload is not valid JSON, misses fields,
            or the terms were never accepted.
    """
    try:
        record = RegistrationRecord.model_validate_json(raw)
    except ValidationError as e:
        raise CorruptStateError(f"Invalid registration record: {e.error_count()} error(s)") from e
    if not record.terms or not record.is_registered:
        raise CorruptStateError("Registration record is not complete")
    return record.to_registration()
