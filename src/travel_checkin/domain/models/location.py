"""Location domain models."""

from dataclasses import dataclass, replace

from travel_checkin.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class AddressDetails:
    """Address fields of a place, as returned by reverse geocoding.

    Every field is optional; an instance with all fields unset is the
    "nothing known" result of a failed lookup.
    """

    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether no address field is known."""
        return not any((self.address, self.city, self.state, self.country))


@dataclass(frozen=True)
class Location:
    """A resolved place: a coordinate plus optional address fields."""

    coordinate: Coordinate
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None

    def with_details(self, details: AddressDetails) -> "Location":
        """Return a copy enriched with the known fields of ``details``."""
        return replace(
            self,
            address=details.address or self.address,
            city=details.city or self.city,
            state=details.state or self.state,
            country=details.country or self.country,
        )
