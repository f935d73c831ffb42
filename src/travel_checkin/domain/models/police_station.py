"""Police station domain model."""

from dataclasses import dataclass

from travel_checkin.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class PoliceStation:
    """A police facility near a query point.

    ``id`` is unique within one resolver call only. ``distance`` is the
    great-circle distance in kilometres from the query point; the resolver
    always fills it in.
    """

    id: str
    name: str
    coordinate: Coordinate
    address: str
    city: str
    state: str
    contact: str | None = None
    distance: float | None = None
