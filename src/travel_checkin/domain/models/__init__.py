"""Domain models for traveler check-in."""

from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.geo_feature import (
    AreaFeature,
    GeoFeature,
    PointFeature,
    feature_key,
)
from travel_checkin.domain.models.location import AddressDetails, Location
from travel_checkin.domain.models.police_station import PoliceStation
from travel_checkin.domain.models.registration import Registration
from travel_checkin.domain.models.ticket import CountdownStatus, Ticket, TicketState

__all__ = [
    "AddressDetails",
    "AreaFeature",
    "Coordinate",
    "CountdownStatus",
    "GeoFeature",
    "Location",
    "PointFeature",
    "PoliceStation",
    "Registration",
    "Ticket",
    "TicketState",
    "feature_key",
]
