"""Coordinate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in decimal degrees."""

    lat: float
    lng: float

    def offset(self, d_lat: float, d_lng: float) -> "Coordinate":
        """Return a coordinate shifted by the given number of degrees."""
        return Coordinate(lat=self.lat + d_lat, lng=self.lng + d_lng)
