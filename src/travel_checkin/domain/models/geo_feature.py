"""Geographic features returned by the nearby-feature query service.

OSM returns police facilities as nodes (points), ways or relations (areas).
Areas carry a precomputed centre. The variant is resolved once at the adapter
boundary so downstream code only calls ``representative_coordinate()``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from travel_checkin.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class PointFeature:
    """A feature mapped as a single point (an OSM node)."""

    source_id: int
    coordinate: Coordinate
    tags: Mapping[str, str] = field(default_factory=dict)
    kind: Literal["node"] = "node"

    def representative_coordinate(self) -> Coordinate:
        """Return the point itself."""
        return self.coordinate


@dataclass(frozen=True)
class AreaFeature:
    """A feature mapped as an area (an OSM way or relation)."""

    source_id: int
    kind: Literal["way", "relation"]
    center: Coordinate
    tags: Mapping[str, str] = field(default_factory=dict)

    def representative_coordinate(self) -> Coordinate:
        """Return the precomputed centroid."""
        return self.center


GeoFeature = PointFeature | AreaFeature


def feature_key(feature: GeoFeature) -> str:
    """Build the composite identifier of a feature, e.g. ``way_1234``."""
    return f"{feature.kind}_{feature.source_id}"
