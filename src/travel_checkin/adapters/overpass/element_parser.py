"""Parsing of Overpass elements into geo features."""

import logging
from typing import Any

from travel_checkin.domain.errors import UpstreamFailureError
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.geo_feature import AreaFeature, GeoFeature, PointFeature

logger = logging.getLogger(__name__)


def _coordinate(container: Any) -> Coordinate | None:
    if not isinstance(container, dict):
        return None
    lat, lon = container.get("lat"), container.get("lon")
    if lat is None or lon is None:
        return None
    try:
        return Coordinate(lat=float(lat), lng=float(lon))
    except (TypeError, ValueError):
        return None


def _tags(element: dict[str, Any]) -> dict[str, str]:
    tags = element.get("tags")
    if not isinstance(tags, dict):
        return {}
    return {str(k): str(v) for k, v in tags.items() if v is not None}


def parse_element(element: Any) -> GeoFeature | None:
    """Turn one Overpass element into a feature.

    Returns None for elements of unknown kind or without a usable position.
    """
    if not isinstance(element, dict):
        return None

    kind = element.get("type")
    source_id = element.get("id")
    if not isinstance(source_id, int) or isinstance(source_id, bool):
        return None

    if kind == "node":
        coordinate = _coordinate(element)
        if coordinate is None:
            return None
        return PointFeature(source_id=source_id, coordinate=coordinate, tags=_tags(element))

    if kind in ("way", "relation"):
        center = _coordinate(element.get("center"))
        if center is None:
            return None
        return AreaFeature(source_id=source_id, kind=kind, center=center, tags=_tags(element))

    return None


def parse_elements(payload: Any) -> list[GeoFeature]:
    """Parse an Overpass JSON response, preserving upstream order.

    Raises:
        UpstreamFailureError: If the payload has no ``elements`` list.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("elements"), list):
        raise UpstreamFailureError("Overpass response has no 'elements' list")

    features: list[GeoFeature] = []
    skipped = 0
    for element in payload["elements"]:
        feature = parse_element(element)
        if feature is None:
            skipped += 1
            continue
        features.append(feature)

    if skipped:
        logger.debug(f"Skipped {skipped} Overpass element(s) without a usable position")
    return features
