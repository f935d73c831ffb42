"""Overpass QL query construction."""

from travel_checkin.adapters.overpass.constants import (
    ELEMENT_KINDS,
    POLICE_TAG_KEY,
    POLICE_TAG_VALUE,
)


def build_police_query(lat: float, lng: float, radius_meters: int, timeout_seconds: int) -> str:
    """Build one query covering nodes, ways and relations tagged as police.

    ``out center`` makes Overpass attach a centroid to ways and relations.
    """
    selector = f'["{POLICE_TAG_KEY}"="{POLICE_TAG_VALUE}"](around:{radius_meters},{lat},{lng});'
    statements = "\n".join(f"  {kind}{selector}" for kind in ELEMENT_KINDS)
    return f"[out:json][timeout:{timeout_seconds}];\n(\n{statements}\n);\nout center meta;"
