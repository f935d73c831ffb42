"""Human readable addresses from sparse OSM address tags."""

from collections.abc import Mapping

ADDRESS_NOT_AVAILABLE = "Address not available"

# Order matters: house number, street, city, state, postcode.
ADDRESS_TAGS = (
    "addr:housenumber",
    "addr:street",
    "addr:city",
    "addr:state",
    "addr:postcode",
)


def build_address(tags: Mapping[str, str | None]) -> str:
    """Join the known address tags with ", "."""
    parts = [tags[key] for key in ADDRESS_TAGS if tags.get(key)]
    return ", ".join(parts) if parts else ADDRESS_NOT_AVAILABLE
