"""Constants for the Overpass adapter.

API Documentation: https://wiki.openstreetmap.org/wiki/Overpass_API
"""

POLICE_TAG_KEY = "amenity"
POLICE_TAG_VALUE = "police"

ELEMENT_KINDS = ("node", "way", "relation")

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded",
}
