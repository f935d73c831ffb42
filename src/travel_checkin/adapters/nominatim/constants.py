"""Constants for the Nominatim geocoding adapter.

API Documentation: https://nominatim.org/release-docs/latest/api/Overview/
Usage policy: https://operations.osmfoundation.org/policies/nominatim/
(max 1 request/second, identifying User-Agent required)
"""

NOMINATIM_SEARCH_PATH = "/search"  # GET /search?q=...&countrycodes=..&limit=1
NOMINATIM_REVERSE_PATH = "/reverse"  # GET /reverse?lat=..&lon=..

RATE_LIMITER_NAME = "nominatim"

RESPONSE_FORMAT = "json"

# Address keys holding the settlement name, most specific first
CITY_KEYS = ("city", "town", "village")
