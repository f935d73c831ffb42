"""HTTP client for Nominatim requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from travel_checkin.adapters.api_rate_limiter import ApiRateLimiter
from travel_checkin.adapters.api_request_logger import log_api_request
from travel_checkin.adapters.nominatim.constants import (
    NOMINATIM_REVERSE_PATH,
    NOMINATIM_SEARCH_PATH,
    RATE_LIMITER_NAME,
    RESPONSE_FORMAT,
)
from travel_checkin.domain.errors import GeocodeError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class NominatimHttpClient:
    """Thin async client for the Nominatim search and reverse endpoints."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        user_agent: str,
        timeout_seconds: float = 10.0,
        min_delay_seconds: float = 1.0,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            base_url: Nominatim base URL without trailing slash.
            user_agent: Identifying User-Agent, required by the usage policy.
            timeout_seconds: Total timeout per request.
            min_delay_seconds: Minimum spacing between requests.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.shared(
                RATE_LIMITER_NAME, self._min_delay_seconds
            )
        return self._rate_limiter

    async def _read_json(self, response: "ClientResponse", url: str) -> Any:
        if response.status != 200:
            response_text = await response.text()
            raise GeocodeError(
                f"Nominatim returned status {response.status} for {url}: {response_text[:200]}"
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise GeocodeError(f"Nominatim returned invalid JSON for {url}") from e

    async def _get(self, path: str, params: dict[str, str | int]) -> Any:
        url = f"{self._base_url}{path}"
        rate_limiter = await self._get_rate_limiter()
        await rate_limiter.acquire()

        log_api_request("GET", url, params=params)
        try:
            async with self._session.get(
                url, params=params, headers=self._headers, timeout=self._timeout
            ) as response:
                return await self._read_json(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error calling Nominatim {url}: {e!r}")
            raise GeocodeError(f"Nominatim request failed: {e!r}") from e

    async def search(self, query: str, country_code: str, limit: int = 1) -> list[dict[str, Any]]:
        """Search places by free text within one country.

        Returns:
            Raw result objects, best match first.

        Raises:
            GeocodeError: On transport failure or unexpected payload.
        """
        params: dict[str, str | int] = {
            "format": RESPONSE_FORMAT,
            "q": query,
            "countrycodes": country_code,
            "limit": limit,
            "addressdetails": 1,
        }
        data = await self._get(NOMINATIM_SEARCH_PATH, params)
        if not isinstance(data, list):
            raise GeocodeError(f"Unexpected Nominatim search payload: {type(data).__name__}")
        return [item for item in data if isinstance(item, dict)]

    async def reverse(self, lat: float, lng: float) -> dict[str, Any]:
        """Look up the place at a coordinate.

        Raises:
            GeocodeError: On transport failure or unexpected payload.
        """
        params: dict[str, str | int] = {"format": RESPONSE_FORMAT, "lat": str(lat), "lon": str(lng)}
        data = await self._get(NOMINATIM_REVERSE_PATH, params)
        if not isinstance(data, dict):
            raise GeocodeError(f"Unexpected Nominatim reverse payload: {type(data).__name__}")
        if "error" in data:
            raise GeocodeError(f"Nominatim reverse lookup failed: {data['error']}")
        return data
