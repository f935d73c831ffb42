"""HTTP client for the Overpass interpreter."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from travel_checkin.adapters.api_request_logger import log_api_request
from travel_checkin.adapters.overpass.constants import DEFAULT_HEADERS
from travel_checkin.domain.errors import UpstreamFailureError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class OverpassHttpClient:
    """Posts Overpass QL queries and returns the decoded JSON."""

    def __init__(
        self, session: "ClientSession", url: str, user_agent: str, timeout_seconds: float
    ) -> None:
        self._session = session
        self._url = url
        self._headers = {**DEFAULT_HEADERS, "User-Agent": user_agent}
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _log_error_response(self, response: "ClientResponse") -> None:
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        retry_after = response.headers.get("Retry-After")
        extra = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.error(f"Overpass returned status {response.status}: {error_body}{extra}")

    async def run_query(self, query: str) -> Any:
        """Execute a query.

        Raises:
            UpstreamFailureError: On HTTP errors, timeouts or invalid JSON.
        """
        log_api_request("POST", self._url, body=query)
        try:
            async with self._session.post(
                self._url, data={"data": query}, headers=self._headers, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    await self._log_error_response(response)
                    raise UpstreamFailureError(f"Overpass returned status {response.status}")
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise UpstreamFailureError("Overpass returned invalid JSON") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamFailureError(f"Overpass request failed: {e!r}") from e
