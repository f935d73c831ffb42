"""Spacing of outgoing requests to public OpenStreetMap services.

Nominatim's usage policy allows at most one request per second from a client.
All geocoding clients in the process share one limiter per service name.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Enforces a minimum delay between requests to one upstream service."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, service_name: str, min_delay_seconds: float = 1.0) -> None:
        """Initialize the rate limiter.

        Args:
            service_name: Name of the upstream service (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.service_name = service_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    async def shared(cls, service_name: str, min_delay_seconds: float = 1.0) -> ApiRateLimiter:
        """Return the process-wide limiter for a service, creating it on first use."""
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            limiter = cls._instances.get(service_name)
            if limiter is None:
                limiter = cls(service_name, min_delay_seconds)
                cls._instances[service_name] = limiter
                logger.info(
                    f"Created rate limiter for {service_name} "
                    f"with {min_delay_seconds}s minimum delay"
                )
            return limiter

    async def acquire(self) -> None:
        """Wait until the next request to the service is allowed."""
        async with self._lock:
            if self._last_request_time is not None:
                wait_time = self.min_delay_seconds - (time.monotonic() - self._last_request_time)
                if wait_time > 0:
                    logger.debug(f"{self.service_name}: waiting {wait_time:.2f}s before next request")
                    await asyncio.sleep(wait_time)

            self._last_request_time = time.monotonic()

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        return None
