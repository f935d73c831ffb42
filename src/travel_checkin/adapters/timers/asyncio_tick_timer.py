"""Recurring tick timer running on the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from travel_checkin.domain.contracts.tick_timer import TickTimerProtocol

logger = logging.getLogger(__name__)


class AsyncioTickTimer(TickTimerProtocol):
    """Calls a callback every ``interval_seconds`` from a single asyncio task.

    Starting while a task is live cancels that task first, so at most one
    schedule ever exists per timer.
    """

    def __init__(self, interval_seconds: float = 1.0) -> None:
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, on_tick: Callable[[], None]) -> None:
        """Start ticking; must be called from within a running event loop."""
        if self.is_running:
            logger.debug("Replacing running tick timer")
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._tick_loop(on_tick))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def stop(self) -> None:
        """Cancel and wait until the task has finished."""
        task = self._task
        self.cancel()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                logger.debug("Tick timer cancelled")

    async def _tick_loop(self, on_tick: Callable[[], None]) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                on_tick()
            except Exception:
                logger.exception("Tick callback failed; stopping timer")
                return
