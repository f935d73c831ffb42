"""Timer adapters."""

from travel_checkin.adapters.timers.asyncio_tick_timer import AsyncioTickTimer

__all__ = ["AsyncioTickTimer"]
