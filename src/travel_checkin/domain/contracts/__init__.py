"""Contracts (protocols) for internal collaborators."""

from travel_checkin.domain.contracts.tick_timer import TickTimerProtocol

__all__ = ["TickTimerProtocol"]
