"""Application layer - use cases and the session context."""

from travel_checkin.application.session import TravelSession

__all__ = ["TravelSession"]
