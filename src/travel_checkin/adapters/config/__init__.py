"""Configuration adapters."""

from travel_checkin.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
