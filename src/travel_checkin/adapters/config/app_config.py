"""12-factor configuration adapter using environment variables and a .env file."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding (Nominatim) configuration
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Base URL of the Nominatim geocoding service",
    )
    geocode_country_code: str = Field(
        default="in",
        description="ISO 3166-1 alpha-2 country code that forward geocoding is restricted to",
    )
    geocode_timeout_seconds: float = Field(
        default=10.0, description="Timeout for geocoding requests in seconds"
    )
    nominatim_min_delay_seconds: float = Field(
        default=1.0,
        description="Minimum delay between Nominatim requests (usage policy: 1 request/second)",
    )
    user_agent: str = Field(
        default="travel-checkin/0.1.0",
        description="User-Agent header sent to the OpenStreetMap services",
    )

    # Nearby feature (Overpass) configuration
    overpass_url: str = Field(
        default="https://overpass-api.de/api/interpreter",
        description="Overpass API interpreter endpoint",
    )
    overpass_server_timeout_seconds: int = Field(
        default=25, description="Server-side timeout hint embedded in the Overpass query"
    )
    overpass_client_timeout_seconds: float = Field(
        default=30.0, description="Client-side bound on the total wait for Overpass results"
    )
    search_radius_meters: int = Field(
        default=10000, description="Radius for nearby police station searches in meters"
    )
    max_stations: int = Field(
        default=10, description="Maximum number of police stations returned per search"
    )

    # Ticket configuration
    countdown_tick_seconds: float = Field(
        default=1.0, description="Interval between countdown decrements in seconds"
    )

    # Persistence
    profile_store_path: str = Field(
        default=str(Path.home() / ".travel_checkin" / "profile.json"),
        description="Path of the JSON file holding registration and linked station",
    )

    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    @field_validator("geocode_country_code")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Validate the country code is two letters."""
        if len(v) != 2 or not v.isalpha():
            raise ValueError("geocode_country_code must be a two-letter country code")
        return v.lower()

    @field_validator("search_radius_meters", "max_stations")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """Validate counts and radii are positive."""
        if v <= 0:
            raise ValueError("search_radius_meters and max_stations must be positive")
        return v

    @field_validator(
        "countdown_tick_seconds", "geocode_timeout_seconds", "overpass_client_timeout_seconds"
    )
    @classmethod
    def validate_positive_seconds(cls, v: float) -> float:
        """Validate durations are positive."""
        if v <= 0:
            raise ValueError("durations must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that ignores the .env file."""
        return cls(_env_file=None, **overrides)
