"""
Application settings.

Loaded once per process from the environment (prefix ``WEATHER_LOOKUP_``)
and an optional ``.env`` file. Settings are frozen; call ``get_settings()``
rather than instantiating ``Settings`` directly.

Example::

    WEATHER_LOOKUP_REQUEST_TIMEOUT=5 weather-lookup current Paris
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_LOOKUP_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    app_name: str = "weather-lookup"
    app_env: str = "development"
    debug: bool = False

    geocoding_api_url: str = "https://geocoding-api.open-meteo.com/v1"
    weather_api_url: str = "https://api.open-meteo.com/v1"
    user_agent: str = "weather-lookup/0.1"
    request_timeout: float = Field(default=10.0, gt=0)

    forecast_days: int = Field(default=7, ge=1, le=16)
    hourly_limit: int = Field(default=40, ge=1)

    geocoding_count: int = Field(default=30, ge=1, le=100)
    language: str = "en"
    min_query_length: int = Field(default=2, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
