"""Weather Lookup - city search and Open-Meteo forecasts in a legacy schema.

Architecture::

    datasources/   External APIs (Open-Meteo geocoding, forecast) + transforms
    analysis/      Pure post-processing (daily summaries, today's hourly strip)
    schemas.py     Pydantic output records (current weather, forecast list)
    flows/         Prefect orchestration (lookup city -> fetch -> summarize)
    services/      Shared utilities (HTTP session with retry and timeout)

Data flow: geocoding -> forecast fetch -> transform -> analysis -> CLI / UI
"""

__version__ = "0.1.0"

from weather_lookup.config import Settings, get_settings  # noqa: E402

__all__ = ["Settings", "__version__", "get_settings"]
