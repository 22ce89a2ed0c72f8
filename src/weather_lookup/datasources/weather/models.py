"""Parsed forecast records.

Open-Meteo returns parallel arrays (``hourly.time[i]``,
``hourly.temperature_2m[i]``, ...).  These dataclasses zip one index of
those arrays into a record.  Timestamps are kept as the provider's text so
that a malformed value only affects the record it belongs to.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

# =============================================================================
# Records
# =============================================================================


@dataclass
class HourlyRecord:
    """One hourly forecast row."""

    time: str
    temperature: float | None
    weather_code: int | None
    humidity: float | None
    wind_speed: float | None


@dataclass
class DailyRecord:
    """One daily forecast row."""

    date: str
    weather_code: int | None
    temp_max: float
    temp_min: float
    wind_speed_max: float | None
    wind_direction: float | None
    sunrise: str | None
    sunset: str | None


# =============================================================================
# Parsing
# =============================================================================


def _at(values: list[Any] | None, i: int) -> Any:
    """``values[i]`` or None when the array is missing or short."""
    if not values or i >= len(values):
        return None
    return values[i]


def parse_hourly(hourly: dict[str, Any], limit: int | None = None) -> list[HourlyRecord]:
    """Zip the hourly arrays into records, keeping at most ``limit`` in provider order."""
    times = hourly.get("time") or []
    if limit is not None:
        times = times[:limit]
    return [
        HourlyRecord(
            time=t,
            temperature=_at(hourly.get("temperature_2m"), i),
            weather_code=_at(hourly.get("weather_code"), i),
            humidity=_at(hourly.get("relative_humidity_2m"), i),
            wind_speed=_at(hourly.get("wind_speed_10m"), i),
        )
        for i, t in enumerate(times)
    ]


def parse_daily(daily: dict[str, Any]) -> list[DailyRecord]:
    """
    Zip daily arrays into records.

    Accepts both the provider's key names (``temperature_2m_max``) and the
    shortened names used in a forecast list's ``_dailyData`` block
    (``temperature_max``).
    """

    def pick(*keys: str) -> list[Any] | None:
        for key in keys:
            if key in daily:
                values: list[Any] = daily[key]
                return values
        return None

    weather_code = pick("weather_code")
    temp_max = pick("temperature_max", "temperature_2m_max")
    temp_min = pick("temperature_min", "temperature_2m_min")
    wind_speed = pick("wind_speed_max", "wind_speed_10m_max")
    wind_direction = pick("wind_direction", "wind_direction_10m_dominant")
    sunrise = pick("sunrise")
    sunset = pick("sunset")

    return [
        DailyRecord(
            date=d,
            weather_code=_at(weather_code, i),
            temp_max=_at(temp_max, i),
            temp_min=_at(temp_min, i),
            wind_speed_max=_at(wind_speed, i),
            wind_direction=_at(wind_direction, i),
            sunrise=_at(sunrise, i),
            sunset=_at(sunset, i),
        )
        for i, d in enumerate(daily.get("time") or [])
    ]


# =============================================================================
# Helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)
