"""Shared fixtures: a trimmed Open-Meteo forecast payload."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def make_payload(hours: int = 3) -> dict[str, Any]:
    """Forecast payload with ``hours`` hourly rows starting 2026-02-04T00:00."""
    times = [f"2026-02-{4 + h // 24:02d}T{h % 24:02d}:00" for h in range(hours)]
    return {
        "latitude": 48.85,
        "longitude": 2.35,
        "utc_offset_seconds": 3600,
        "current": {
            "time": "2026-02-04T14:00",
            "temperature_2m": 7.5,
            "relative_humidity_2m": 81,
            "apparent_temperature": 4.4,
            "weather_code": 61,
            "cloud_cover": 90,
            "pressure_msl": 1012.6,
            "wind_speed_10m": 14.2,
            "wind_direction_10m": 230,
            "wind_gusts_10m": 31.7,
        },
        "hourly": {
            "time": times,
            "temperature_2m": [float(h) for h in range(hours)],
            "weather_code": [3] * hours,
            "relative_humidity_2m": [80] * hours,
            "wind_speed_10m": [10.0] * hours,
        },
        "daily": {
            "time": ["2026-02-04", "2026-02-05"],
            "weather_code": [61, 0],
            "temperature_2m_max": [10.0, 20.0],
            "temperature_2m_min": [0.0, 10.0],
            "apparent_temperature_max": [8.0, 18.0],
            "apparent_temperature_min": [-2.0, 8.0],
            "sunrise": ["2026-02-04T08:10", "2026-02-05T08:08"],
            "sunset": ["2026-02-04T17:45", "2026-02-05T17:47"],
            "wind_speed_10m_max": [22.456, None],
            "wind_direction_10m_dominant": [230, 180],
        },
    }


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def payload_factory() -> Callable[..., dict[str, Any]]:
    return make_payload
