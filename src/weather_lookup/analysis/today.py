"""Today's hourly strip: the remaining forecast slots for the current date."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from weather_lookup.datasources.weather.models import round_half_up
from weather_lookup.schemas import ForecastList

# The strip has room for six slots.
MAX_SLOTS = 6


def today_forecast(
    forecast: ForecastList | Mapping[str, Any] | None,
    current_date: str,
    current_timestamp: int,
) -> list[dict[str, str]]:
    """
    Upcoming slots for ``current_date``.

    Keeps entries whose ``dt_txt`` falls on ``current_date`` (first 10
    characters) and whose ``dt`` is after ``current_timestamp``.  Six or
    fewer survive as-is; with seven or more only the last six are kept.

    Args:
        forecast: Forecast list record or its legacy dict form.
        current_date: Date string starting with ``YYYY-MM-DD``.
        current_timestamp: Epoch seconds "now".

    Returns:
        Dicts with ``time`` (``HH:MM``), ``icon`` and ``temperature``
        (e.g. ``"12 °C"``).
    """
    payload = forecast.to_dict() if isinstance(forecast, ForecastList) else forecast
    if not payload or str(payload.get("cod")) == "404":
        return []

    day = current_date[:10]
    slots: list[dict[str, str]] = []
    for item in payload.get("list") or []:
        if not item["dt_txt"].startswith(day) or item["dt"] <= current_timestamp:
            continue
        slots.append(
            {
                "time": item["dt_txt"].split(" ")[1][:5],
                "icon": item["weather"][0]["icon"],
                "temperature": f"{round_half_up(item['main']['temp'])} °C",
            }
        )

    if len(slots) <= MAX_SLOTS:
        return slots
    return slots[-MAX_SLOTS:]
