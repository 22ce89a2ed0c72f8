"""Per-day forecast summaries for the weekly view.

Two input shapes are supported, and the caller says which one it holds:

- ``StructuredDaily``: the provider already gives per-day min/max,
  sunrise and sunset arrays.  One summary per day, no grouping.
- ``FlatHourly``: legacy list of timestamped readings with textual
  descriptions.  Readings are grouped by calendar date and averaged.

``aggregation_input_for`` picks the variant for a forecast list.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from weather_lookup.datasources.weather import codes
from weather_lookup.datasources.weather.daynight import is_night
from weather_lookup.datasources.weather.models import DailyRecord, parse_daily, round_half_up
from weather_lookup.schemas import ForecastList

logger = logging.getLogger(__name__)

# Open-Meteo has no daily humidity or cloud cover; the UI still shows both.
DEFAULT_DAILY_HUMIDITY = 50
DEFAULT_DAILY_CLOUDS = 50

NOT_FOUND_STATUS = "404"

# =============================================================================
# Data Model
# =============================================================================


@dataclass
class DaySummary:
    """One day of the weekly forecast."""

    date: str
    avg_temp: int
    humidity: float
    wind: float
    clouds: float
    description: str
    icon: str
    temp_max: int | None = None
    temp_min: int | None = None
    wind_direction: float | None = None
    weather_code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Legacy key names; the structured-only keys are omitted for flat input."""
        out: dict[str, Any] = {
            "date": self.date,
            "temp": self.avg_temp,
            "humidity": self.humidity,
            "wind": self.wind,
            "clouds": self.clouds,
            "description": self.description,
            "icon": self.icon,
        }
        if self.temp_max is not None:
            out.update(
                tempMax=self.temp_max,
                tempMin=self.temp_min,
                windDirection=self.wind_direction,
                weatherCode=self.weather_code,
            )
        return out


@dataclass
class HourlyObservation:
    """A legacy forecast-list reading."""

    dt_txt: str
    temp: float
    humidity: float
    wind: float
    clouds: float
    description: str

    @property
    def date(self) -> str:
        """Calendar date prefix (``YYYY-MM-DD``)."""
        return self.dt_txt[:10]


@dataclass
class StructuredDaily:
    """Per-day arrays already aggregated by the provider."""

    days: list[DailyRecord] = field(default_factory=list)

    @classmethod
    def from_daily_data(cls, daily: Mapping[str, Any] | None) -> StructuredDaily:
        """Build from a ``_dailyData`` block (or raw provider ``daily`` section)."""
        if not daily:
            return cls()
        return cls(days=parse_daily(dict(daily)))


@dataclass
class FlatHourly:
    """Flat list of readings plus the description -> icon table to use."""

    records: list[HourlyObservation] = field(default_factory=list)
    icon_table: Sequence[Mapping[str, str]] = ()
    status: str | None = None

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any] | None,
        icon_table: Sequence[Mapping[str, str]] = (),
    ) -> FlatHourly:
        """Parse a legacy ``{"cod", "list": [...]}`` forecast payload."""
        if not payload:
            return cls(icon_table=icon_table)
        status = payload.get("cod")
        records = [
            HourlyObservation(
                dt_txt=item["dt_txt"],
                temp=item["main"]["temp"],
                humidity=item["main"]["humidity"],
                wind=item["wind"]["speed"],
                clouds=item["clouds"]["all"],
                description=item["weather"][0]["description"],
            )
            for item in payload.get("list") or []
        ]
        return cls(
            records=records,
            icon_table=icon_table,
            status=str(status) if status is not None else None,
        )


AggregationInput = StructuredDaily | FlatHourly


# =============================================================================
# Helpers
# =============================================================================


def group_by_date(records: Iterable[HourlyObservation]) -> dict[str, list[HourlyObservation]]:
    """Group readings by calendar date, keeping first-seen date order."""
    groups: dict[str, list[HourlyObservation]] = {}
    for record in records:
        groups.setdefault(record.date, []).append(record)
    return groups


def average(values: Sequence[float]) -> float:
    """Arithmetic mean. Raises ValueError on an empty sequence."""
    if not values:
        raise ValueError("Cannot average an empty sequence")
    return sum(values) / len(values)


def most_frequent(values: Iterable[str]) -> str:
    """
    Most common value; on a tie the one seen first wins.

    Raises:
        ValueError: ``values`` is empty.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("Cannot pick most frequent of an empty sequence")
    best, best_count = next(iter(counts.items()))
    for value, count in counts.items():
        if count > best_count:
            best, best_count = value, count
    return best


def description_to_icon(description: str, icon_table: Sequence[Mapping[str, str]]) -> str:
    """Icon for a textual description, or ``"unknown"``."""
    for item in icon_table:
        if item.get("description") == description:
            return item.get("icon") or codes.UNKNOWN_ICON
    return codes.UNKNOWN_ICON


# =============================================================================
# Aggregation
# =============================================================================


def _summarize_structured(source: StructuredDaily) -> list[DaySummary]:
    summaries: list[DaySummary] = []
    for day in source.days:
        if day.temp_max is None or day.temp_min is None:
            logger.warning("Skipping %s: daily temperature missing", day.date)
            continue
        midday = f"{day.date}T12:00:00"
        info = codes.resolve(day.weather_code, is_night(midday, day.sunrise, day.sunset))
        summaries.append(
            DaySummary(
                date=day.date,
                avg_temp=round_half_up((day.temp_max + day.temp_min) / 2),
                humidity=DEFAULT_DAILY_HUMIDITY,
                wind=round(day.wind_speed_max or 0, 2),
                clouds=DEFAULT_DAILY_CLOUDS,
                description=info.description,
                icon=info.icon,
                temp_max=round_half_up(day.temp_max),
                temp_min=round_half_up(day.temp_min),
                wind_direction=day.wind_direction or 0,
                weather_code=day.weather_code,
            )
        )
    return summaries


def _summarize_flat(source: FlatHourly) -> list[DaySummary]:
    if source.status == NOT_FOUND_STATUS:
        return []

    summaries: list[DaySummary] = []
    for date, group in group_by_date(source.records).items():
        description = most_frequent(r.description for r in group)
        summaries.append(
            DaySummary(
                date=date,
                avg_temp=round_half_up(average([r.temp for r in group])),
                humidity=round_half_up(average([r.humidity for r in group])),
                wind=round(average([r.wind for r in group]), 2),
                clouds=round_half_up(average([r.clouds for r in group])),
                description=description,
                icon=description_to_icon(description, source.icon_table),
            )
        )
    return summaries


def aggregate_by_day(source: AggregationInput) -> list[DaySummary]:
    """
    Collapse a forecast into one summary per calendar day.

    Args:
        source: ``StructuredDaily`` or ``FlatHourly``.

    Returns:
        Summaries ordered as the dates first appear in the input; empty
        for empty input or a not-found payload.
    """
    if isinstance(source, StructuredDaily):
        return _summarize_structured(source)
    if isinstance(source, FlatHourly):
        return _summarize_flat(source)
    raise TypeError(f"Unsupported aggregation input: {type(source).__name__}")


def aggregation_input_for(
    forecast: ForecastList | Mapping[str, Any] | None,
    icon_table: Sequence[Mapping[str, str]] = (),
) -> AggregationInput:
    """
    Pick the aggregation input for a forecast.

    ``ForecastList`` records (and their dumped dicts) carry ``_dailyData``
    and use the structured path; legacy payloads without it fall back to
    flat grouping with ``icon_table``.
    """
    if isinstance(forecast, ForecastList):
        if forecast.daily_data is not None:
            return StructuredDaily.from_daily_data(forecast.daily_data.model_dump())
        return FlatHourly.from_payload(forecast.to_dict(), icon_table)

    if forecast and forecast.get("_dailyData"):
        return StructuredDaily.from_daily_data(forecast["_dailyData"])
    return FlatHourly.from_payload(forecast, icon_table)
