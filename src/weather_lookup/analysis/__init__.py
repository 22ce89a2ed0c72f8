"""Post-processing of transformed forecasts.

Pure functions over the output records; no I/O, no HTTP, no Prefect
decorators.

Modules:
  - daily_summary: forecast list -> one DaySummary per calendar day
  - today: forecast list -> today's remaining hourly slots
"""

from weather_lookup.analysis.daily_summary import (
    AggregationInput,
    DaySummary,
    FlatHourly,
    HourlyObservation,
    StructuredDaily,
    aggregate_by_day,
    aggregation_input_for,
)
from weather_lookup.analysis.today import today_forecast

__all__ = [
    "AggregationInput",
    "DaySummary",
    "FlatHourly",
    "HourlyObservation",
    "StructuredDaily",
    "aggregate_by_day",
    "aggregation_input_for",
    "today_forecast",
]
