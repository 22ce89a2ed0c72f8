"""Open-Meteo weather data source.

Fetches current conditions plus hourly and daily forecasts, and reshapes
them into the legacy output records.

Public API:
  - forecast: fetch_forecast (raw payload), fetch_weather_data (transformed)
  - transform: to_current_weather, to_forecast_list
  - codes: WMO code table, resolve, resolve_at, icon_name
  - daynight: is_night, to_epoch_seconds
  - models: HourlyRecord, DailyRecord, parse_hourly, parse_daily
"""

from weather_lookup.datasources.weather.codes import (
    WMO_WEATHER_CODES,
    WeatherCodeEntry,
    WeatherInfo,
    icon_name,
    resolve,
    resolve_at,
)
from weather_lookup.datasources.weather.daynight import is_night, to_epoch_seconds
from weather_lookup.datasources.weather.forecast import (
    fetch_forecast,
    fetch_weather_data,
    validate_coordinates,
)
from weather_lookup.datasources.weather.models import (
    DailyRecord,
    HourlyRecord,
    parse_daily,
    parse_hourly,
)
from weather_lookup.datasources.weather.transform import to_current_weather, to_forecast_list

__all__ = [
    "WMO_WEATHER_CODES",
    "DailyRecord",
    "HourlyRecord",
    "WeatherCodeEntry",
    "WeatherInfo",
    "fetch_forecast",
    "fetch_weather_data",
    "icon_name",
    "is_night",
    "parse_daily",
    "parse_hourly",
    "resolve",
    "resolve_at",
    "to_current_weather",
    "to_epoch_seconds",
    "to_forecast_list",
    "validate_coordinates",
]
