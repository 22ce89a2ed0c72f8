"""Reshape Open-Meteo forecast payloads into the legacy output records.

Day/night for the current reading and for every hourly entry is judged
against the *first* day's sunrise/sunset, whichever day the hour falls on.
Hours on later days can therefore get the wrong suffix; this matches what
existing consumers were built against and is left as-is.
"""

from __future__ import annotations

import logging
from typing import Any

from weather_lookup.config import get_settings
from weather_lookup.datasources.weather import codes
from weather_lookup.datasources.weather.daynight import is_night, to_epoch_seconds
from weather_lookup.datasources.weather.models import parse_hourly, round_half_up
from weather_lookup.exceptions import FormatError
from weather_lookup.schemas import (
    CityInfo,
    Clouds,
    Coord,
    CurrentMain,
    CurrentWeather,
    CurrentWind,
    DailyData,
    ForecastEntry,
    ForecastList,
    ForecastMain,
    ForecastWind,
    OpenMeteoDetails,
    WeatherDescription,
)

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("current", "hourly", "daily")


def _require_sections(raw: Any) -> None:
    if not isinstance(raw, dict):
        logger.error("Invalid response format, expected an object: %s", type(raw).__name__)
        raise FormatError("Invalid response format from weather service")
    missing = [
        name for name in REQUIRED_SECTIONS if not raw.get(name) or not isinstance(raw[name], dict)
    ]
    if missing:
        logger.error("Invalid response format, missing sections: %s", ", ".join(missing))
        raise FormatError("Invalid response format from weather service")


def _first(values: list[Any] | None) -> Any:
    return values[0] if values else None


def _description(info: codes.WeatherInfo) -> WeatherDescription:
    return WeatherDescription(icon=info.icon, description=info.description, main=info.main)


def _epoch_or_none(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return to_epoch_seconds(value)
    except (TypeError, ValueError):
        logger.warning("Could not parse timestamp %r", value)
        return None


def to_current_weather(raw: dict[str, Any]) -> CurrentWeather:
    """
    Build the current-conditions record.

    Raises:
        FormatError: ``current``, ``hourly`` or ``daily`` is missing.
    """
    _require_sections(raw)
    current = raw["current"]
    daily = raw["daily"]

    night = is_night(current.get("time"), _first(daily.get("sunrise")), _first(daily.get("sunset")))
    code = current.get("weather_code")
    info = codes.resolve(code, night)

    temp = current.get("temperature_2m")
    if temp is None:
        raise FormatError("Current temperature missing from weather service response")
    pressure = current.get("pressure_msl")

    return CurrentWeather(
        main=CurrentMain(
            temp=round_half_up(temp),
            feels_like=round_half_up(current.get("apparent_temperature") or temp),
            humidity=current.get("relative_humidity_2m"),
            pressure=round_half_up(pressure) if pressure is not None else None,
        ),
        weather=[_description(info)],
        wind=CurrentWind(
            speed=current.get("wind_speed_10m"),
            deg=current.get("wind_direction_10m") or 0,
            gust=current.get("wind_gusts_10m"),
        ),
        clouds=Clouds(cover=current.get("cloud_cover") or 0),
        coord=Coord(lat=raw.get("latitude"), lon=raw.get("longitude")),
        timezone=raw.get("utc_offset_seconds"),
        open_meteo=OpenMeteoDetails(weather_code=code, is_night=night),
    )


def to_forecast_list(raw: dict[str, Any], limit: int | None = None) -> ForecastList:
    """
    Build the hourly forecast list.

    Only the first ``limit`` hourly rows are kept, in provider order.
    ``limit`` defaults to the ``hourly_limit`` setting.  The
    daily arrays are passed through under ``_dailyData`` for weekly
    summaries.

    Raises:
        FormatError: ``current``, ``hourly`` or ``daily`` is missing.
    """
    _require_sections(raw)
    if limit is None:
        limit = get_settings().hourly_limit
    hourly = raw["hourly"]
    daily = raw["daily"]
    sunrise = _first(daily.get("sunrise"))
    sunset = _first(daily.get("sunset"))

    entries: list[ForecastEntry] = []
    for record in parse_hourly(hourly, limit):
        info = codes.resolve(record.weather_code, is_night(record.time, sunrise, sunset))
        try:
            dt = to_epoch_seconds(record.time)
        except (TypeError, ValueError) as exc:
            raise FormatError(f"Invalid hourly timestamp: {record.time!r}") from exc
        entries.append(
            ForecastEntry(
                dt=dt,
                dt_txt=record.time.replace("T", " "),
                main=ForecastMain(temp=record.temperature, humidity=record.humidity or 0),
                weather=[_description(info)],
                wind=ForecastWind(speed=record.wind_speed or 0),
                clouds=Clouds(cover=0),  # not provided hourly
            )
        )

    coord = Coord(lat=raw.get("latitude"), lon=raw.get("longitude"))
    return ForecastList(
        entries=entries,
        city=CityInfo(
            coord=coord,
            timezone=raw.get("utc_offset_seconds"),
            sunrise=_epoch_or_none(sunrise),
            sunset=_epoch_or_none(sunset),
        ),
        daily_data=DailyData(
            time=daily.get("time") or [],
            weather_code=daily.get("weather_code") or [],
            temperature_max=daily.get("temperature_2m_max") or [],
            temperature_min=daily.get("temperature_2m_min") or [],
            wind_speed_max=daily.get("wind_speed_10m_max") or [],
            wind_direction=daily.get("wind_direction_10m_dominant") or [],
            sunrise=daily.get("sunrise") or [],
            sunset=daily.get("sunset") or [],
        ),
    )
