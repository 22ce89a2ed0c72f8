"""7-day weather forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

import logging
import math
from typing import Any

import requests

from weather_lookup.config import get_settings
from weather_lookup.datasources.weather.client import (
    CURRENT_VARS,
    DAILY_VARS,
    FORECAST_PATH,
    HOURLY_VARS,
)
from weather_lookup.datasources.weather.transform import to_current_weather, to_forecast_list
from weather_lookup.exceptions import (
    FormatError,
    InvalidCoordinatesError,
    RateLimitError,
    ServiceUnavailableError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from weather_lookup.schemas import CurrentWeather, ForecastList
from weather_lookup.services.http import session

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection."


def validate_coordinates(lat: Any, lon: Any) -> tuple[float, float]:
    """
    Coerce and range-check a coordinate pair.

    Accepts numbers or numeric strings.  Zero is a valid coordinate.

    Raises:
        ValidationError: Either value is not a finite number or is out of range.
    """
    try:
        lat_f = float(lat)
        lon_f = float(lon)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Valid latitude and longitude coordinates are required") from exc

    if math.isnan(lat_f) or math.isnan(lon_f):
        raise ValidationError("Valid latitude and longitude coordinates are required")
    if not -90 <= lat_f <= 90:
        raise ValidationError("Latitude must be between -90 and 90 degrees")
    if not -180 <= lon_f <= 180:
        raise ValidationError("Longitude must be between -180 and 180 degrees")
    return lat_f, lon_f


def _raise_for_status(resp: requests.Response) -> None:
    """Map a non-2xx response to the matching ``UpstreamError`` subclass."""
    if resp.ok:
        return
    status = resp.status_code
    body = resp.text
    logger.error("Weather API error response (%d): %s", status, body)
    if status == 400:
        raise InvalidCoordinatesError(
            f"Invalid coordinates provided. Response: {body}", status, body
        )
    if status == 429:
        raise RateLimitError("Rate limit exceeded. Please try again later.", status, body)
    if status == 500:
        raise ServiceUnavailableError("Weather service temporarily unavailable", status, body)
    raise UpstreamError(f"Weather API error: {status}. Response: {body}", status, body)


def fetch_forecast(lat: Any, lon: Any) -> dict[str, Any]:
    """
    Fetch current, hourly and daily forecast data from Open-Meteo.

    Coordinates are validated before any request is made.

    Args:
        lat: Latitude in degrees (number or numeric string).
        lon: Longitude in degrees.

    Returns:
        Raw API response dict with ``current``, ``hourly`` and ``daily`` keys.

    Raises:
        ValidationError: Bad coordinates.
        TransportError: The service could not be reached.
        UpstreamError: Non-2xx status (see subclasses for 400/429/500).
        FormatError: Body is not JSON.
    """
    lat_f, lon_f = validate_coordinates(lat, lon)
    settings = get_settings()

    url = f"{settings.weather_api_url}{FORECAST_PATH}"
    params: dict[str, str | int | float] = {
        "latitude": lat_f,
        "longitude": lon_f,
        "current": ",".join(CURRENT_VARS),
        "hourly": ",".join(HOURLY_VARS),
        "daily": ",".join(DAILY_VARS),
        "timezone": "auto",
        "forecast_days": settings.forecast_days,
    }

    logger.debug("Fetching weather for (%s, %s) from %s", lat_f, lon_f, url)
    try:
        resp = session.get(url, params=params)
    except requests.RequestException as exc:
        logger.error("Weather request failed: %s", exc)
        raise TransportError(NETWORK_ERROR_MESSAGE) from exc

    logger.info("Weather API response status: %d", resp.status_code)
    _raise_for_status(resp)

    try:
        result: dict[str, Any] = resp.json()
    except ValueError as exc:
        raise FormatError("Invalid response format from weather service") from exc
    return result


def fetch_weather_data(lat: Any, lon: Any) -> tuple[CurrentWeather, ForecastList]:
    """
    Fetch and transform weather for a coordinate pair.

    Returns:
        ``(current_weather, forecast_list)`` in the legacy output schema.
    """
    raw = fetch_forecast(lat, lon)
    current = to_current_weather(raw)
    forecast = to_forecast_list(raw)
    logger.debug("Transformed weather data: %d hourly entries", len(forecast.entries))
    return current, forecast
