"""
Output records consumed by the UI.

Pydantic models shaped like the legacy OpenWeatherMap responses the UI was
written against.  Field names are Pythonic; aliases carry the legacy keys,
so dump with ``model_dump(by_alias=True)`` (or ``to_dict()``) before handing
data to consumers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Core
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for operations that degrade instead of raising."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None


class LegacyModel(BaseModel):
    """Base for records that serialise to legacy key names."""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump using legacy key names."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Shared parts
# =============================================================================


class Coord(LegacyModel):
    lat: float | None = None
    lon: float | None = None


class WeatherDescription(LegacyModel):
    """Single entry of the legacy ``weather`` array."""

    icon: str
    description: str
    main: str


class Clouds(LegacyModel):
    cover: float = Field(default=0, alias="all")


# =============================================================================
# Current weather
# =============================================================================


class CurrentMain(LegacyModel):
    temp: int
    feels_like: int
    humidity: float | None = None
    pressure: int | None = None


class CurrentWind(LegacyModel):
    speed: float | None = None
    deg: float = 0
    gust: float | None = None


class OpenMeteoDetails(LegacyModel):
    """Raw provider details kept for debugging."""

    weather_code: int | None = Field(default=None, alias="weatherCode")
    is_night: bool = Field(default=False, alias="isNight")


class CurrentWeather(LegacyModel):
    """Current conditions at a location."""

    main: CurrentMain
    weather: list[WeatherDescription]
    wind: CurrentWind
    clouds: Clouds = Field(default_factory=Clouds)
    coord: Coord = Field(default_factory=Coord)
    timezone: int | None = None
    open_meteo: OpenMeteoDetails = Field(alias="_openMeteoData")


# =============================================================================
# Forecast list
# =============================================================================


class ForecastMain(LegacyModel):
    temp: float | None = None
    humidity: float = 0


class ForecastWind(LegacyModel):
    speed: float = 0


class ForecastEntry(LegacyModel):
    """One hourly row of the forecast list."""

    dt: int
    dt_txt: str
    main: ForecastMain
    weather: list[WeatherDescription]
    wind: ForecastWind = Field(default_factory=ForecastWind)
    clouds: Clouds = Field(default_factory=Clouds)


class CityInfo(LegacyModel):
    coord: Coord = Field(default_factory=Coord)
    timezone: int | None = None
    country: str = ""
    population: int = 0
    sunrise: int | None = None
    sunset: int | None = None


class DailyData(LegacyModel):
    """Parallel daily arrays passed through for weekly summaries."""

    time: list[str] = Field(default_factory=list)
    weather_code: list[int | None] = Field(default_factory=list)
    temperature_max: list[float | None] = Field(default_factory=list)
    temperature_min: list[float | None] = Field(default_factory=list)
    wind_speed_max: list[float | None] = Field(default_factory=list)
    wind_direction: list[float | None] = Field(default_factory=list)
    sunrise: list[str | None] = Field(default_factory=list)
    sunset: list[str | None] = Field(default_factory=list)


class ForecastList(LegacyModel):
    """Hourly forecast list plus city metadata and daily arrays."""

    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
    city: CityInfo = Field(default_factory=CityInfo)
    daily_data: DailyData | None = Field(default=None, alias="_dailyData")
