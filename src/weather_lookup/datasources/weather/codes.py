"""WMO weather interpretation codes mapped to legacy icon names.

Open-Meteo reports conditions as WMO codes (https://open-meteo.com/en/docs).
Downstream consumers expect OpenWeatherMap-style icon names such as ``10d``
or ``01n``, so each code carries an icon base that gets a ``d``/``n``
suffix depending on time of day.  Related codes share a base: every
drizzle variant uses ``09``, every rain variant ``10``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_lookup.datasources.weather.daynight import is_night as _is_night

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True)
class WeatherCodeEntry:
    """One row of the static code table."""

    code: int
    icon_base: str
    description: str


@dataclass(frozen=True)
class WeatherInfo:
    """Resolved icon and description for a single reading."""

    icon: str
    description: str

    @property
    def main(self) -> str:
        """Description with the first letter capitalised (legacy ``weather[].main``)."""
        return self.description[:1].upper() + self.description[1:]


UNKNOWN_ICON = "unknown"
UNKNOWN_DESCRIPTION = "Unknown weather condition"

WMO_WEATHER_CODES: dict[int, WeatherCodeEntry] = {
    entry.code: entry
    for entry in (
        WeatherCodeEntry(0, "01", "Clear sky"),
        WeatherCodeEntry(1, "01", "Mainly clear"),
        WeatherCodeEntry(2, "02", "Partly cloudy"),
        WeatherCodeEntry(3, "04", "Overcast"),
        WeatherCodeEntry(45, "50", "Fog"),
        WeatherCodeEntry(48, "50", "Depositing rime fog"),
        WeatherCodeEntry(51, "09", "Light drizzle"),
        WeatherCodeEntry(53, "09", "Moderate drizzle"),
        WeatherCodeEntry(55, "09", "Dense drizzle"),
        WeatherCodeEntry(56, "13", "Light freezing drizzle"),
        WeatherCodeEntry(57, "13", "Dense freezing drizzle"),
        WeatherCodeEntry(61, "10", "Slight rain"),
        WeatherCodeEntry(63, "10", "Moderate rain"),
        WeatherCodeEntry(65, "10", "Heavy rain"),
        WeatherCodeEntry(66, "13", "Light freezing rain"),
        WeatherCodeEntry(67, "13", "Heavy freezing rain"),
        WeatherCodeEntry(71, "13", "Slight snow fall"),
        WeatherCodeEntry(73, "13", "Moderate snow fall"),
        WeatherCodeEntry(75, "13", "Heavy snow fall"),
        WeatherCodeEntry(77, "13", "Snow grains"),
        WeatherCodeEntry(80, "09", "Slight rain showers"),
        WeatherCodeEntry(81, "09", "Moderate rain showers"),
        WeatherCodeEntry(82, "09", "Violent rain showers"),
        WeatherCodeEntry(85, "13", "Slight snow showers"),
        WeatherCodeEntry(86, "13", "Heavy snow showers"),
        WeatherCodeEntry(95, "11", "Thunderstorm"),
        WeatherCodeEntry(96, "11", "Thunderstorm with slight hail"),
        WeatherCodeEntry(99, "11", "Thunderstorm with heavy hail"),
    )
}


def resolve(code: int | None, is_night: bool = False) -> WeatherInfo:
    """
    Look up a WMO code.

    Unknown (or missing) codes resolve to the ``unknown`` icon with no
    day/night suffix; this never raises.

    Args:
        code: WMO weather code as reported by Open-Meteo.
        is_night: Pick the ``n`` icon variant instead of ``d``.

    Returns:
        WeatherInfo with the suffixed icon name and description.
    """
    entry = WMO_WEATHER_CODES.get(code) if code is not None else None
    if entry is None:
        return WeatherInfo(icon=UNKNOWN_ICON, description=UNKNOWN_DESCRIPTION)
    suffix = "n" if is_night else "d"
    return WeatherInfo(icon=f"{entry.icon_base}{suffix}", description=entry.description)


def resolve_at(
    code: int | None,
    current: str | datetime | None,
    sunrise: str | datetime | None,
    sunset: str | datetime | None,
) -> WeatherInfo:
    """Resolve a code, picking day/night from ``current`` against sunrise/sunset."""
    return resolve(code, _is_night(current, sunrise, sunset))


def icon_name(code: int | None, is_night: bool = False) -> str:
    """Icon name only, e.g. ``10n``."""
    return resolve(code, is_night).icon
