"""Geocoding result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CityMatch:
    """A place returned by the geocoding search."""

    latitude: float
    longitude: float
    name: str
    country_code: str = ""
    country: str = ""
    admin1: str = ""  # state / province

    @property
    def label(self) -> str:
        """Display label, e.g. ``Portland, Oregon, United States``.

        Falls back to the country code when no country name is known.
        """
        parts = [self.name]
        if self.admin1:
            parts.append(self.admin1)
        if self.country:
            parts.append(self.country)
        elif self.country_code:
            parts.append(self.country_code)
        return ", ".join(parts)

    @property
    def value(self) -> str:
        """Space-separated ``"<lat> <lon>"`` used as the option value in the search box."""
        return f"{self.latitude} {self.longitude}"

    @classmethod
    def from_api(cls, result: dict[str, Any]) -> CityMatch:
        """Build from one entry of the API's ``results`` array."""
        return cls(
            latitude=result["latitude"],
            longitude=result["longitude"],
            name=result["name"],
            country_code=result.get("country_code") or "",
            country=result.get("country") or "",
            admin1=result.get("admin1") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "name": self.name,
            "countryCode": self.country_code,
            "country": self.country,
            "admin1": self.admin1,
        }
