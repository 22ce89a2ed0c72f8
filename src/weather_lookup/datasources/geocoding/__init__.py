"""Open-Meteo geocoding data source.

Public API:
  - search: search_cities (never raises; empty list on failure)
  - models: CityMatch (with display ``label`` and option ``value``)
"""

from weather_lookup.datasources.geocoding.models import CityMatch
from weather_lookup.datasources.geocoding.search import search_cities

__all__ = ["CityMatch", "search_cities"]
