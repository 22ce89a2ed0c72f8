"""
Prefect flow for a city weather lookup.

Two stages, no shared state: resolve the city, then fetch and summarise
its forecast.

Run locally:
    python -m weather_lookup.flows.lookup Paris

Run with Prefect dashboard:
    prefect server start &
    python -m weather_lookup.flows.lookup Paris
"""

from __future__ import annotations

import sys
from typing import Any

from prefect import flow, task

from weather_lookup.analysis import aggregate_by_day, aggregation_input_for
from weather_lookup.datasources import geocoding
from weather_lookup.datasources import weather as weather_source
from weather_lookup.datasources.geocoding import CityMatch


@task(name="search-city")
def search_city(query: str, index: int = 0) -> CityMatch | None:
    """Resolve a city name; ``index`` picks among multiple matches."""
    matches = geocoding.search_cities(query)
    if not matches or not 0 <= index < len(matches):
        return None
    return matches[index]


@task(name="fetch-weather")
def fetch_weather(lat: float, lon: float) -> dict[str, Any]:
    """Fetch and transform weather into legacy dicts."""
    current, forecast = weather_source.fetch_weather_data(lat, lon)
    return {"current": current.to_dict(), "forecast": forecast.to_dict()}


@task(name="summarize-week")
def summarize_week(forecast: dict[str, Any]) -> list[dict[str, Any]]:
    """One summary dict per forecast day."""
    return [day.to_dict() for day in aggregate_by_day(aggregation_input_for(forecast))]


@flow(name="lookup-weather", log_prints=True)
def lookup_weather(query: str, index: int = 0) -> dict[str, Any]:
    """
    Look up a city and return its weather.

    Returns:
        Dict with ``city`` (match dict or None), ``current``, ``forecast``
        and ``week``.  When no city matches, the weather keys are empty.
    """
    results: dict[str, Any] = {"city": None, "current": {}, "forecast": {}, "week": []}

    print(f"Searching for {query!r}...")
    city = search_city(query, index)
    if city is None:
        print(f"No city found for {query!r}.")
        return results

    results["city"] = city.to_dict()
    print(f"Fetching weather for {city.label} ({city.latitude}, {city.longitude})...")
    data = fetch_weather(city.latitude, city.longitude)
    results["current"] = data["current"]
    results["forecast"] = data["forecast"]

    results["week"] = summarize_week(data["forecast"])
    print(f"Summarised {len(results['week'])} days.")
    return results


if __name__ == "__main__":
    result = lookup_weather(" ".join(sys.argv[1:]) or "Portland")
    print(f"Flow complete: {result['city']}")
