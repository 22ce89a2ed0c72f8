"""City search against the Open-Meteo geocoding API.

Geocoding must never block the UI: every failure (network, non-2xx status,
bad body) is logged and the search returns an empty list.
"""

from __future__ import annotations

import logging

import requests

from weather_lookup.config import get_settings
from weather_lookup.datasources.geocoding.client import SEARCH_PATH
from weather_lookup.datasources.geocoding.models import CityMatch
from weather_lookup.schemas import Result
from weather_lookup.services.http import session

logger = logging.getLogger(__name__)


def _request_cities(name: str) -> Result:
    """Issue the geocoding request and capture the outcome in a ``Result``."""
    settings = get_settings()
    params: dict[str, str | int] = {
        "name": name,
        "count": settings.geocoding_count,
        "language": settings.language,
        "format": "json",
    }
    try:
        resp = session.get(f"{settings.geocoding_api_url}{SEARCH_PATH}", params=params)
    except requests.RequestException as exc:
        return Result(success=False, message="Geocoding request failed", error=str(exc))

    if not resp.ok:
        return Result(
            success=False,
            message="Geocoding API error",
            error=f"Geocoding API error: {resp.status_code}",
        )

    try:
        data = resp.json()
    except ValueError as exc:
        return Result(success=False, message="Geocoding response not JSON", error=str(exc))

    return Result(success=True, message="ok", data=data if isinstance(data, dict) else {})


def search_cities(query: str | None) -> list[CityMatch]:
    """
    Search cities by name.

    Args:
        query: Free-text city name. Shorter than 2 characters after trimming
            returns ``[]`` without a request.

    Returns:
        Matches in provider order; empty on any failure.
    """
    name = (query or "").strip()
    if len(name) < get_settings().min_query_length:
        return []

    result = _request_cities(name)
    if not result.success:
        logger.warning("Geocoding service error for %r: %s", name, result.error)
        return []

    matches: list[CityMatch] = []
    for item in (result.data or {}).get("results") or []:
        try:
            matches.append(CityMatch.from_api(item))
        except (KeyError, TypeError):
            logger.warning("Skipping malformed geocoding result: %r", item)
    return matches
