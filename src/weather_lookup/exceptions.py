"""Error taxonomy for lookups and forecast fetches.

Geocoding failures never surface here: ``search_cities`` logs them and
returns an empty list.
"""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(WeatherLookupError, ValueError):
    """Caller supplied bad input (coordinates, query)."""


class TransportError(WeatherLookupError):
    """The weather service could not be reached."""


class UpstreamError(WeatherLookupError):
    """The weather service answered with a non-success status."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidCoordinatesError(UpstreamError):
    """HTTP 400: the provider rejected the coordinates."""


class RateLimitError(UpstreamError):
    """HTTP 429."""


class ServiceUnavailableError(UpstreamError):
    """HTTP 500."""


class FormatError(WeatherLookupError):
    """A successful response was missing expected sections."""


InvalidResponseFormat = FormatError
