"""
Shared HTTP client with capped retry and a default timeout.

Provides a pre-configured ``requests.Session`` that retries connection
failures and gateway errors (502/503/504) a couple of times with backoff.
429 and 500 are never retried: callers map those statuses to specific
errors.  All datasource modules should use this instead of bare
``requests.get``.

Usage::

    from weather_lookup.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params={...})
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_lookup import __version__
from weather_lookup.config import get_settings

DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,  # 0s, 1s between retries
    status_forcelist=[502, 503, 504],
    allowed_methods=["GET"],
    raise_on_status=False,  # callers inspect resp.status_code
)

DEFAULT_TIMEOUT = 10  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: ``User-Agent`` header value.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent or f"weather-lookup/{__version__}"

    # Wrap send so every request is bounded even when callers omit ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def _default_session() -> requests.Session:
    settings = get_settings()
    return create_session(timeout=settings.request_timeout, user_agent=settings.user_agent)


#: Module-level session, import and use directly.
session: requests.Session = _default_session()
