"""Day/night classification and timestamp helpers.

Timestamps arrive as ISO-8601 text in the location's local time (Open-Meteo
with ``timezone=auto`` omits the offset).  No timezone normalisation is done
here: naive strings stay naive and compare against each other as-is.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime

logger = logging.getLogger(__name__)


def parse_instant(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp. Raises ValueError/TypeError on bad input."""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def to_epoch_seconds(value: str | datetime) -> int:
    """Whole epoch seconds (truncated downward). Naive values are read as UTC."""
    instant = parse_instant(value)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return math.floor(instant.timestamp())


def is_night(
    current: str | datetime | None,
    sunrise: str | datetime | None,
    sunset: str | datetime | None,
) -> bool:
    """
    True if ``current`` is strictly before sunrise or strictly after sunset.

    Instants equal to either bound count as day.  If any value cannot be
    parsed or compared, a warning is logged and the reading is treated as
    daytime so one bad timestamp never breaks a whole forecast.
    """
    try:
        now = parse_instant(current)  # type: ignore[arg-type]
        rise = parse_instant(sunrise)  # type: ignore[arg-type]
        set_ = parse_instant(sunset)  # type: ignore[arg-type]
        return now < rise or now > set_
    except (TypeError, ValueError) as exc:
        logger.warning(
            "Unable to determine day/night for %r (sunrise=%r, sunset=%r), defaulting to day: %s",
            current,
            sunrise,
            sunset,
            exc,
        )
        return False
