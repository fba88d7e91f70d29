"""Elapsed-time and logged-timestamp normalization."""

from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from parsing.numerals import parse_number

LOGGED_TIME_FORMAT = "%Y-%m-%d %H:%M"


def parse_elapsed_time(token: str) -> Optional[time]:
    """Parse ``H:MM:SS`` or ``MM:SS`` into a time-of-day shaped duration.

    Any other shape, an unparsable component, or a component outside the clock
    range yields ``None``; values are never clamped.
    """
    parts = token.split(":")
    if len(parts) == 3:
        components = [parse_number(part) for part in parts]
    elif len(parts) == 2:
        components = [0] + [parse_number(part) for part in parts]
    else:
        return None
    if any(value is None for value in components):
        return None
    hours, minutes, seconds = components
    try:
        return time(hours, minutes, seconds)
    except ValueError:
        return None


def parse_logged_time(token: str) -> Optional[datetime]:
    """Parse a ``YYYY-MM-DD HH:MM`` timestamp; anything else yields ``None``."""
    try:
        return datetime.strptime(token, LOGGED_TIME_FORMAT)
    except ValueError:
        return None


def seconds_from_midnight(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


__all__ = [
    "LOGGED_TIME_FORMAT",
    "parse_elapsed_time",
    "parse_logged_time",
    "seconds_from_midnight",
]
