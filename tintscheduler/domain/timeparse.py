"""
Parsing helpers for the date and clock strings used across the API.

Dates are calendar dates in ``YYYY-MM-DD`` form, clock times are ``HH:MM``.
Everything that cannot be parsed raises ``InvalidTimeInputError`` before
any arithmetic happens.
"""

import re
from typing import Tuple

import pendulum
from pendulum import Date, DateTime

from .exceptions import InvalidTimeInputError

_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_CLOCK_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def parse_calendar_date(value: str) -> Date:
    """Parse a ``YYYY-MM-DD`` string into a pendulum Date."""
    if not isinstance(value, str) or not _DATE_PATTERN.match(value.strip()):
        raise InvalidTimeInputError(f"Invalid date {value!r}, expected YYYY-MM-DD")

    try:
        return pendulum.from_format(value.strip(), "YYYY-MM-DD").date()
    except ValueError as exc:
        raise InvalidTimeInputError(
            f"Invalid date {value!r}, expected YYYY-MM-DD"
        ) from exc


def parse_clock_time(value: str) -> Tuple[int, int]:
    """
    Parse an ``HH:MM`` string into an (hour, minute) tuple.

    Single-digit hours ("9:00") are accepted.
    """
    match = _CLOCK_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeInputError(f"Invalid time {value!r}, expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeInputError(f"Time out of range: {value!r}")

    return hour, minute


def format_clock(hour: int, minute: int = 0) -> str:
    """Format an hour/minute pair as ``HH:MM``."""
    return f"{hour:02d}:{minute:02d}"


def combine(date: Date, hour: int, minute: int, timezone: str) -> DateTime:
    """Build an aware datetime for ``date`` at ``hour:minute`` in ``timezone``."""
    return pendulum.datetime(
        date.year,
        date.month,
        date.day,
        hour,
        minute,
        0,
        tz=timezone,
    )


def weekday_name(date: Date) -> str:
    """Lowercase English weekday name for a date."""
    return WEEKDAY_NAMES[date.weekday()]
