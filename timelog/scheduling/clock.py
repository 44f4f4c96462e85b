# timelog/scheduling/clock.py
"""Conversions between "HH:MM" strings, naive datetimes and minutes of a day."""

import re
from datetime import date, datetime, time, timedelta

from timelog.scheduling.intervals import MINUTES_PER_DAY

_CLOCK_RE = re.compile(r"^(\d{2}):(\d{2})$")


def parse_clock(value: str) -> int:
    """
    Parse an "HH:MM" string into minutes since midnight.

    "24:00" is accepted as the end-of-day marker and returns 1440.

    Raises:
        ValueError: If the string is not a valid clock time.
    """
    match = _CLOCK_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid time '{value}'. Please use HH:MM.")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours == 24 and minutes == 0:
        return MINUTES_PER_DAY
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time '{value}'. Hours must be 00-23 and minutes 00-59.")
    return hours * 60 + minutes


def format_clock(minutes: int) -> str:
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise ValueError(f"Minute offset {minutes} is outside of the day")
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def minute_of_day(moment: datetime, day: date) -> int:
    """Whole minutes between midnight of `day` and `moment` (seconds truncated)."""
    delta = moment - datetime.combine(day, time.min)
    return int(delta.total_seconds() // 60)


def at_minute(day: date, minutes: int) -> datetime:
    """Naive datetime for a minute offset; 1440 is midnight of the next day."""
    return datetime.combine(day, time.min) + timedelta(minutes=minutes)
