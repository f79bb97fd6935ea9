"""UTC timestamp formatting without a calendar library."""

import time
from typing import Callable, Optional

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def format_utc(seconds: int) -> str:
    """Format seconds since the Unix epoch as ``YYYY-MM-DD HH:MM:SS`` (UTC).

    Walks years and months from 1970 by day count, so the result is the
    proleptic Gregorian date for any non-negative timestamp. Leap seconds
    are ignored.
    """
    seconds = max(int(seconds), 0)
    sec = seconds % 60
    minute = (seconds // 60) % 60
    hour = (seconds // 3600) % 24
    days = seconds // 86400

    year = 1970
    while True:
        days_in_year = 366 if is_leap_year(year) else 365
        if days < days_in_year:
            break
        days -= days_in_year
        year += 1

    month = 1
    for index, month_days in enumerate(_MONTH_DAYS):
        if index == 1 and is_leap_year(year):
            month_days = 29
        if days < month_days:
            break
        days -= month_days
        month += 1

    day = days + 1
    return f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{sec:02d}"


def utc_now(clock: Optional[Callable[[], float]] = None) -> str:
    """Format the current time. ``clock`` defaults to :func:`time.time`."""
    return format_utc(int((clock or time.time)()))
