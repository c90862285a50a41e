"""
Recurring date arithmetic for birthdays and work anniversaries.

Stored dates are "YYYY-MM-DD" strings. Only the month and day are used;
the year is whatever the person entered (birth year, hire year) and is
ignored when projecting onto the calendar.
"""

import calendar
from datetime import date, datetime

# Feb 29 falls back to Feb 28 in years without a leap day
LEAP_DAY = (2, 29)
LEAP_DAY_FALLBACK = 28


class InvalidDateFormat(ValueError):
    """Recurring date string does not hold a usable month/day pair."""


def as_date(value: date | datetime) -> date:
    """Drop the time-of-day component, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_month_day(value: str) -> tuple[int, int]:
    """
    Parse month and day from a 'YYYY-MM-DD' string.

    Raises:
        InvalidDateFormat: if the string is not three dash-separated numbers,
            or the month/day pair never exists on the calendar
    """
    if not isinstance(value, str):
        raise InvalidDateFormat(f"Expected a YYYY-MM-DD string, got {value!r}")

    parts = value.strip().split("-")
    if [len(part) for part in parts] != [4, 2, 2] or not all(
        part.isascii() and part.isdigit() for part in parts
    ):
        raise InvalidDateFormat(f"Expected format YYYY-MM-DD, got '{value}'")

    month, day = int(parts[1]), int(parts[2])
    if not 1 <= month <= 12:
        raise InvalidDateFormat(f"Month out of range in '{value}'")

    # 2000 is a leap year, so Feb 29 is accepted here
    _, days_in_month = calendar.monthrange(2000, month)
    if not 1 <= day <= days_in_month:
        raise InvalidDateFormat(f"Day out of range in '{value}'")

    return month, day


def occurrence_in_year(month: int, day: int, year: int) -> date:
    """Concrete date of a month/day in the given year."""
    if (month, day) == LEAP_DAY and not calendar.isleap(year):
        return date(year, month, LEAP_DAY_FALLBACK)
    return date(year, month, day)


def next_event_date(ymd: str, today: date | datetime) -> date:
    """
    Return the next occurrence (this year or next) of a YYYY-MM-DD string.

    An occurrence falling on today counts as upcoming, not past.
    """
    month, day = parse_month_day(ymd)
    today = as_date(today)

    candidate = occurrence_in_year(month, day, today.year)
    if candidate < today:
        return occurrence_in_year(month, day, today.year + 1)
    return candidate


def diff_in_days(a: date | datetime, b: date | datetime) -> int:
    """Whole calendar days from a to b (negative when b is earlier)."""
    return (as_date(b) - as_date(a)).days
