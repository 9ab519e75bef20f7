"""Calendar helpers working on whole days."""

from datetime import date, datetime

# date.weekday(): 0=Mon ... 4=Fri, 5=Sat, 6=Sun
WEEKEND_WEEKDAYS = frozenset({4, 5, 6})


def as_date(value: date) -> date:
    """Drop the time of day from a datetime, pass plain dates through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_difference(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if ``end`` is earlier).

    Both values are truncated to their date first, so 23:59 and 00:01 on
    consecutive days are one day apart.
    """
    return (as_date(end) - as_date(start)).days


def is_weekend(value: date) -> bool:
    """Friday, Saturday and Sunday count as weekend for night-shift timing."""
    return as_date(value).weekday() in WEEKEND_WEEKDAYS
