"""
Utility functions for calendar arithmetic.

Submission timestamps are naive wall-clock datetimes (see
safe_ops.standardize_datetime); these helpers reduce them to calendar days
and Sunday-first weeks.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, List, Union

from submission_analytics.data.models.enums import Weekday

DateLike = Union[date, datetime]


def to_day(value: DateLike) -> date:
    """Reduce a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_of(value: DateLike) -> Weekday:
    """
    Get the Sunday-first weekday of a date.

    Args:
        value: Date or datetime

    Returns:
        Weekday: SUNDAY (0) through SATURDAY (6)
    """
    return Weekday(value.isoweekday() % 7)


def start_of_week(value: DateLike) -> date:
    """Get the Sunday that starts the week containing the date."""
    day = to_day(value)
    return day - timedelta(days=weekday_of(day).value)


def distinct_days(timestamps: Iterable[DateLike]) -> List[date]:
    """
    Collect the distinct calendar days of a set of timestamps.

    Args:
        timestamps: Dates or datetimes

    Returns:
        List[date]: Sorted ascending, without duplicates
    """
    return sorted({to_day(ts) for ts in timestamps})


def month_day_label(day: date) -> str:
    """Format a day as MM/DD."""
    return f"{day.month:02d}/{day.day:02d}"
