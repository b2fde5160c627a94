"""
Active-day and streak statistics.
"""

from datetime import date, timedelta
from typing import Sequence

from submission_analytics.data.models import ActivityStats, AssignmentRecord
from submission_analytics.utils.date_utils import distinct_days

ONE_DAY = timedelta(days=1)


def longest_streak(days: Sequence[date]) -> int:
    """
    Length of the longest run of consecutive calendar days.

    Args:
        days: Distinct days, sorted ascending

    Returns:
        int: 0 for no days, otherwise at least 1
    """
    if not days:
        return 0

    longest = current = 1
    for prev, nxt in zip(days, days[1:]):
        if nxt - prev == ONE_DAY:
            current += 1
        else:
            longest = max(longest, current)
            current = 1
    return max(longest, current)


def activity_stats(submissions: Sequence[AssignmentRecord]) -> ActivityStats:
    """Count distinct submission days and the longest daily streak."""
    days = distinct_days(r.submit_time for r in submissions)
    return ActivityStats(active_days=len(days), longest_streak=longest_streak(days))
