"""
Rate calculations over submitted assignments.

Every rate is ``count / denominator`` and is 0.0 for an empty
denominator. Time-based rates use the submitted records that carry a
submit timestamp; deadline-based rates additionally require a deadline.
"""

from typing import List, Optional, Sequence

from submission_analytics.data.models import AssignmentRecord, TimeStats
from submission_analytics.utils.date_utils import weekday_of
from submission_analytics.utils.safe_ops import safe_divide

NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6


def submission_rate(submitted_count: int, total_count: int) -> float:
    """Share of all assignments that were submitted."""
    return safe_divide(submitted_count, total_count)


def is_night_hour(hour: int) -> bool:
    """Check whether an hour falls in [22, 24) or [0, 6)."""
    return hour >= NIGHT_START_HOUR or hour < NIGHT_END_HOUR


def night_rate(submissions: Sequence[AssignmentRecord]) -> float:
    """Share of submissions made between 22:00 and 06:00."""
    night_count = sum(1 for r in submissions if is_night_hour(r.submit_time.hour))
    return safe_divide(night_count, len(submissions))


def weekend_rate(submissions: Sequence[AssignmentRecord]) -> float:
    """Share of submissions made on Saturday or Sunday."""
    weekend_count = sum(
        1 for r in submissions if weekday_of(r.submit_time).is_weekend()
    )
    return safe_divide(weekend_count, len(submissions))


def late_rate(submissions: Sequence[AssignmentRecord]) -> float:
    """Share of submissions made after their deadline; no deadline is never late."""
    late_count = sum(1 for r in submissions if r.is_late())
    return safe_divide(late_count, len(submissions))


def collect_lead_hours(submissions: Sequence[AssignmentRecord]) -> List[float]:
    """
    Collect deadline - submit_time, in hours, for submissions with a deadline.

    A lead of exactly 0 is a real value, not a missing one.

    Args:
        submissions: Submitted records with a submit timestamp

    Returns:
        List[float]: Lead hours in input order (negative when late)
    """
    leads = []
    for record in submissions:
        lead = record.lead_hours()
        if lead is not None:
            leads.append(lead)
    return leads


def last_window_rate(lead_hours: Sequence[float], window_hours: float) -> float:
    """
    Share of leads in [0, window_hours].

    Late submissions are outside the window but still count in the
    denominator.
    """
    in_window = sum(1 for h in lead_hours if 0 <= h <= window_hours)
    return safe_divide(in_window, len(lead_hours))


def compute_time_stats(lead_hours: Sequence[float]) -> Optional[TimeStats]:
    """
    Average and median lead hours.

    The median is the element at index n // 2 of the sorted leads, i.e. the
    upper median for an even count.

    Args:
        lead_hours: Lead hours of submissions with a deadline

    Returns:
        Optional[TimeStats]: None when there are no leads
    """
    if not lead_hours:
        return None
    ordered = sorted(lead_hours)
    avg = sum(lead_hours) / len(lead_hours)
    return TimeStats(avg=avg, median=ordered[len(ordered) // 2])
