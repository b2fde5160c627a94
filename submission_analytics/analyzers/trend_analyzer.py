"""
Daily submission trend.

The trend is one point per calendar day across a window chosen from the
data (earliest to latest submit time or deadline) or, when it spans at
least a week, from the semester range. Days without submissions are
filled with zero.
"""

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from submission_analytics.data.models import AssignmentRecord, LineItem, SemesterRange
from submission_analytics.utils.date_utils import month_day_label, to_day

logger = logging.getLogger(__name__)

MIN_SEMESTER_SPAN = timedelta(days=7)


def candidate_dates(
    submissions: Sequence[AssignmentRecord], records: Sequence[AssignmentRecord]
) -> List[datetime]:
    """Submit times plus all present deadlines."""
    dates = [r.submit_time for r in submissions if isinstance(r.submit_time, datetime)]
    dates.extend(r.deadline for r in records if isinstance(r.deadline, datetime))
    return dates


def resolve_trend_window(
    dates: Sequence[datetime], semester: Optional[SemesterRange] = None
) -> Optional[Tuple[datetime, datetime]]:
    """
    Pick the start and end of the trend window.

    Args:
        dates: Candidate dates from the data
        semester: Optional semester range hint

    Returns:
        Optional[Tuple[datetime, datetime]]: (start, end), or None if there
            are no candidate dates
    """
    if not dates:
        return None

    start, end = min(dates), max(dates)

    if semester is not None and semester.is_complete():
        sem_start, sem_end = semester.start_date, semester.end_date
        if sem_end < sem_start:
            sem_start, sem_end = sem_end, sem_start
        if sem_end - sem_start >= MIN_SEMESTER_SPAN:
            start, end = sem_start, sem_end

    return start, end


def submission_trend(
    submissions: Sequence[AssignmentRecord],
    records: Sequence[AssignmentRecord],
    semester: Optional[SemesterRange] = None,
) -> Tuple[LineItem, ...]:
    """
    Count submissions per calendar day over the resolved window.

    Args:
        submissions: Submitted records with a submit timestamp
        records: All records (their deadlines widen the data window)
        semester: Optional semester range hint

    Returns:
        Tuple[LineItem, ...]: One MM/DD point per day, gap-free; empty when
            there are no dates at all
    """
    window = resolve_trend_window(candidate_dates(submissions, records), semester)
    if window is None:
        return ()

    start_day, end_day = to_day(window[0]), to_day(window[1])
    day_count = max(1, (end_day - start_day).days + 1)
    counts = Counter(to_day(r.submit_time) for r in submissions)
    logger.debug(f"Trend window {start_day} to {end_day} ({day_count} days)")

    days = (start_day + timedelta(days=offset) for offset in range(day_count))
    return tuple(
        LineItem(label=month_day_label(day), value=counts.get(day, 0)) for day in days
    )
