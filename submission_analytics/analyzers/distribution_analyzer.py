"""
Histogram builders for submission behavior.

This module produces the labeled count distributions of a snapshot:
hour of day, day of week, submission lag, pending deadline risk,
attachment size and per-course totals. Bucket edges are fixed policy.
"""

import logging
from datetime import datetime
from typing import Dict, List, Sequence, Tuple

import numpy as np

from submission_analytics.data.models import (
    AssignmentRecord,
    AttachmentStats,
    BarItem,
    CourseStat,
    PendingRisk,
    Weekday,
)
from submission_analytics.utils.bucket_utils import INF, Bucket, count_into_buckets
from submission_analytics.utils.date_utils import weekday_of
from submission_analytics.utils.safe_ops import safe_divide
from submission_analytics.utils.size_utils import parse_size_to_bytes

logger = logging.getLogger(__name__)

KB = 1024
MB = 1024 * 1024

SUBMISSION_LAG_BUCKETS: Tuple[Bucket, ...] = (
    Bucket("Overdue", -INF, 0),
    Bucket("0-6h", 0, 6),
    Bucket("6-24h", 6, 24),
    Bucket("1-3d", 24, 72),
    Bucket(">3d", 72, INF),
)

PENDING_RISK_BUCKETS: Tuple[Bucket, ...] = (
    Bucket("<6h", 0, 6),
    Bucket("6-24h", 6, 24),
    Bucket("1-3d", 24, 72),
    Bucket(">3d", 72, INF),
)

ATTACHMENT_SIZE_BUCKETS: Tuple[Bucket, ...] = (
    Bucket("<100KB", 0, 100 * KB),
    Bucket("100KB-1MB", 100 * KB, MB),
    Bucket("1-5MB", MB, 5 * MB),
    Bucket("5-20MB", 5 * MB, 20 * MB),
    Bucket(">20MB", 20 * MB, INF),
)


def _bar_items(labels: Sequence[str], counts: Sequence[int]) -> Tuple[BarItem, ...]:
    """Pair labels with counts."""
    return tuple(
        BarItem(label=label, value=int(count)) for label, count in zip(labels, counts)
    )


def hour_distribution(submissions: Sequence[AssignmentRecord]) -> Tuple[BarItem, ...]:
    """
    Count submissions per hour of day.

    Args:
        submissions: Submitted records with a submit timestamp

    Returns:
        Tuple[BarItem, ...]: 24 bars labeled "0".."23"
    """
    hours = np.array([r.submit_time.hour for r in submissions], dtype=np.int64)
    counts = np.bincount(hours, minlength=24)
    return _bar_items([str(hour) for hour in range(24)], counts.tolist())


def weekday_distribution(
    submissions: Sequence[AssignmentRecord],
) -> Tuple[BarItem, ...]:
    """
    Count submissions per day of week.

    Args:
        submissions: Submitted records with a submit timestamp

    Returns:
        Tuple[BarItem, ...]: 7 bars, Sunday first
    """
    days = np.array([weekday_of(r.submit_time).value for r in submissions], dtype=np.int64)
    counts = np.bincount(days, minlength=7)
    return _bar_items(Weekday.get_all_labels(), counts.tolist())


def submission_lag_distribution(
    submissions: Sequence[AssignmentRecord],
) -> Tuple[BarItem, ...]:
    """
    Bucket submissions by how long before the deadline they were made.

    Records without a deadline are skipped.

    Args:
        submissions: Submitted records with a submit timestamp

    Returns:
        Tuple[BarItem, ...]: Overdue, 0-6h, 6-24h, 1-3d, >3d
    """
    leads = [r.lead_hours() for r in submissions]
    counts = count_into_buckets(
        (lead for lead in leads if lead is not None), SUBMISSION_LAG_BUCKETS
    )
    return _bar_items([b.label for b in SUBMISSION_LAG_BUCKETS], counts)


def pending_risk(records: Sequence[AssignmentRecord], now: datetime) -> PendingRisk:
    """
    Distribute unsubmitted assignments by hours left until their deadline.

    Assignments whose deadline has already passed are left out of both the
    buckets and the total. The risk score is the share due within 24 hours.

    Args:
        records: All records
        now: Reference time for the hours-left computation

    Returns:
        PendingRisk: Total, risk score and bucket bars
    """
    hours_left = [
        (r.deadline - now).total_seconds() / 3600
        for r in records
        if not r.submitted and r.deadline is not None
    ]
    counts = count_into_buckets(
        (h for h in hours_left if h >= 0), PENDING_RISK_BUCKETS
    )
    total = sum(counts)
    soon = counts[0] + counts[1]
    logger.debug(f"Pending risk: {total} of {len(hours_left)} pending items still open")
    return PendingRisk(
        total=total,
        risk_score=safe_divide(soon, total),
        items=_bar_items([b.label for b in PENDING_RISK_BUCKETS], counts),
    )


def attachment_stats(submitted: Sequence[AssignmentRecord]) -> AttachmentStats:
    """
    Summarize attachment sizes of submitted assignments.

    Every submitted record with an attachment counts toward ``total``;
    only parseable sizes contribute to ``total_size`` and the buckets.

    Args:
        submitted: Submitted records, with or without a submit timestamp

    Returns:
        AttachmentStats: Presence count, byte total and size bars
    """
    attachments = [r.attachment for r in submitted if r.attachment is not None]
    sizes: List[float] = []
    for attachment in attachments:
        size = parse_size_to_bytes(attachment.size)
        if size is not None:
            sizes.append(size)

    counts = count_into_buckets(sizes, ATTACHMENT_SIZE_BUCKETS)
    return AttachmentStats(
        total=len(attachments),
        total_size=sum(sizes),
        bucket_items=_bar_items([b.label for b in ATTACHMENT_SIZE_BUCKETS], counts),
    )


def course_stats(records: Sequence[AssignmentRecord]) -> Tuple[CourseStat, ...]:
    """
    Count total and submitted assignments per course.

    Args:
        records: All records

    Returns:
        Tuple[CourseStat, ...]: Sorted by submitted count, descending; ties
            keep first-seen course order
    """
    totals: Dict[str, List[int]] = {}
    for record in records:
        entry = totals.setdefault(record.course_id, [0, 0])
        entry[0] += 1
        if record.submitted:
            entry[1] += 1

    stats = [
        CourseStat(course_id=course_id, total=total, submitted=submitted)
        for course_id, (total, submitted) in totals.items()
    ]
    return tuple(sorted(stats, key=lambda s: s.submitted, reverse=True))
