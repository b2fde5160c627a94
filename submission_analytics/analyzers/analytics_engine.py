"""
Analytics engine for the submission analytics system.

This module provides the AnalyticsEngine class, which runs every builder
over one set of assignment records and assembles the results into a
single immutable AnalyticsSnapshot.
"""

import logging
from datetime import datetime, tzinfo
from typing import Iterable, Optional, Tuple

from submission_analytics.analyzers import (
    distribution_analyzer,
    heatmap_analyzer,
    procrastination_analyzer,
    rate_analyzer,
    streak_analyzer,
    trend_analyzer,
)
from submission_analytics.data.models import (
    AnalyticsSnapshot,
    AssignmentRecord,
    SemesterRange,
)
from submission_analytics.utils.safe_ops import standardize_datetime

RECENT_SUBMISSION_LIMIT = 20
LAST6_WINDOW_HOURS = 6
LAST24_WINDOW_HOURS = 24


class AnalyticsEngine:
    """
    Turns assignment records into an analytics snapshot.

    The engine is stateless: every call derives the filtered record sets
    (submitted, submitted with a timestamp) and hands each builder the set
    it needs. No builder reads another builder's output except the
    procrastination profile, which combines the three deadline rates.
    """

    def __init__(self, timezone: Optional[tzinfo] = None):
        """
        Initialize the analytics engine.

        Args:
            timezone: Zone used to read a timezone-aware ``now``; the local
                zone when None
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._timezone = timezone

    def analyze(
        self,
        records: Iterable[AssignmentRecord],
        now: datetime,
        semester: Optional[SemesterRange] = None,
    ) -> AnalyticsSnapshot:
        """
        Compute every metric for a set of records.

        Args:
            records: Assignment records (order is not significant)
            now: Reference time for pending-deadline risk
            semester: Optional semester range used as a trend-window hint

        Returns:
            AnalyticsSnapshot: The complete snapshot
        """
        records = tuple(records)
        now = standardize_datetime(now, self._timezone)
        submitted, timed = self.split_submitted(records)

        self._logger.debug(
            f"Analyzing {len(records)} records ({len(submitted)} submitted, "
            f"{len(timed)} with submit time)"
        )

        lead_hours = rate_analyzer.collect_lead_hours(timed)
        late_rate = rate_analyzer.late_rate(timed)
        last6_rate = rate_analyzer.last_window_rate(lead_hours, LAST6_WINDOW_HOURS)
        last24_rate = rate_analyzer.last_window_rate(lead_hours, LAST24_WINDOW_HOURS)

        return AnalyticsSnapshot(
            generated_at=now,
            total_count=len(records),
            submitted_count=len(submitted),
            submission_rate=rate_analyzer.submission_rate(len(submitted), len(records)),
            night_rate=rate_analyzer.night_rate(timed),
            weekend_rate=rate_analyzer.weekend_rate(timed),
            late_rate=late_rate,
            last6_rate=last6_rate,
            last24_rate=last24_rate,
            hour_distribution=distribution_analyzer.hour_distribution(timed),
            weekday_distribution=distribution_analyzer.weekday_distribution(timed),
            submission_lag_distribution=distribution_analyzer.submission_lag_distribution(
                timed
            ),
            pending_risk=distribution_analyzer.pending_risk(records, now),
            attachment_stats=distribution_analyzer.attachment_stats(submitted),
            course_stats=distribution_analyzer.course_stats(records),
            time_stats=rate_analyzer.compute_time_stats(lead_hours),
            activity_stats=streak_analyzer.activity_stats(timed),
            submission_trend=trend_analyzer.submission_trend(timed, records, semester),
            weekly_hour_heatmap=heatmap_analyzer.weekly_hour_heatmap(timed),
            calendar_heatmap=heatmap_analyzer.calendar_heatmap(timed),
            procrastination_profile=procrastination_analyzer.procrastination_profile(
                late_rate, last24_rate, last6_rate
            ),
            recent_submissions=self.recent_submissions(timed),
        )

    @staticmethod
    def split_submitted(
        records: Tuple[AssignmentRecord, ...],
    ) -> Tuple[Tuple[AssignmentRecord, ...], Tuple[AssignmentRecord, ...]]:
        """
        Derive the submitted and submitted-with-timestamp record sets.

        Args:
            records: All records

        Returns:
            Tuple: (submitted, submitted_with_submit_time)
        """
        submitted = tuple(r for r in records if r.submitted)
        timed = tuple(r for r in submitted if r.submit_time is not None)
        return submitted, timed

    @staticmethod
    def recent_submissions(
        timed: Tuple[AssignmentRecord, ...], limit: int = RECENT_SUBMISSION_LIMIT
    ) -> Tuple[AssignmentRecord, ...]:
        """Most recent submissions first, at most ``limit`` of them."""
        ordered = sorted(timed, key=lambda r: r.submit_time, reverse=True)
        return tuple(ordered[:limit])
