"""
Snapshot models for the submission analytics system.

An AnalyticsSnapshot is the complete, immutable result of one analysis
pass. Every model here is frozen and holds tuples instead of lists, and
serializes with camelCase aliases for the rendering side.
"""

from typing import Optional, Tuple
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from submission_analytics.data.models.assignment_model import AssignmentRecord
from submission_analytics.data.models.enums import ProcrastinationLabel


class SnapshotModel(BaseModel):
    """Base for frozen snapshot parts."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class BarItem(SnapshotModel):
    """One labeled histogram bar."""

    label: str
    value: int


class LineItem(SnapshotModel):
    """One point of a time series."""

    label: str
    value: int


class HeatCell(SnapshotModel):
    """One heatmap cell."""

    label: str
    value: int


class PendingRisk(SnapshotModel):
    """Hours-until-deadline distribution of unsubmitted assignments."""

    total: int = 0
    risk_score: float = 0.0
    items: Tuple[BarItem, ...] = ()


class AttachmentStats(SnapshotModel):
    """Presence count, byte total and size histogram of submitted attachments."""

    total: int = 0
    total_size: float = 0
    bucket_items: Tuple[BarItem, ...] = ()


class CourseStat(SnapshotModel):
    """Assignment totals for one course."""

    course_id: str
    total: int
    submitted: int


class TimeStats(SnapshotModel):
    """Average and (upper) median lead hours."""

    avg: float
    median: float


class ActivityStats(SnapshotModel):
    """Distinct submission days and the longest run of consecutive days."""

    active_days: int = 0
    longest_streak: int = 0


class WeeklyHourHeatmap(SnapshotModel):
    """7x24 weekday/hour grid; ``rows`` is empty when nothing was submitted."""

    rows: Tuple[Tuple[HeatCell, ...], ...] = ()
    max: int = 0


class CalendarHeatmap(SnapshotModel):
    """16-week x 7-day calendar grid with one month marker per new month."""

    weeks: Tuple[Tuple[HeatCell, ...], ...] = ()
    max: int = 0
    week_labels: Tuple[str, ...] = ()


class ProcrastinationProfile(SnapshotModel):
    """Composite last-minute score (0-100) and its category."""

    score: int
    label: ProcrastinationLabel
    description: str


class AnalyticsSnapshot(SnapshotModel):
    """All metrics computed from one record set."""

    generated_at: datetime
    total_count: int
    submitted_count: int
    submission_rate: float
    night_rate: float
    weekend_rate: float
    late_rate: float
    last6_rate: float
    last24_rate: float
    hour_distribution: Tuple[BarItem, ...]
    weekday_distribution: Tuple[BarItem, ...]
    submission_lag_distribution: Tuple[BarItem, ...]
    pending_risk: PendingRisk
    attachment_stats: AttachmentStats
    course_stats: Tuple[CourseStat, ...]
    time_stats: Optional[TimeStats] = None
    activity_stats: ActivityStats
    submission_trend: Tuple[LineItem, ...]
    weekly_hour_heatmap: WeeklyHourHeatmap
    calendar_heatmap: CalendarHeatmap
    procrastination_profile: ProcrastinationProfile
    recent_submissions: Tuple[AssignmentRecord, ...]
