"""
Models package for the submission analytics system.

This package contains the input models for assignment records and the
frozen output models that make up an analytics snapshot.
"""

# Re-export enums
from .enums import Weekday, ProcrastinationLabel

# Re-export input models
from .assignment_model import Attachment, AssignmentRecord, SemesterRange

# Re-export snapshot models
from .snapshot_model import (
    ActivityStats,
    AnalyticsSnapshot,
    AttachmentStats,
    BarItem,
    CalendarHeatmap,
    CourseStat,
    HeatCell,
    LineItem,
    PendingRisk,
    ProcrastinationProfile,
    TimeStats,
    WeeklyHourHeatmap,
)

# Define all models for easy access
__all__ = [
    # Enums
    "Weekday",
    "ProcrastinationLabel",
    # Input models
    "Attachment",
    "AssignmentRecord",
    "SemesterRange",
    # Snapshot models
    "ActivityStats",
    "AnalyticsSnapshot",
    "AttachmentStats",
    "BarItem",
    "CalendarHeatmap",
    "CourseStat",
    "HeatCell",
    "LineItem",
    "PendingRisk",
    "ProcrastinationProfile",
    "TimeStats",
    "WeeklyHourHeatmap",
]
