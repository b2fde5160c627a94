"""
Enumerations for the submission analytics system.

This module defines the categorical values used throughout the system,
providing type safety and documentation for categorical data.
Compatible with Pydantic models.
"""

from enum import Enum
from typing import Dict, List


class Weekday(int, Enum):
    """Days of the week, indexed Sunday-first as in the calendar grids."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        """Short display label ("Sun", "Mon", ...)."""
        return self.name[:3].title()

    @classmethod
    def get_all_labels(cls) -> List[str]:
        """Returns the short labels in Sunday-first order"""
        return [day.label for day in cls]

    def is_weekend(self) -> bool:
        """Check whether this day is Saturday or Sunday."""
        return self in (Weekday.SUNDAY, Weekday.SATURDAY)


PROFILE_DESCRIPTIONS: Dict[str, str] = {
    "extreme": "Habitually submits at the last moment",
    "sprinter": "Mostly submits just before the deadline",
    "borderline": "Inconsistent, occasionally right at the line",
    "steady": "Consistent pace, high completion",
    "planner": "Submits well ahead of time",
}


class ProcrastinationLabel(str, Enum):
    """Categorical procrastination profiles, ordered from most to least last-minute."""

    EXTREME = "extreme"  # score > 80
    SPRINTER = "sprinter"  # score > 60
    BORDERLINE = "borderline"  # score > 40
    STEADY = "steady"  # score > 20
    PLANNER = "planner"

    @property
    def description(self) -> str:
        """Human-readable description of the profile."""
        return PROFILE_DESCRIPTIONS[self.value]
