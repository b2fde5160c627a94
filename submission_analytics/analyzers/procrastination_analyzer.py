"""
Procrastination profile scoring.

The raw score weights the late rate most, then the share of submissions in
the last 24 hours and in the last 6 hours before the deadline.
"""

import math
from typing import Tuple

from submission_analytics.data.models import ProcrastinationLabel, ProcrastinationProfile

LATE_WEIGHT = 0.5
LAST24_WEIGHT = 0.3
LAST6_WEIGHT = 0.2

# (exclusive lower score, label), checked from high to low
LABEL_THRESHOLDS: Tuple[Tuple[int, ProcrastinationLabel], ...] = (
    (80, ProcrastinationLabel.EXTREME),
    (60, ProcrastinationLabel.SPRINTER),
    (40, ProcrastinationLabel.BORDERLINE),
    (20, ProcrastinationLabel.STEADY),
)


def procrastination_score(late_rate: float, last24_rate: float, last6_rate: float) -> int:
    """
    Weighted composite score scaled to an integer 0-100.

    Args:
        late_rate: Share of late submissions
        last24_rate: Share of submissions within 24h of the deadline
        last6_rate: Share of submissions within 6h of the deadline

    Returns:
        int: Score rounded half up after clamping the raw score to [0, 1]
    """
    raw = late_rate * LATE_WEIGHT + last24_rate * LAST24_WEIGHT + last6_rate * LAST6_WEIGHT
    clamped = min(1.0, max(0.0, raw))
    return int(math.floor(clamped * 100 + 0.5))


def classify_score(score: int) -> ProcrastinationLabel:
    """Map a 0-100 score to its profile label."""
    for threshold, label in LABEL_THRESHOLDS:
        if score > threshold:
            return label
    return ProcrastinationLabel.PLANNER


def procrastination_profile(
    late_rate: float, last24_rate: float, last6_rate: float
) -> ProcrastinationProfile:
    """Score the rates and attach the matching label and description."""
    score = procrastination_score(late_rate, last24_rate, last6_rate)
    label = classify_score(score)
    return ProcrastinationProfile(score=score, label=label, description=label.description)
