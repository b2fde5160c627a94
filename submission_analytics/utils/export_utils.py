"""
Tabular export of analytics snapshots.

Converts the list-shaped parts of a snapshot into pandas DataFrames so
they can be written as CSV next to the JSON snapshot.
"""

from typing import Dict, Sequence

import pandas as pd

from submission_analytics.data.models import AnalyticsSnapshot, BarItem, Weekday


def bar_items_to_frame(items: Sequence[BarItem]) -> pd.DataFrame:
    """Convert labeled bars to a two-column frame indexed by label."""
    return pd.DataFrame(
        {"label": [item.label for item in items], "count": [item.value for item in items]}
    ).set_index("label")


def snapshot_to_frames(snapshot: AnalyticsSnapshot) -> Dict[str, pd.DataFrame]:
    """
    Build one DataFrame per exportable table of a snapshot.

    Args:
        snapshot: Analytics snapshot

    Returns:
        Dict[str, pd.DataFrame]: Tables keyed by export name. The weekly
            heatmap is only present when there were submissions.
    """
    frames = {
        "course_stats": pd.DataFrame(
            [stat.model_dump() for stat in snapshot.course_stats],
            columns=["course_id", "total", "submitted"],
        ).set_index("course_id"),
        "submission_trend": pd.DataFrame(
            {
                "day": [point.label for point in snapshot.submission_trend],
                "submissions": [point.value for point in snapshot.submission_trend],
            }
        ).set_index("day"),
        "hour_distribution": bar_items_to_frame(snapshot.hour_distribution),
        "weekday_distribution": bar_items_to_frame(snapshot.weekday_distribution),
        "submission_lag": bar_items_to_frame(snapshot.submission_lag_distribution),
        "pending_risk": bar_items_to_frame(snapshot.pending_risk.items),
        "attachment_sizes": bar_items_to_frame(snapshot.attachment_stats.bucket_items),
    }

    rows = snapshot.weekly_hour_heatmap.rows
    if rows:
        frames["weekly_hour_heatmap"] = pd.DataFrame(
            [[cell.value for cell in row] for row in rows],
            index=Weekday.get_all_labels(),
            columns=[f"{hour:02d}" for hour in range(24)],
        )

    return frames
