"""Tests for tabular snapshot export."""
from submission_analytics.analyzers import AnalyticsEngine
from submission_analytics.utils.export_utils import snapshot_to_frames


def test_frames_for_snapshot(sample_records, now):
    frames = snapshot_to_frames(AnalyticsEngine().analyze(sample_records, now=now))

    assert list(frames["course_stats"].index) == ["c1", "c2", "c3"]
    assert list(frames["course_stats"].columns) == ["total", "submitted"]
    assert frames["hour_distribution"].shape == (24, 1)
    assert frames["weekday_distribution"].loc["Sat", "count"] == 1
    assert frames["submission_trend"].index[0] == "03/05"
    assert frames["weekly_hour_heatmap"].loc["Wed", "05"] == 1
    assert int(frames["weekly_hour_heatmap"].to_numpy().sum()) == 4


def test_empty_snapshot_has_no_weekly_heatmap_table(now):
    frames = snapshot_to_frames(AnalyticsEngine().analyze([], now=now))

    assert "weekly_hour_heatmap" not in frames
    assert frames["course_stats"].empty
    assert frames["submission_trend"].empty
    assert list(frames["pending_risk"]["count"]) == [0, 0, 0, 0]
