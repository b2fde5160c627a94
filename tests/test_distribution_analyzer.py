"""Tests for the histogram builders."""
from datetime import datetime, timedelta

import pytest

from submission_analytics.analyzers import distribution_analyzer
from submission_analytics.analyzers.analytics_engine import AnalyticsEngine

MB = 1024 * 1024


def _values(items):
    return {item.label: item.value for item in items}


def test_hour_distribution_has_24_fixed_bins(sample_records):
    _, timed = AnalyticsEngine.split_submitted(tuple(sample_records))
    bars = distribution_analyzer.hour_distribution(timed)

    assert [bar.label for bar in bars] == [str(h) for h in range(24)]
    assert sum(bar.value for bar in bars) == 4
    assert _values(bars)["23"] == 1
    assert _values(bars)["5"] == 1


def test_hour_distribution_empty():
    bars = distribution_analyzer.hour_distribution(())
    assert len(bars) == 24
    assert all(bar.value == 0 for bar in bars)


def test_weekday_distribution_is_sunday_first(sample_records):
    _, timed = AnalyticsEngine.split_submitted(tuple(sample_records))
    bars = distribution_analyzer.weekday_distribution(timed)

    assert [bar.label for bar in bars] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert [bar.value for bar in bars] == [0, 1, 1, 1, 0, 0, 1]


def test_submission_lag_distribution(make_submission):
    submit = datetime(2025, 3, 10, 12, 0)
    records = [
        make_submission(submit, lead=-2),
        make_submission(submit, lead=0),
        make_submission(submit, lead=3),
        make_submission(submit, lead=6),
        make_submission(submit, lead=72),
        make_submission(submit, lead=100),
        make_submission(submit),  # no deadline
    ]
    bars = distribution_analyzer.submission_lag_distribution(records)

    assert [bar.label for bar in bars] == ["Overdue", "0-6h", "6-24h", "1-3d", ">3d"]
    assert [bar.value for bar in bars] == [2, 2, 0, 1, 1]


def test_pending_risk_excludes_past_deadlines(make_record, now):
    records = [
        make_record(deadline=now + timedelta(hours=2)),
        make_record(deadline=now + timedelta(hours=10)),
        make_record(deadline=now + timedelta(hours=48)),
        make_record(deadline=now + timedelta(hours=100)),
        make_record(deadline=now - timedelta(hours=5)),
        make_record(deadline=now - timedelta(days=30)),
        make_record(),  # no deadline
        make_record(
            submitted=True,
            submit_time=now - timedelta(hours=1),
            deadline=now + timedelta(hours=1),
        ),
    ]
    risk = distribution_analyzer.pending_risk(records, now)

    assert risk.total == 4
    assert risk.risk_score == pytest.approx(0.5)
    assert _values(risk.items) == {"<6h": 1, "6-24h": 1, "1-3d": 1, ">3d": 1}


def test_pending_risk_empty(now):
    risk = distribution_analyzer.pending_risk((), now)
    assert risk.total == 0
    assert risk.risk_score == 0.0
    assert [item.value for item in risk.items] == [0, 0, 0, 0]


def test_attachment_stats_counts_presence_and_parseable_sizes(make_submission):
    submit = datetime(2025, 3, 10, 12, 0)
    submitted = [
        make_submission(submit, attachment={"name": "a.pdf", "size": "3.2MB"}),
        make_submission(submit, attachment={"name": "b.txt", "size": 500}),
        make_submission(submit, attachment={"name": "c.zip", "size": "bad"}),
        make_submission(submit, attachment={"name": "d.txt", "size": 0}),
        make_submission(submit, attachment={"name": "e.bin"}),
        make_submission(submit),
    ]
    stats = distribution_analyzer.attachment_stats(submitted)

    assert stats.total == 5
    assert stats.total_size == pytest.approx(3.2 * MB + 500)
    assert _values(stats.bucket_items) == {
        "<100KB": 1,
        "100KB-1MB": 0,
        "1-5MB": 1,
        "5-20MB": 0,
        ">20MB": 0,
    }


def test_course_stats_sorted_by_submitted_with_stable_ties(make_record):
    records = [
        make_record(course_id="c1"),
        make_record(course_id="c2", submitted=True),
        make_record(course_id="c1", submitted=True),
        make_record(course_id="c3", submitted=True),
        make_record(course_id="c2", submitted=True),
        make_record(course_id="c1"),
    ]
    stats = distribution_analyzer.course_stats(records)

    assert [(s.course_id, s.total, s.submitted) for s in stats] == [
        ("c2", 2, 2),
        ("c1", 3, 1),
        ("c3", 1, 1),
    ]
