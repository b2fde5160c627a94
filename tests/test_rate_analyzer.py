"""Tests for rate calculations."""
from datetime import datetime

import pytest

from submission_analytics.analyzers import rate_analyzer
from submission_analytics.analyzers.analytics_engine import AnalyticsEngine


@pytest.fixture
def timed(sample_records):
    _, timed = AnalyticsEngine.split_submitted(tuple(sample_records))
    return timed


def test_submission_rate():
    assert rate_analyzer.submission_rate(4, 6) == pytest.approx(4 / 6)
    assert rate_analyzer.submission_rate(0, 0) == 0.0


def test_empty_denominators_yield_zero():
    assert rate_analyzer.night_rate(()) == 0.0
    assert rate_analyzer.weekend_rate(()) == 0.0
    assert rate_analyzer.late_rate(()) == 0.0
    assert rate_analyzer.last_window_rate([], 6) == 0.0
    assert rate_analyzer.compute_time_stats([]) is None


@pytest.mark.parametrize(
    "hour, expected",
    [(21, False), (22, True), (23, True), (0, True), (5, True), (6, False), (12, False)],
)
def test_night_hours(hour, expected):
    assert rate_analyzer.is_night_hour(hour) is expected


def test_time_based_rates(timed):
    assert len(timed) == 4
    assert rate_analyzer.night_rate(timed) == pytest.approx(0.5)
    assert rate_analyzer.weekend_rate(timed) == pytest.approx(0.25)
    assert rate_analyzer.late_rate(timed) == pytest.approx(0.25)


def test_records_without_deadline_are_never_late(make_submission):
    record = make_submission(datetime(2025, 3, 11, 14, 0))
    assert rate_analyzer.late_rate([record]) == 0.0
    assert rate_analyzer.collect_lead_hours([record]) == []


def test_late_leads_stay_in_window_denominator(timed):
    leads = rate_analyzer.collect_lead_hours(timed)
    assert sorted(leads) == pytest.approx([-1.0, 0.5, 24.0])
    assert rate_analyzer.last_window_rate(leads, 6) == pytest.approx(1 / 3)
    assert rate_analyzer.last_window_rate(leads, 24) == pytest.approx(2 / 3)


def test_zero_lead_is_counted(make_submission):
    record = make_submission(datetime(2025, 3, 10, 9, 0), lead=0)
    leads = rate_analyzer.collect_lead_hours([record])
    assert leads == [0.0]
    assert rate_analyzer.last_window_rate(leads, 6) == 1.0
    assert rate_analyzer.late_rate([record]) == 0.0


def test_time_stats(timed):
    stats = rate_analyzer.compute_time_stats(rate_analyzer.collect_lead_hours(timed))
    assert stats.avg == pytest.approx(23.5 / 3)
    assert stats.median == pytest.approx(0.5)


def test_median_is_upper_for_even_count():
    stats = rate_analyzer.compute_time_stats([4.0, 1.0, 3.0, 2.0])
    assert stats.median == 3.0
    assert stats.avg == 2.5
