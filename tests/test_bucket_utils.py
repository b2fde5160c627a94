"""Tests for range bucketing."""
import pytest

from submission_analytics.analyzers.distribution_analyzer import (
    ATTACHMENT_SIZE_BUCKETS,
    PENDING_RISK_BUCKETS,
    SUBMISSION_LAG_BUCKETS,
)
from submission_analytics.utils.bucket_utils import (
    Bucket,
    count_into_buckets,
    find_bucket_index,
)

LAG_LABELS = [b.label for b in SUBMISSION_LAG_BUCKETS]


@pytest.mark.parametrize(
    "lead, label",
    [
        (-100, "Overdue"),
        (0, "Overdue"),
        (0.01, "0-6h"),
        (6, "0-6h"),
        (6.01, "6-24h"),
        (24, "6-24h"),
        (24.5, "1-3d"),
        (72, "1-3d"),
        (72.5, ">3d"),
        (10_000, ">3d"),
    ],
)
def test_lag_boundaries_are_exclusive_min_inclusive_max(lead, label):
    assert LAG_LABELS[find_bucket_index(lead, SUBMISSION_LAG_BUCKETS)] == label


def test_upper_bound_is_inclusive():
    assert count_into_buckets([6.0], SUBMISSION_LAG_BUCKETS) == (0, 1, 0, 0, 0)
    assert count_into_buckets([24.0], SUBMISSION_LAG_BUCKETS) == (0, 0, 1, 0, 0)


def test_values_outside_every_bucket_are_dropped():
    buckets = (Bucket("low", 0, 10), Bucket("high", 10, 20))
    assert find_bucket_index(0, buckets) is None
    assert find_bucket_index(25, buckets) is None
    assert count_into_buckets([0, 5, 10, 15, 25], buckets) == (2, 1)


def test_zero_hours_left_matches_no_pending_bucket():
    assert find_bucket_index(0, PENDING_RISK_BUCKETS) is None


def test_zero_byte_attachment_matches_no_size_bucket():
    assert find_bucket_index(0, ATTACHMENT_SIZE_BUCKETS) is None
    assert find_bucket_index(1, ATTACHMENT_SIZE_BUCKETS) == 0


def test_bucket_contains():
    bucket = Bucket("0-6h", 0, 6)
    assert bucket.contains(6)
    assert not bucket.contains(0)
