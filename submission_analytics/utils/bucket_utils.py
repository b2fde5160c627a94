"""
Range bucketing utilities for histogram construction.

A bucket is a labeled half-open numeric range ``(min, max]``: the lower
bound is exclusive and the upper bound inclusive, so a lag of exactly 6
hours lands in "0-6h" and a lag of exactly 0 in "Overdue". Values that
match no bucket are dropped from the histogram and from its total.
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

INF = float("inf")


class Bucket(NamedTuple):
    """A labeled ``(min, max]`` range."""

    label: str
    min: float
    max: float

    def contains(self, value: float) -> bool:
        """Check whether the value falls inside this bucket."""
        return self.min < value <= self.max


def find_bucket_index(value: float, buckets: Sequence[Bucket]) -> Optional[int]:
    """
    Find the first bucket that contains a value.

    Args:
        value: Numeric value to place
        buckets: Ordered bucket definitions

    Returns:
        Optional[int]: Index of the matching bucket, or None if none match
    """
    for idx, bucket in enumerate(buckets):
        if bucket.contains(value):
            return idx
    return None


def count_into_buckets(
    values: Iterable[float], buckets: Sequence[Bucket]
) -> Tuple[int, ...]:
    """
    Count how many values fall into each bucket.

    Args:
        values: Numeric values to place
        buckets: Ordered bucket definitions

    Returns:
        Tuple[int, ...]: One count per bucket, in bucket order
    """
    counts: List[int] = [0] * len(buckets)
    for value in values:
        idx = find_bucket_index(value, buckets)
        if idx is not None:
            counts[idx] += 1
    return tuple(counts)
