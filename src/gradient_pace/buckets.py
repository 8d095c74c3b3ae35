"""Partition bins into fixed gradient ranges."""

import math
from collections.abc import Iterable, Sequence

from gradient_pace.models import Bin, BucketRange, GradientBucket

BUCKET_WIDTH = 5  # percentage points
BUCKET_LIMIT = 25  # open-ended buckets start beyond +/- this gradient


def _build_ranges(width: int = BUCKET_WIDTH, limit: int = BUCKET_LIMIT) -> tuple[BucketRange, ...]:
    ranges = [BucketRange(label=f"≤-{limit}%", min=-math.inf, max=-limit)]
    for lo in range(-limit, limit, width):
        hi = lo + width
        ranges.append(BucketRange(label=f"{lo} to {hi}%", min=lo, max=hi))
    ranges.append(BucketRange(label=f"≥{limit}%", min=limit, max=math.inf))
    return tuple(ranges)


# Ordered, non-overlapping and exhaustive over (-inf, inf)
BUCKET_RANGES = _build_ranges()


def find_bucket(gradient: float, ranges: Sequence[BucketRange] = BUCKET_RANGES) -> int:
    """Return the index of the range holding gradient (lower bound inclusive)."""
    for i, r in enumerate(ranges):
        if r.contains(gradient):
            return i
    raise ValueError(f"Gradient {gradient!r} is not covered by any bucket")


def bucketize(
    bins: Iterable[Bin], ranges: Sequence[BucketRange] = BUCKET_RANGES
) -> tuple[GradientBucket, ...]:
    """Accumulate each bin's time, distance and pace into its gradient bucket.

    Every range produces a bucket, including empty ones, so chart axes stay
    stable across requests. A bin without a pace (zero distance) still counts
    towards the totals but adds no pace sample.
    """
    counts = [0] * len(ranges)
    times = [0.0] * len(ranges)
    distances = [0.0] * len(ranges)
    samples: list[list[float]] = [[] for _ in ranges]

    for b in bins:
        i = find_bucket(b.avg_gradient_percent, ranges)
        counts[i] += 1
        times[i] += b.time_in_seconds
        distances[i] += b.distance_meters
        pace = b.pace_min_per_km
        if pace is not None:
            samples[i].append(pace)

    return tuple(
        GradientBucket(
            range=r,
            bin_count=counts[i],
            total_time=times[i],
            total_distance=distances[i],
            pace_samples=tuple(samples[i]),
        )
        for i, r in enumerate(ranges)
    )
