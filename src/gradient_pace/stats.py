"""Reduce bucket samples into pace statistics."""

import math
import statistics
from collections.abc import Iterable, Sequence

from gradient_pace.models import (
    Aggregation,
    Bin,
    EnrichedBucket,
    GradientBucket,
    GradientPoint,
)

# Whole-percent gradients covered by the per-gradient ("red dot") points
POINT_GRADIENT_MIN = -30
POINT_GRADIENT_MAX = 30


def median(values: Sequence[float]) -> float | None:
    """Median of values; the mean of the two middle values for even lengths."""
    if not values:
        return None
    return statistics.median(values)


def mean_pace(total_time: float, total_distance: float) -> float | None:
    """Distance-weighted pace in min/km from seconds and meters."""
    if total_distance <= 0:
        return None
    return (total_time / 60) / (total_distance / 1000)


def round_gradient(gradient: float) -> int:
    """Round half up, so -2.5 goes to -2 and 2.5 goes to 3."""
    return math.floor(gradient + 0.5)


def enrich_bucket(bucket: GradientBucket) -> EnrichedBucket:
    return EnrichedBucket(
        range=bucket.range,
        bin_count=bucket.bin_count,
        total_time=bucket.total_time,
        total_distance=bucket.total_distance,
        avg_pace=mean_pace(bucket.total_time, bucket.total_distance),
        median_pace=median(bucket.pace_samples),
    )


def gradient_points(
    bins: Iterable[Bin],
    lo: int = POINT_GRADIENT_MIN,
    hi: int = POINT_GRADIENT_MAX,
) -> tuple[GradientPoint, ...]:
    """Group bins by rounded gradient and compute statistics per whole percent.

    One point is returned for every integer in [lo, hi]; points without bins
    carry None statistics.
    """
    groups: dict[int, list[Bin]] = {g: [] for g in range(lo, hi + 1)}
    for b in bins:
        key = round_gradient(b.avg_gradient_percent)
        if key in groups:
            groups[key].append(b)

    points = []
    for gradient, members in groups.items():
        total_time = sum(b.time_in_seconds for b in members)
        total_distance = sum(b.distance_meters for b in members)
        paces = [b.pace_min_per_km for b in members if b.pace_min_per_km is not None]
        points.append(
            GradientPoint(
                gradient=gradient,
                bin_count=len(members),
                total_time=total_time,
                total_distance=total_distance,
                avg_pace=mean_pace(total_time, total_distance),
                median_pace=median(paces),
            )
        )
    return tuple(points)


def aggregate(buckets: Sequence[GradientBucket], bins: Sequence[Bin]) -> Aggregation:
    """Compute mean/median pace per bucket plus the per-gradient point data.

    bins must be the same filtered bins the buckets were built from.
    """
    return Aggregation(
        buckets=tuple(enrich_bucket(b) for b in buckets),
        total_bins_analyzed=sum(b.bin_count for b in buckets),
        red_dot_data=gradient_points(bins),
    )
