"""Select the flat-ground reference pace used to scale personal adjustments."""

import logging
from collections.abc import Sequence

from gradient_pace.buckets import BUCKET_WIDTH
from gradient_pace.formatters import format_pace_or_na
from gradient_pace.models import BasePaceResult, Bin, BinStats, EnrichedBucket
from gradient_pace.stats import mean_pace, median

logger = logging.getLogger(__name__)

NEAR_ZERO_GRADIENT = 2.0  # percent, inclusive on both sides
NEAR_ZERO_LABEL = f"-{NEAR_ZERO_GRADIENT:g}% to {NEAR_ZERO_GRADIENT:g}%"
ALL_BINS_LABEL = "All gradients"


def _is_zero_bucket(bucket: EnrichedBucket) -> bool:
    """A bucket spanning exactly [0, width), or a dedicated bucket centred on 0."""
    lo, hi = bucket.range.min, bucket.range.max
    if lo == 0 and hi == BUCKET_WIDTH:
        return True
    return lo < 0 < hi and lo == -hi


def usable_pace(pace: float | None) -> bool:
    """A pace the personal factors can be divided by."""
    return pace is not None and pace > 0


def _has_pace(result: BasePaceResult) -> bool:
    return usable_pace(result.base_pace) or usable_pace(result.base_pace_median)


def _from_bins(bins: Sequence[Bin], method: str, label: str) -> BasePaceResult:
    total_time = sum(b.time_in_seconds for b in bins)
    total_distance = sum(b.distance_meters for b in bins)
    paces = [b.pace_min_per_km for b in bins if b.pace_min_per_km is not None]
    return _result(
        mean_pace(total_time, total_distance),
        median(paces),
        method,
        BinStats(label=label, bin_count=len(bins), total_time=total_time),
    )


def _result(base: float | None, base_median: float | None, method: str, stats: BinStats) -> BasePaceResult:
    return BasePaceResult(
        base_pace=base,
        base_pace_median=base_median,
        base_pace_label=format_pace_or_na(base),
        base_pace_median_label=format_pace_or_na(base_median),
        base_pace_method=method,
        base_pace_bin_stats=stats,
    )


def select_base_pace(buckets: Sequence[EnrichedBucket], bins: Sequence[Bin]) -> BasePaceResult | None:
    """Pick the base pace by the first strategy that yields a usable pace.

    1. exact-zero: the zero gradient bucket, when it holds bins.
    2. near-zero: all bins with gradient within +/-2%.
    3. average-all: every filtered bin.

    A strategy whose population has no positive mean or median pace (only
    zero-distance or zero-time bins) is passed over. Mean and median are both
    computed. Returns None when no bins are available at all.
    """
    for bucket in buckets:
        if not (_is_zero_bucket(bucket) and bucket.bin_count > 0):
            continue
        result = _result(
            bucket.avg_pace,
            bucket.median_pace,
            "exact-zero",
            BinStats(label=bucket.label, bin_count=bucket.bin_count, total_time=bucket.total_time),
        )
        if _has_pace(result):
            logger.debug("Base pace from zero bucket %s (%d bins)", bucket.label, bucket.bin_count)
            return result
        logger.debug("Zero bucket %s has no usable pace", bucket.label)

    near_zero = [b for b in bins if -NEAR_ZERO_GRADIENT <= b.avg_gradient_percent <= NEAR_ZERO_GRADIENT]
    if near_zero:
        result = _from_bins(near_zero, "near-zero", NEAR_ZERO_LABEL)
        if _has_pace(result):
            logger.debug("Base pace from %d near-zero bins", len(near_zero))
            return result
        logger.debug("Near-zero bins have no usable pace")

    if bins:
        logger.debug("Base pace averaged over all %d bins", len(bins))
        return _from_bins(bins, "average-all", ALL_BINS_LABEL)

    logger.warning("No bins available to determine a base pace")
    return None
