"""Personal grade-adjustment factors alongside the literature model."""

from collections.abc import Sequence

from gradient_pace.base_pace import usable_pace
from gradient_pace.formatters import format_pace_or_na
from gradient_pace.gap_model import literature_adjustment
from gradient_pace.models import (
    AdjustmentPoint,
    BasePaceResult,
    BucketAdjustment,
    EnrichedBucket,
    FactorSeries,
    GradientPoint,
    StatType,
)


def _ratio(pace: float | None, base: float | None) -> float | None:
    if pace is None or base is None or base == 0:
        return None
    return pace / base


def compute_factors(
    buckets: Sequence[EnrichedBucket],
    red_dot_data: Sequence[GradientPoint],
    base_pace: BasePaceResult,
    stat_type: StatType = "mean",
) -> FactorSeries:
    """Divide each pace by the base pace to get personal adjustment factors.

    Points and buckets whose pace for stat_type is missing are left out, as are
    all of them when the base pace for stat_type is missing. Mean and median
    factors are both kept on every entry.
    """
    base = base_pace.pace(stat_type)
    if not usable_pace(base):
        return FactorSeries(adjustment_data=(), bucket_adjustments=())

    adjustment_data = []
    for point in red_dot_data:
        pace = point.pace(stat_type)
        if pace is None:
            continue
        adjustment_data.append(
            AdjustmentPoint(
                gradient=point.gradient,
                personal_adjustment=_ratio(point.avg_pace, base_pace.base_pace),
                personal_adjustment_median=_ratio(point.median_pace, base_pace.base_pace_median),
                literature_adjustment=literature_adjustment(point.gradient),
                pace_label=format_pace_or_na(pace),
                bin_count=point.bin_count,
            )
        )

    bucket_adjustments = []
    for bucket in buckets:
        pace = bucket.pace(stat_type)
        if pace is None:
            continue
        bucket_adjustments.append(
            BucketAdjustment(
                label=bucket.label,
                min=bucket.range.min,
                max=bucket.range.max,
                midpoint=bucket.midpoint,
                bin_count=bucket.bin_count,
                personal_adjustment=pace / base,
                personal_adjustment_mean=_ratio(bucket.avg_pace, base_pace.base_pace),
                personal_adjustment_median=_ratio(bucket.median_pace, base_pace.base_pace_median),
                literature_adjustment=literature_adjustment(bucket.midpoint),
            )
        )

    return FactorSeries(
        adjustment_data=tuple(adjustment_data),
        bucket_adjustments=tuple(bucket_adjustments),
    )
