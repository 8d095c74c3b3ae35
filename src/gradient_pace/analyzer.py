"""Run the full pace-vs-gradient analysis pipeline."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from gradient_pace.adjustment import compute_factors
from gradient_pace.base_pace import select_base_pace, usable_pace
from gradient_pace.buckets import BUCKET_RANGES, bucketize
from gradient_pace.filtering import filter_bins
from gradient_pace.formatters import format_pace_or_na, terrain_category
from gradient_pace.gap_model import literature_curve
from gradient_pace.insights import derive_insights
from gradient_pace.models import (
    STAT_TYPES,
    AdjustmentPoint,
    Aggregation,
    BasePaceResult,
    Bin,
    BucketAdjustment,
    EnrichedBucket,
    FactorSeries,
    FilterSettings,
    Insight,
    Insights,
    StatType,
)
from gradient_pace.stats import aggregate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    stat_type: StatType
    aggregation: Aggregation
    base_pace: BasePaceResult | None  # None when no base pace is available
    factors: FactorSeries
    insights: Insights | None

    @property
    def base_pace_available(self) -> bool:
        return self.base_pace is not None and usable_pace(self.base_pace.pace(self.stat_type))

    def to_dict(self) -> dict:
        """JSON-ready output in the shape the chart layer reads."""
        base = self.base_pace
        return {
            "gradientPace": {
                "buckets": [_bucket_dict(b) for b in self.aggregation.buckets],
                "totalBinsAnalyzed": self.aggregation.total_bins_analyzed,
            },
            "gradeAdjustment": {
                "adjustmentData": [_point_dict(p) for p in self.factors.adjustment_data],
                "bucketAdjustments": [_bucket_adjustment_dict(a) for a in self.factors.bucket_adjustments],
                "basePace": base.base_pace if base else None,
                "basePaceMedian": base.base_pace_median if base else None,
                "basePaceLabel": base.base_pace_label if base else None,
                "basePaceMedianLabel": base.base_pace_median_label if base else None,
                "basePaceMethod": base.base_pace_method if base else None,
                "basePaceBinStats": {
                    "label": base.base_pace_bin_stats.label,
                    "binCount": base.base_pace_bin_stats.bin_count,
                    "totalTime": base.base_pace_bin_stats.total_time,
                } if base else None,
                "basePaceAvailable": self.base_pace_available,
                "statType": self.stat_type,
                "literatureCurve": [
                    {"gradient": g, "literatureAdjustment": value} for g, value in literature_curve()
                ],
            },
            "redDotData": [_point_dict(p) for p in self.factors.adjustment_data],
            "insights": _insights_dict(self.insights),
        }


def _bound(value: float) -> float | None:
    # JSON has no Infinity; open bucket ends become null
    return None if math.isinf(value) else value


def _bucket_dict(b: EnrichedBucket) -> dict:
    return {
        "label": b.label,
        "min": _bound(b.range.min),
        "max": _bound(b.range.max),
        "midpoint": b.midpoint,
        "category": terrain_category(b.midpoint),
        "binCount": b.bin_count,
        "totalTime": b.total_time,
        "totalDistance": b.total_distance,
        "avgPace": b.avg_pace,
        "medianPace": b.median_pace,
        "paceMinPerKm": format_pace_or_na(b.avg_pace),
        "medianPaceMinPerKm": format_pace_or_na(b.median_pace),
    }


def _point_dict(p: AdjustmentPoint) -> dict:
    return {
        "gradient": p.gradient,
        "personalAdjustment": p.personal_adjustment,
        "personalAdjustmentMedian": p.personal_adjustment_median,
        "literatureAdjustment": p.literature_adjustment,
        "paceLabel": p.pace_label,
        "binCount": p.bin_count,
    }


def _bucket_adjustment_dict(a: BucketAdjustment) -> dict:
    return {
        "label": a.label,
        "min": _bound(a.min),
        "max": _bound(a.max),
        "midpoint": a.midpoint,
        "binCount": a.bin_count,
        "personalAdjustment": a.personal_adjustment,
        "personalAdjustmentMean": a.personal_adjustment_mean,
        "personalAdjustmentMedian": a.personal_adjustment_median,
        "literatureAdjustment": a.literature_adjustment,
    }


def _insight_dict(i: Insight | None) -> dict | None:
    if i is None:
        return None
    return {
        "gradientLabel": i.gradient_label,
        "midpoint": i.midpoint,
        "personalAdjustment": i.personal_adjustment,
        "literatureAdjustment": i.literature_adjustment,
        "diff": i.diff,
        "percentDiff": i.percent_diff,
    }


def _insights_dict(insights: Insights | None) -> dict | None:
    if insights is None:
        return None
    return {
        "significantDeviations": [_insight_dict(i) for i in insights.significant_deviations],
        "maxUphillDeviation": _insight_dict(insights.max_uphill_deviation),
        "maxDownhillDeviation": _insight_dict(insights.max_downhill_deviation),
        "biggestImprovement": _insight_dict(insights.biggest_improvement),
    }


def analyze(
    bins: Iterable[Bin],
    settings: FilterSettings | None = None,
    stat_type: StatType = "mean",
) -> AnalysisResult:
    """Filter, bucket and aggregate bins, then compare against the GAP model.

    Degenerate input (no bins, or everything filtered out) yields empty
    buckets and no adjustment data rather than an error.
    """
    if stat_type not in STAT_TYPES:
        raise ValueError(f"Unknown stat type: {stat_type!r} (expected one of {', '.join(STAT_TYPES)})")
    if settings is None:
        settings = FilterSettings()

    filtered = filter_bins(bins, settings)
    aggregation = aggregate(bucketize(filtered, BUCKET_RANGES), filtered)
    base_pace = select_base_pace(aggregation.buckets, filtered)

    if base_pace is None or not usable_pace(base_pace.pace(stat_type)):
        logger.warning("No base pace available; skipping adjustment factors")
        factors = FactorSeries(adjustment_data=(), bucket_adjustments=())
        insights = None
    else:
        factors = compute_factors(aggregation.buckets, aggregation.red_dot_data, base_pace, stat_type)
        insights = derive_insights(factors.bucket_adjustments)

    logger.debug(
        "Analyzed %d bins: %d adjustment points, %d bucket adjustments",
        aggregation.total_bins_analyzed,
        len(factors.adjustment_data),
        len(factors.bucket_adjustments),
    )
    return AnalysisResult(
        stat_type=stat_type,
        aggregation=aggregation,
        base_pace=base_pace,
        factors=factors,
        insights=insights,
    )
