"""Plain-text report of an analysis result."""

from gradient_pace.analyzer import AnalysisResult
from gradient_pace.formatters import (
    format_duration_long,
    format_factor,
    format_pace_or_na,
    format_signed_pct,
)
from gradient_pace.models import Insight
from gradient_pace.summary import RunSummary


def format_summary(summary: RunSummary) -> str:
    lines = []
    lines.append("=== Summary ===")
    lines.append(f"Files:           {summary.total_files}")
    lines.append(f"Total bins:      {summary.total_bins} ({summary.avg_bins_per_file} per file)")
    lines.append(
        f"Files with HR:   {summary.files_with_heart_rate}/{summary.total_files} "
        f"({summary.heart_rate_coverage_pct:.0f}%)"
    )
    lines.append(f"Total distance:  {summary.total_distance_km:.1f} km")
    lines.append(f"Total time:      {format_duration_long(summary.total_time_seconds)}")
    lines.append(f"Total elevation: {summary.total_elevation_gain:.0f} m")
    return "\n".join(lines)


def _insight_line(title: str, insight: Insight | None) -> str:
    if insight is None:
        return f"{title}: none"
    return (
        f"{title}: {insight.gradient_label} personal {insight.personal_adjustment:.2f}x "
        f"vs literature {insight.literature_adjustment:.2f}x ({format_signed_pct(insight.percent_diff)})"
    )


def format_analysis_report(result: AnalysisResult) -> str:
    """Format an analysis result as a human-readable report."""
    lines = []
    agg = result.aggregation

    lines.append("=== Pace vs Gradient ===")
    lines.append(f"Bins analyzed: {agg.total_bins_analyzed}")
    lines.append("")
    lines.append(f"{'Gradient':>12} | {'Bins':>5} | {'Mean':>6} | {'Median':>6}")
    lines.append("-" * 40)
    for bucket in agg.buckets:
        lines.append(
            f"{bucket.label:>12} | {bucket.bin_count:>5} | "
            f"{format_pace_or_na(bucket.avg_pace):>6} | {format_pace_or_na(bucket.median_pace):>6}"
        )
    lines.append("")

    lines.append("=== Grade Adjustment (personal vs literature) ===")
    base = result.base_pace
    if not result.base_pace_available:
        lines.append("No base pace available; adjustment factors not computed.")
        return "\n".join(lines)

    stats = base.base_pace_bin_stats
    lines.append(
        f"Base pace: {base.base_pace_label} min/km (mean), {base.base_pace_median_label} min/km (median)"
    )
    lines.append(
        f"Method: {base.base_pace_method} from {stats.label} "
        f"({stats.bin_count} bins, {format_duration_long(stats.total_time)})"
    )
    lines.append(f"Statistic: {result.stat_type}")
    lines.append("")
    lines.append(f"{'Gradient':>12} | {'Personal':>8} | {'Literature':>10} | {'Bins':>5}")
    lines.append("-" * 46)
    for adj in result.factors.bucket_adjustments:
        lines.append(
            f"{adj.label:>12} | {format_factor(adj.personal_adjustment):>8} | "
            f"{format_factor(adj.literature_adjustment):>10} | {adj.bin_count:>5}"
        )
    lines.append("")

    lines.append("=== Insights ===")
    insights = result.insights
    if insights is None:
        lines.append("Not enough data for insights.")
        return "\n".join(lines)

    if insights.significant_deviations:
        lines.append("Largest deviations:")
        for i in insights.significant_deviations:
            lines.append(f"  {i.gradient_label:>12}: {i.diff:+.2f} ({format_signed_pct(i.percent_diff)})")
    else:
        lines.append("No significant deviations from the literature model.")
    lines.append(_insight_line("Max uphill deviation", insights.max_uphill_deviation))
    lines.append(_insight_line("Max downhill deviation", insights.max_downhill_deviation))
    lines.append(_insight_line("Biggest improvement", insights.biggest_improvement))

    return "\n".join(lines)
