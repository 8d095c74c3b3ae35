"""Compare personal and literature factors and pick out notable deviations."""

from collections.abc import Sequence

from gradient_pace.models import BucketAdjustment, Insight, Insights

SIGNIFICANT_DIFF = 0.05  # absolute adjustment-factor difference
MAX_SIGNIFICANT_DEVIATIONS = 3


def _insight(adj: BucketAdjustment) -> Insight | None:
    if adj.literature_adjustment == 0:
        return None
    diff = adj.personal_adjustment - adj.literature_adjustment
    return Insight(
        gradient_label=adj.label,
        midpoint=adj.midpoint,
        personal_adjustment=adj.personal_adjustment,
        literature_adjustment=adj.literature_adjustment,
        diff=diff,
        percent_diff=diff / adj.literature_adjustment * 100,
    )


def derive_insights(bucket_adjustments: Sequence[BucketAdjustment]) -> Insights | None:
    """Summarize where personal adjustment departs from the literature model.

    Returns None when no bucket can be compared. A positive diff means the
    athlete is slower on that gradient than the model predicts.
    """
    compared = [i for i in (_insight(a) for a in bucket_adjustments) if i is not None]
    if not compared:
        return None

    significant = sorted(
        (i for i in compared if abs(i.diff) > SIGNIFICANT_DIFF),
        key=lambda i: abs(i.diff),
        reverse=True,
    )

    uphill = [i for i in significant if i.midpoint > 0]
    downhill = [i for i in significant if i.midpoint < 0]

    slower = [i for i in significant if i.diff > 0]
    if slower:
        biggest_improvement = max(slower, key=lambda i: i.diff)
    elif significant:
        # No gradient where the athlete is slower than the model; this falls
        # back to the closest match rather than the largest gap.
        biggest_improvement = min(significant, key=lambda i: abs(i.diff))
    else:
        biggest_improvement = None

    return Insights(
        significant_deviations=tuple(significant[:MAX_SIGNIFICANT_DEVIATIONS]),
        max_uphill_deviation=uphill[0] if uphill else None,
        max_downhill_deviation=downhill[0] if downhill else None,
        biggest_improvement=biggest_improvement,
    )
