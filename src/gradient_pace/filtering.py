"""Drop unreliable or out-of-range bins before aggregation."""

import logging
from collections.abc import Iterable

from gradient_pace.models import Bin, FilterOptions, FilterSettings, HeartRateFilter

logger = logging.getLogger(__name__)


def is_reliable(b: Bin, options: FilterOptions) -> bool:
    """Check a bin against the gradient, speed and non-zero time/distance limits."""
    if b.time_in_seconds <= 0 or b.distance_meters <= 0:
        return False
    if abs(b.avg_gradient_percent) > options.max_gradient:
        return False
    speed = b.speed_kmh
    return speed is not None and options.min_speed <= speed <= options.max_speed


def within_heart_rate(b: Bin, hr_filter: HeartRateFilter) -> bool:
    if b.avg_heart_rate is None:
        return False
    if hr_filter.min_hr is not None and b.avg_heart_rate < hr_filter.min_hr:
        return False
    if hr_filter.max_hr is not None and b.avg_heart_rate > hr_filter.max_hr:
        return False
    return True


def filter_bins(bins: Iterable[Bin], settings: FilterSettings) -> tuple[Bin, ...]:
    """Return the bins that pass every enabled filter, in input order.

    Each rule is toggled independently by the settings; a bin must pass all
    enabled rules. An empty result is valid.
    """
    bins = tuple(bins)
    kept = []
    for b in bins:
        if settings.remove_unreliable_bins and not is_reliable(b, settings.filter_options):
            continue
        if settings.heart_rate_filter is not None and not within_heart_rate(b, settings.heart_rate_filter):
            continue
        kept.append(b)

    logger.debug("Filtered bins: kept %d of %d", len(kept), len(bins))
    return tuple(kept)
