import math
from dataclasses import dataclass, field
from typing import Literal

StatType = Literal["mean", "median"]
STAT_TYPES: tuple[str, ...] = ("mean", "median")

BasePaceMethod = Literal["exact-zero", "near-zero", "average-all"]

# Plotting midpoint for the open-ended catch-all buckets
OPEN_BUCKET_MIDPOINT = 27.5


@dataclass(frozen=True)
class Bin:
    distance_start: float  # meters
    distance_end: float  # meters
    avg_gradient_percent: float
    time_in_seconds: float
    distance_meters: float
    avg_heart_rate: float | None = None  # bpm

    @property
    def pace_min_per_km(self) -> float | None:
        if self.distance_meters <= 0:
            return None
        return (self.time_in_seconds / 60) / (self.distance_meters / 1000)

    @property
    def speed_kmh(self) -> float | None:
        if self.time_in_seconds <= 0:
            return None
        return (self.distance_meters / 1000) / (self.time_in_seconds / 3600)


@dataclass(frozen=True)
class HeartRateFilter:
    min_hr: float | None = None  # bpm
    max_hr: float | None = None  # bpm


@dataclass(frozen=True)
class FilterOptions:
    max_gradient: float = 40.0  # percent, absolute value
    min_speed: float = 0.2  # km/h
    max_speed: float = 10.0  # km/h


@dataclass(frozen=True)
class FilterSettings:
    remove_unreliable_bins: bool = False
    heart_rate_filter: HeartRateFilter | None = None
    filter_options: FilterOptions = field(default_factory=FilterOptions)


@dataclass(frozen=True)
class BucketRange:
    label: str
    min: float  # inclusive, -inf for the open lower bucket
    max: float  # exclusive, inf for the open upper bucket

    def contains(self, gradient: float) -> bool:
        return self.min <= gradient < self.max

    @property
    def midpoint(self) -> float:
        if math.isinf(self.min):
            return -OPEN_BUCKET_MIDPOINT
        if math.isinf(self.max):
            return OPEN_BUCKET_MIDPOINT
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class GradientBucket:
    """Raw samples accumulated for one gradient range."""

    range: BucketRange
    bin_count: int
    total_time: float  # seconds
    total_distance: float  # meters
    pace_samples: tuple[float, ...]  # min/km


@dataclass(frozen=True)
class EnrichedBucket:
    range: BucketRange
    bin_count: int
    total_time: float
    total_distance: float
    avg_pace: float | None  # min/km, None when the bucket has no distance
    median_pace: float | None

    @property
    def label(self) -> str:
        return self.range.label

    @property
    def midpoint(self) -> float:
        return self.range.midpoint

    def pace(self, stat_type: StatType) -> float | None:
        return self.median_pace if stat_type == "median" else self.avg_pace


@dataclass(frozen=True)
class GradientPoint:
    """Pace statistics for bins rounding to one whole-percent gradient."""

    gradient: int
    bin_count: int
    total_time: float
    total_distance: float
    avg_pace: float | None
    median_pace: float | None

    def pace(self, stat_type: StatType) -> float | None:
        return self.median_pace if stat_type == "median" else self.avg_pace


@dataclass(frozen=True)
class Aggregation:
    buckets: tuple[EnrichedBucket, ...]
    total_bins_analyzed: int
    red_dot_data: tuple[GradientPoint, ...]


@dataclass(frozen=True)
class BinStats:
    label: str
    bin_count: int
    total_time: float  # seconds


@dataclass(frozen=True)
class BasePaceResult:
    base_pace: float | None  # mean, min/km
    base_pace_median: float | None
    base_pace_label: str
    base_pace_median_label: str
    base_pace_method: BasePaceMethod
    base_pace_bin_stats: BinStats

    def pace(self, stat_type: StatType) -> float | None:
        return self.base_pace_median if stat_type == "median" else self.base_pace


@dataclass(frozen=True)
class AdjustmentPoint:
    """Personal adjustment at one whole-percent gradient ("red dot")."""

    gradient: int
    personal_adjustment: float | None  # mean pace / mean base pace
    personal_adjustment_median: float | None
    literature_adjustment: float
    pace_label: str
    bin_count: int

    def factor(self, stat_type: StatType) -> float | None:
        if stat_type == "median":
            return self.personal_adjustment_median
        return self.personal_adjustment


@dataclass(frozen=True)
class BucketAdjustment:
    label: str
    min: float
    max: float
    midpoint: float
    bin_count: int
    personal_adjustment: float  # for the requested stat type
    personal_adjustment_mean: float | None
    personal_adjustment_median: float | None
    literature_adjustment: float


@dataclass(frozen=True)
class FactorSeries:
    adjustment_data: tuple[AdjustmentPoint, ...]
    bucket_adjustments: tuple[BucketAdjustment, ...]


@dataclass(frozen=True)
class Insight:
    gradient_label: str
    midpoint: float
    personal_adjustment: float
    literature_adjustment: float
    diff: float
    percent_diff: float


@dataclass(frozen=True)
class Insights:
    significant_deviations: tuple[Insight, ...]
    max_uphill_deviation: Insight | None
    max_downhill_deviation: Insight | None
    biggest_improvement: Insight | None


@dataclass(frozen=True)
class ActivityResult:
    """One analysed activity as delivered by the ingestion service."""

    filename: str
    distance: float  # km
    total_time: float  # seconds
    elevation_gain: float  # meters
    bins: tuple[Bin, ...]
    avg_heart_rate: float | None = None
    calories: float | None = None
    file_type: str | None = None
