"""Summary statistics over a set of analysed activities."""

from dataclasses import dataclass

from gradient_pace.models import ActivityResult


@dataclass(frozen=True)
class RunSummary:
    total_files: int
    files_with_heart_rate: int
    total_bins: int
    avg_bins_per_file: float
    total_distance_km: float
    total_time_seconds: float
    total_elevation_gain: float  # meters

    @property
    def heart_rate_coverage_pct(self) -> float:
        if self.total_files == 0:
            return 0.0
        return self.files_with_heart_rate / self.total_files * 100


def run_avg_pace(result: ActivityResult) -> float | None:
    """Average pace of a whole activity in min/km."""
    if result.distance <= 0:
        return None
    return (result.total_time / 60) / result.distance


def summarize_results(results: tuple[ActivityResult, ...]) -> RunSummary:
    total_files = len(results)
    total_bins = sum(len(r.bins) for r in results)
    return RunSummary(
        total_files=total_files,
        files_with_heart_rate=sum(1 for r in results if r.avg_heart_rate),
        total_bins=total_bins,
        avg_bins_per_file=round(total_bins / total_files, 1) if total_files else 0.0,
        total_distance_km=sum(r.distance for r in results),
        total_time_seconds=sum(r.total_time for r in results),
        total_elevation_gain=sum(r.elevation_gain for r in results),
    )


def summary_to_dict(summary: RunSummary) -> dict:
    return {
        "totalFiles": summary.total_files,
        "filesWithHeartRate": summary.files_with_heart_rate,
        "totalBins": summary.total_bins,
        "avgBinsPerFile": summary.avg_bins_per_file,
        "totalDistanceKm": summary.total_distance_km,
        "totalTimeSeconds": summary.total_time_seconds,
        "totalElevationGain": summary.total_elevation_gain,
    }
