"""Load analysis results JSON produced by the ingestion service."""

import json
import math
from pathlib import Path
from typing import Any

from gradient_pace.models import ActivityResult, Bin, FilterOptions, FilterSettings, HeartRateFilter


def _number(data: dict, key: str, where: str, required: bool = True) -> float | None:
    value = data.get(key)
    if value is None:
        if required:
            raise ValueError(f"{where}: missing required field '{key}'")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where}: field '{key}' must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{where}: field '{key}' must be finite, got {value}")
    return float(value)


def _mapping(data: Any, where: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    return data


def parse_bin(data: Any, where: str = "bin") -> Bin:
    """Build a Bin from its JSON object, failing fast on missing or non-numeric fields."""
    data = _mapping(data, where)
    return Bin(
        distance_start=_number(data, "distanceStart", where),
        distance_end=_number(data, "distanceEnd", where),
        avg_gradient_percent=_number(data, "avgGradientPercent", where),
        time_in_seconds=_number(data, "timeInSeconds", where),
        distance_meters=_number(data, "distanceMeters", where),
        avg_heart_rate=_number(data, "avgHeartRate", where, required=False),
    )


def parse_result(data: Any, index: int = 0) -> ActivityResult:
    where = f"results[{index}]"
    data = _mapping(data, where)

    filename = data.get("filename")
    if not isinstance(filename, str):
        raise ValueError(f"{where}: field 'filename' must be a string")

    raw_bins = data.get("bins", [])
    if not isinstance(raw_bins, list):
        raise ValueError(f"{where}: field 'bins' must be a list")

    file_type = data.get("fileType")
    return ActivityResult(
        filename=filename,
        distance=_number(data, "distance", where),
        total_time=_number(data, "totalTime", where),
        elevation_gain=_number(data, "elevationGain", where),
        bins=tuple(parse_bin(b, f"{where}.bins[{j}]") for j, b in enumerate(raw_bins)),
        avg_heart_rate=_number(data, "avgHeartRate", where, required=False),
        calories=_number(data, "calories", where, required=False),
        file_type=file_type if isinstance(file_type, str) else None,
    )


def load_results(data: Any) -> tuple[ActivityResult, ...]:
    """Parse {"results": [...]} (or a bare list of results)."""
    if isinstance(data, dict):
        if "results" not in data:
            raise ValueError("Missing required field 'results'")
        data = data["results"]
    if not isinstance(data, list):
        raise ValueError("'results' must be a list")
    return tuple(parse_result(r, i) for i, r in enumerate(data))


def load_results_file(filepath: str | Path) -> tuple[ActivityResult, ...]:
    """Read and parse a results JSON file."""
    with open(filepath, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath}: {e}") from e
    return load_results(data)


def collect_bins(results: tuple[ActivityResult, ...]) -> tuple[Bin, ...]:
    """All bins across all activities, in file order."""
    return tuple(b for r in results for b in r.bins)


def parse_filter_settings(body: Any, defaults: FilterSettings | None = None) -> FilterSettings:
    """Read heartRateFilter / removeUnreliableBins / filterOptions from a request body.

    Missing keys fall back to defaults.
    """
    if defaults is None:
        defaults = FilterSettings()
    body = _mapping(body if body is not None else {}, "request")

    remove = body.get("removeUnreliableBins", defaults.remove_unreliable_bins)
    if not isinstance(remove, bool):
        raise ValueError("request: field 'removeUnreliableBins' must be a boolean")

    hr_filter = defaults.heart_rate_filter
    if "heartRateFilter" in body:
        raw_hr = body["heartRateFilter"]
        if raw_hr is None:
            hr_filter = None
        else:
            raw_hr = _mapping(raw_hr, "heartRateFilter")
            hr_filter = HeartRateFilter(
                min_hr=_number(raw_hr, "minHR", "heartRateFilter", required=False),
                max_hr=_number(raw_hr, "maxHR", "heartRateFilter", required=False),
            )

    options = defaults.filter_options
    if body.get("filterOptions") is not None:
        raw_opts = _mapping(body["filterOptions"], "filterOptions")

        def opt(key: str, default: float) -> float:
            value = _number(raw_opts, key, "filterOptions", required=False)
            return default if value is None else value

        options = FilterOptions(
            max_gradient=opt("maxGradient", options.max_gradient),
            min_speed=opt("minSpeed", options.min_speed),
            max_speed=opt("maxSpeed", options.max_speed),
        )

    return FilterSettings(
        remove_unreliable_bins=remove,
        heart_rate_filter=hr_filter,
        filter_options=options,
    )
