"""Configuration defaults layered from JSON config files."""

import json
from pathlib import Path

from gradient_pace.models import STAT_TYPES, FilterOptions, FilterSettings, HeartRateFilter

CONFIG_DIR = Path.home() / ".config" / "gradient-pace"
CONFIG_PATH = CONFIG_DIR / "gradient-pace.json"
LOCAL_CONFIG_PATH = Path("gradient-pace.json")

DEFAULTS = {
    "max_gradient": 40.0,
    "min_speed": 0.2,
    "max_speed": 10.0,
    "remove_unreliable_bins": False,
    "min_hr": None,
    "max_hr": None,
    "stat_type": "mean",
}


def _load_config() -> dict:
    """Load configuration from config files.

    Merges config from global and local files:
    1. ~/.config/gradient-pace/gradient-pace.json (global, loaded first)
    2. ./gradient-pace.json (local, overrides global)

    Returns:
        Dict with merged config values, empty dict if no files exist.
    """
    config = {}
    for config_path in [CONFIG_PATH, LOCAL_CONFIG_PATH]:
        if config_path.exists():
            try:
                with config_path.open() as f:
                    config.update(json.load(f))
            except (json.JSONDecodeError, OSError):
                continue
    return config


def get_defaults() -> dict:
    """Built-in defaults overridden by any keys set in the config files."""
    config = _load_config()
    defaults = dict(DEFAULTS)
    defaults.update({k: v for k, v in config.items() if k in DEFAULTS})
    if defaults["stat_type"] not in STAT_TYPES:
        defaults["stat_type"] = DEFAULTS["stat_type"]
    return defaults


def build_filter_settings(
    remove_unreliable_bins: bool,
    max_gradient: float,
    min_speed: float,
    max_speed: float,
    min_hr: float | None = None,
    max_hr: float | None = None,
) -> FilterSettings:
    """FilterSettings with the heart-rate filter enabled only when a bound is given."""
    hr_filter = None
    if min_hr is not None or max_hr is not None:
        hr_filter = HeartRateFilter(min_hr=min_hr, max_hr=max_hr)
    return FilterSettings(
        remove_unreliable_bins=remove_unreliable_bins,
        heart_rate_filter=hr_filter,
        filter_options=FilterOptions(max_gradient=max_gradient, min_speed=min_speed, max_speed=max_speed),
    )


def default_filter_settings() -> FilterSettings:
    defaults = get_defaults()
    return build_filter_settings(
        bool(defaults["remove_unreliable_bins"]),
        float(defaults["max_gradient"]),
        float(defaults["min_speed"]),
        float(defaults["max_speed"]),
        defaults["min_hr"],
        defaults["max_hr"],
    )
