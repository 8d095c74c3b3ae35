"""Formatting utilities for display."""


def format_pace(minutes: float) -> str:
    """Format a pace in min/km as M:SS (seconds truncated)."""
    mins = int(minutes)
    secs = int((minutes - mins) * 60)
    return f"{mins}:{secs:02d}"


def format_pace_or_na(minutes: float | None) -> str:
    if minutes is None:
        return "N/A"
    return format_pace(minutes)


def format_duration_long(seconds: float) -> str:
    """Format seconds as Xh Ym Zs string."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    return f"{hours}h {minutes}m {secs}s"


def format_factor(value: float | None) -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}x"


def format_signed_pct(value: float) -> str:
    """Format a percentage with an explicit sign."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"


def terrain_category(midpoint: float) -> str:
    """Classify a gradient midpoint as downhill, flat (to moderate uphill) or steep."""
    if midpoint < 0:
        return "downhill"
    if midpoint <= 5:
        return "flat"
    return "steep"
