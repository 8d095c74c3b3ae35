"""Literature grade-adjustment model.

Quartic fit of pace multiplier against gradient from Strava's improved GAP
model: https://medium.com/strava-engineering/an-improved-gap-model-8b07ae8886c3
"""

GAP_COEFFICIENTS = {
    "a": -5.294439830640173e-7,
    "b": -3.989571857841264e-6,
    "c": 2.0535661142752205e-3,
    "d": 3.265674125152065e-2,
    "e": 1.0,
}

# Plotted/compared gradient range in percent
CURVE_MIN_GRADIENT = -35
CURVE_MAX_GRADIENT = 35


def literature_adjustment(gradient: float) -> float:
    """Pace multiplier predicted for a gradient in percent (1.0 on the flat)."""
    c = GAP_COEFFICIENTS
    return (
        c["a"] * gradient**4
        + c["b"] * gradient**3
        + c["c"] * gradient**2
        + c["d"] * gradient
        + c["e"]
    )


def literature_curve(
    start: int = CURVE_MIN_GRADIENT, stop: int = CURVE_MAX_GRADIENT, step: int = 1
) -> list[tuple[int, float]]:
    """Sample the model at whole gradients from start to stop inclusive."""
    return [(g, literature_adjustment(g)) for g in range(start, stop + 1, step)]
