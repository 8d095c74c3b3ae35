import pytest

from gradient_pace.models import Bin


def make_bin(gradient: float, pace: float = 6.0, distance: float = 1000.0, heart_rate: float | None = None,
             start: float = 0.0) -> Bin:
    """Build a bin covering distance meters at the given pace in min/km."""
    return Bin(
        distance_start=start,
        distance_end=start + distance,
        avg_gradient_percent=gradient,
        time_in_seconds=pace * 60 * distance / 1000,
        distance_meters=distance,
        avg_heart_rate=heart_rate,
    )


@pytest.fixture
def bin_factory():
    return make_bin


@pytest.fixture
def flat_bins():
    """Bins on flat and gently rolling ground at 6:00 min/km."""
    return [make_bin(g, 6.0, start=i * 1000.0) for i, g in enumerate([0.0, 1.0, 2.5, 4.0, -1.0])]


@pytest.fixture
def hilly_bins():
    """Bins spread over climbs and descents with gradient-dependent pace."""
    return [
        make_bin(-12.0, 5.0, heart_rate=130),
        make_bin(-6.0, 5.5, heart_rate=135),
        make_bin(1.0, 6.0, heart_rate=140),
        make_bin(3.0, 6.5, heart_rate=145),
        make_bin(8.0, 8.0, heart_rate=160),
        make_bin(14.0, 10.0, heart_rate=170),
        make_bin(27.0, 14.0, heart_rate=175),
    ]


@pytest.fixture
def uniform_pace_bins():
    """100 bins evenly spread from -30% to +30% at a constant 6:00 min/km."""
    return [make_bin(-30 + 60 * i / 99, 6.0, start=i * 1000.0) for i in range(100)]
