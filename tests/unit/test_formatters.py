import pytest

from gradient_pace.formatters import (
    format_duration_long,
    format_factor,
    format_pace,
    format_pace_or_na,
    format_signed_pct,
    terrain_category,
)


class TestFormatPace:
    @pytest.mark.parametrize("minutes,expected", [
        (6.0, "6:00"), (5.5, "5:30"), (4.25, "4:15"), (10.0, "10:00"), (7.999, "7:59"),
    ])
    def test_formats(self, minutes, expected):
        assert format_pace(minutes) == expected

    def test_none_is_na(self):
        assert format_pace_or_na(None) == "N/A"
        assert format_pace_or_na(6.5) == "6:30"


class TestFormatDurationLong:
    def test_hours_minutes_seconds(self):
        assert format_duration_long(3725) == "1h 2m 5s"

    def test_under_an_hour(self):
        assert format_duration_long(59) == "0h 0m 59s"


class TestMisc:
    def test_format_factor(self):
        assert format_factor(1.234) == "1.23x"
        assert format_factor(None) == "n/a"

    def test_format_signed_pct(self):
        assert format_signed_pct(12.345) == "+12.3%"
        assert format_signed_pct(-4.0) == "-4.0%"

    @pytest.mark.parametrize("midpoint,expected", [
        (-27.5, "downhill"), (-2.5, "downhill"), (2.5, "flat"), (5.0, "flat"), (7.5, "steep"),
    ])
    def test_terrain_category(self, midpoint, expected):
        assert terrain_category(midpoint) == expected
