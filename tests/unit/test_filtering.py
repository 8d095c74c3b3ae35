import pytest

from gradient_pace.filtering import filter_bins, is_reliable, within_heart_rate
from gradient_pace.models import Bin, FilterOptions, FilterSettings, HeartRateFilter


class TestIsReliable:
    def test_normal_bin_is_reliable(self, bin_factory):
        assert is_reliable(bin_factory(3.0, 7.0), FilterOptions())

    def test_extreme_gradient(self, bin_factory):
        assert not is_reliable(bin_factory(41.0, 12.0), FilterOptions())
        assert not is_reliable(bin_factory(-41.0, 12.0), FilterOptions())

    def test_gradient_at_limit_is_kept(self, bin_factory):
        assert is_reliable(bin_factory(40.0, 12.0), FilterOptions())

    def test_too_fast(self, bin_factory):
        # 5:00 min/km is 12 km/h, above the default 10 km/h ceiling
        assert not is_reliable(bin_factory(0.0, 5.0), FilterOptions())

    def test_too_slow(self, bin_factory):
        # 500 min/km is 0.12 km/h
        assert not is_reliable(bin_factory(0.0, 500.0), FilterOptions())

    def test_custom_speed_range(self, bin_factory):
        options = FilterOptions(min_speed=1.0, max_speed=20.0)
        assert is_reliable(bin_factory(0.0, 4.0), options)

    def test_zero_time_or_distance(self):
        zero_time = Bin(distance_start=0, distance_end=100, avg_gradient_percent=0,
                        time_in_seconds=0, distance_meters=100)
        zero_dist = Bin(distance_start=0, distance_end=0, avg_gradient_percent=0,
                        time_in_seconds=40, distance_meters=0)
        assert not is_reliable(zero_time, FilterOptions())
        assert not is_reliable(zero_dist, FilterOptions())


class TestWithinHeartRate:
    def test_missing_heart_rate_rejected(self, bin_factory):
        assert not within_heart_rate(bin_factory(0.0), HeartRateFilter(min_hr=100))

    def test_bounds_inclusive(self, bin_factory):
        hr_filter = HeartRateFilter(min_hr=120, max_hr=160)
        assert within_heart_rate(bin_factory(0.0, heart_rate=120), hr_filter)
        assert within_heart_rate(bin_factory(0.0, heart_rate=160), hr_filter)
        assert not within_heart_rate(bin_factory(0.0, heart_rate=119), hr_filter)
        assert not within_heart_rate(bin_factory(0.0, heart_rate=161), hr_filter)

    def test_unset_bounds_are_ignored(self, bin_factory):
        assert within_heart_rate(bin_factory(0.0, heart_rate=200), HeartRateFilter(min_hr=100))
        assert within_heart_rate(bin_factory(0.0, heart_rate=50), HeartRateFilter(max_hr=100))
        assert within_heart_rate(bin_factory(0.0, heart_rate=50), HeartRateFilter())


class TestFilterBins:
    def test_no_filters_keeps_everything(self, hilly_bins):
        assert filter_bins(hilly_bins, FilterSettings()) == tuple(hilly_bins)

    def test_unreliable_removed(self, bin_factory):
        good = bin_factory(2.0, 7.0)
        steep = bin_factory(45.0, 20.0)
        fast = bin_factory(0.0, 3.0)
        result = filter_bins([good, steep, fast], FilterSettings(remove_unreliable_bins=True))
        assert result == (good,)

    def test_heart_rate_filter(self, hilly_bins):
        settings = FilterSettings(heart_rate_filter=HeartRateFilter(min_hr=140, max_hr=165))
        result = filter_bins(hilly_bins, settings)
        assert [b.avg_heart_rate for b in result] == [140, 145, 160]

    def test_filters_are_conjunctive(self, bin_factory):
        reliable_low_hr = bin_factory(2.0, 7.0, heart_rate=100)
        unreliable_ok_hr = bin_factory(2.0, 3.0, heart_rate=150)
        both_ok = bin_factory(2.0, 7.0, heart_rate=150)
        settings = FilterSettings(
            remove_unreliable_bins=True,
            heart_rate_filter=HeartRateFilter(min_hr=120),
        )
        assert filter_bins([reliable_low_hr, unreliable_ok_hr, both_ok], settings) == (both_ok,)

    def test_preserves_order(self, bin_factory):
        bins = [bin_factory(g, 7.0) for g in (5.0, -3.0, 1.0, 50.0, -8.0)]
        result = filter_bins(bins, FilterSettings(remove_unreliable_bins=True))
        assert [b.avg_gradient_percent for b in result] == [5.0, -3.0, 1.0, -8.0]

    def test_empty_result_is_valid(self, bin_factory):
        settings = FilterSettings(heart_rate_filter=HeartRateFilter(min_hr=100))
        assert filter_bins([bin_factory(0.0)], settings) == ()

    def test_idempotent(self, hilly_bins, bin_factory):
        bins = hilly_bins + [bin_factory(50.0, 20.0, heart_rate=150), bin_factory(0.0, 4.0)]
        settings = FilterSettings(
            remove_unreliable_bins=True,
            heart_rate_filter=HeartRateFilter(min_hr=130, max_hr=170),
        )
        once = filter_bins(bins, settings)
        assert filter_bins(once, settings) == once

    def test_does_not_mutate_input(self, bin_factory):
        bins = [bin_factory(0.0, 7.0), bin_factory(60.0, 7.0)]
        filter_bins(bins, FilterSettings(remove_unreliable_bins=True))
        assert len(bins) == 2

    @pytest.mark.parametrize("max_gradient", [10.0, 20.0])
    def test_custom_max_gradient(self, bin_factory, max_gradient):
        bins = [bin_factory(15.0, 9.0)]
        settings = FilterSettings(
            remove_unreliable_bins=True,
            filter_options=FilterOptions(max_gradient=max_gradient),
        )
        assert len(filter_bins(bins, settings)) == (1 if max_gradient > 15 else 0)
