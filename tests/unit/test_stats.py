import pytest

from gradient_pace.buckets import bucketize, find_bucket
from gradient_pace.stats import aggregate, gradient_points, mean_pace, median, round_gradient


class TestMedian:
    def test_odd_length(self):
        assert median([6.0, 5.0, 5.5]) == 5.5

    def test_even_length_averages_middle_values(self):
        assert median([4.0, 7.0, 5.0, 6.0]) == 5.5

    def test_empty_is_none(self):
        assert median([]) is None


class TestMeanPace:
    def test_minutes_per_km(self):
        assert mean_pace(600.0, 2000.0) == pytest.approx(5.0)

    def test_zero_distance_is_none(self):
        assert mean_pace(600.0, 0.0) is None


class TestRoundGradient:
    @pytest.mark.parametrize("gradient,expected", [
        (2.4, 2), (2.5, 3), (-2.5, -2), (-2.6, -3), (0.49, 0), (-0.5, 0),
    ])
    def test_rounds_half_up(self, gradient, expected):
        assert round_gradient(gradient) == expected


class TestAggregate:
    def test_bucket_mean_and_median(self, bin_factory):
        bins = [bin_factory(1.0, 5.0), bin_factory(2.0, 5.5), bin_factory(3.0, 6.0, distance=300.0)]
        agg = aggregate(bucketize(bins), bins)
        bucket = agg.buckets[find_bucket(1.0)]

        total_time = sum(b.time_in_seconds for b in bins)
        total_distance = sum(b.distance_meters for b in bins)
        assert bucket.avg_pace == pytest.approx((total_time / 60) / (total_distance / 1000))
        assert bucket.median_pace == pytest.approx(5.5)

    def test_empty_buckets_have_null_paces(self, flat_bins):
        agg = aggregate(bucketize(flat_bins), flat_bins)
        empty = [b for b in agg.buckets if b.bin_count == 0]
        assert empty
        assert all(b.avg_pace is None and b.median_pace is None for b in empty)

    def test_total_bins_analyzed(self, hilly_bins):
        agg = aggregate(bucketize(hilly_bins), hilly_bins)
        assert agg.total_bins_analyzed == len(hilly_bins)

    def test_empty_input(self):
        agg = aggregate(bucketize([]), [])
        assert agg.total_bins_analyzed == 0
        assert len(agg.buckets) == 12
        assert all(p.bin_count == 0 for p in agg.red_dot_data)


class TestGradientPoints:
    def test_one_point_per_whole_percent(self):
        points = gradient_points([])
        assert [p.gradient for p in points] == list(range(-30, 31))
        assert all(p.avg_pace is None and p.median_pace is None for p in points)

    def test_groups_by_rounded_gradient(self, bin_factory):
        bins = [bin_factory(4.6, 7.0), bin_factory(5.4, 8.0), bin_factory(5.5, 9.0)]
        points = {p.gradient: p for p in gradient_points(bins)}
        assert points[5].bin_count == 2
        assert points[5].median_pace == pytest.approx(7.5)
        assert points[6].bin_count == 1

    def test_out_of_range_gradients_ignored(self, bin_factory):
        points = gradient_points([bin_factory(31.0), bin_factory(-35.0)])
        assert sum(p.bin_count for p in points) == 0
