"""Tests for chart data shaping."""

import jax.numpy as jnp
import pytest

from quiver.stats import charts
from quiver.stats.charts import AggregationMethod
from quiver.types.configs import HistogramConfig
from quiver.types.errors import DimensionMismatch


class TestTimeSeries:

    def test_rolling_mean_partial_windows(self):
        result = charts.rolling_mean([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        assert jnp.allclose(result, jnp.array([1.0, 1.5, 2.0, 3.0, 4.0]))

    def test_rolling_mean_window_longer_than_data(self):
        result = charts.rolling_mean([1.0, 2.0, 3.0], 10)
        assert jnp.allclose(result, jnp.array([2.0, 2.0, 2.0]))

    def test_rolling_mean_degenerate(self):
        assert charts.rolling_mean([1.0, 2.0], 0).shape == (0,)
        assert charts.rolling_mean([], 3).shape == (0,)

    def test_diff(self):
        assert jnp.allclose(charts.diff([1.0, 4.0, 9.0, 16.0]), jnp.array([3.0, 5.0, 7.0]))
        assert jnp.allclose(charts.diff([1.0, 4.0, 9.0, 16.0], lag=2), jnp.array([8.0, 12.0]))
        assert charts.diff([1.0], lag=1).shape == (0,)

    def test_percent_change(self):
        result = charts.percent_change([100.0, 110.0, 0.0, 50.0])
        assert jnp.allclose(result, jnp.array([10.0, -100.0, 0.0]))


class TestDistribution:

    def test_histogram_counts_every_value(self):
        bins = charts.histogram([1.0, 2.0, 2.0, 3.0, 4.0], bins=3)
        assert len(bins) == 3
        assert sum(b.count for b in bins) == 5
        assert bins[-1].count == 2

    def test_histogram_midpoints(self):
        bins = charts.histogram([0.0, 10.0], bins=2)
        assert [b.midpoint for b in bins] == pytest.approx([2.5, 7.5])

    def test_histogram_default_bins_from_config(self):
        data = jnp.arange(20.0)
        assert len(charts.histogram(data)) == 10
        assert len(charts.histogram(data, config=HistogramConfig(bins=4))) == 4

    def test_histogram_constant_data(self):
        bins = charts.histogram([3.0, 3.0, 3.0], bins=5)
        assert bins == [charts.HistogramBin(midpoint=3.0, count=3)]

    def test_histogram_empty(self):
        assert charts.histogram([], bins=5) == []

    def test_percentile(self):
        assert float(charts.percentile([1.0, 2.0, 3.0, 4.0, 5.0], 50)) == pytest.approx(3.0)
        assert float(charts.percentile([1.0, 2.0, 3.0, 4.0], 25)) == pytest.approx(1.75)

    def test_percentile_undefined(self):
        assert charts.percentile([], 50) is None
        assert charts.percentile([1.0], 101) is None

    def test_quartiles(self):
        q = charts.quartiles([1.0, 2.0, 3.0, 4.0, 5.0])
        assert q.min == 1.0 and q.max == 5.0
        assert q.median == pytest.approx(3.0)
        assert q.iqr == pytest.approx(q.q3 - q.q1)
        assert charts.quartiles([]) is None

    def test_percentile_rank(self):
        assert float(charts.percentile_rank([1.0, 2.0, 3.0, 4.0], 3.0)) == pytest.approx(62.5)
        assert float(charts.percentile_rank([], 1.0)) == 0.0

    def test_percentile_ranks(self):
        result = charts.percentile_ranks([10.0, 20.0])
        assert jnp.allclose(result, jnp.array([25.0, 75.0]))


class TestScaling:

    def test_scaled(self):
        assert jnp.allclose(charts.scaled([0.0, 5.0, 10.0]), jnp.array([0.0, 0.5, 1.0]))
        assert jnp.allclose(charts.scaled([0.0, 10.0], -1.0, 1.0), jnp.array([-1.0, 1.0]))

    def test_scaled_constant(self):
        assert jnp.allclose(charts.scaled([4.0, 4.0], 2.0, 3.0), jnp.array([2.0, 2.0]))

    def test_as_percentages(self):
        assert jnp.allclose(charts.as_percentages([1.0, 3.0]), jnp.array([25.0, 75.0]))
        assert jnp.allclose(charts.as_percentages([0.0, 0.0]), jnp.zeros(2))

    def test_standardized(self):
        result = charts.standardized([1.0, 3.0])
        assert jnp.allclose(result, jnp.array([-1.0, 1.0]))
        assert jnp.allclose(charts.standardized([2.0, 2.0]), jnp.zeros(2))


class TestGrouping:

    def test_group_by(self):
        result = charts.group_by([1.0, 2.0, 3.0, 4.0], ["a", "b", "a", "b"], AggregationMethod.SUM)
        assert result == {"a": 4.0, "b": 6.0}

    def test_group_by_count_and_mean(self):
        values = [1.0, 2.0, 6.0]
        labels = ["x", "y", "y"]
        assert charts.group_by(values, labels, AggregationMethod.COUNT) == {"x": 1.0, "y": 2.0}
        assert charts.group_by(values, labels, AggregationMethod.MEAN) == {"x": 1.0, "y": 4.0}

    def test_group_by_length_mismatch(self):
        with pytest.raises(DimensionMismatch):
            charts.group_by([1.0, 2.0], ["a"], AggregationMethod.SUM)

    def test_grouped_data_sorted(self):
        result = charts.grouped_data([1.0, 2.0, 3.0], ["z", "a", "m"], AggregationMethod.MAX)
        assert [label for label, _ in result] == ["a", "m", "z"]

    def test_downsample(self):
        result = charts.downsample([1.0, 2.0, 3.0, 4.0, 5.0], 2, AggregationMethod.MEAN)
        assert jnp.allclose(result, jnp.array([1.5, 3.5, 5.0]))
        collapsed = charts.downsample([1.0, 2.0], 5, AggregationMethod.SUM)
        assert collapsed.tolist() == [3.0]


class TestMultiSeries:

    def test_stacked_cumulative(self):
        result = charts.stacked_cumulative([[1.0, 2.0], [3.0, 4.0]])
        assert jnp.allclose(result, jnp.array([[1.0, 2.0], [4.0, 6.0]]))

    def test_stacked_percentage(self):
        result = charts.stacked_percentage([[1.0, 0.0], [3.0, 0.0]])
        assert jnp.allclose(result, jnp.array([[25.0, 0.0], [75.0, 0.0]]))

    def test_correlation_matrix(self):
        result = charts.correlation_matrix([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [3.0, 2.0, 1.0]])
        expected = jnp.array([[1.0, 1.0, -1.0], [1.0, 1.0, -1.0], [-1.0, -1.0, 1.0]])
        assert jnp.allclose(result, expected, atol=1e-5)

    def test_correlation_with_constant_series(self):
        result = charts.correlation_matrix([[1.0, 2.0, 3.0], [5.0, 5.0, 5.0]])
        assert jnp.allclose(result, jnp.array([[1.0, 0.0], [0.0, 1.0]]))

    def test_ragged_series_rejected(self):
        with pytest.raises(DimensionMismatch):
            charts.correlation_matrix([[1.0, 2.0], [1.0]])

    def test_heatmap_data(self):
        cells = charts.heatmap_data([[1.0, 2.0], [2.0, 1.0]], ["up", "down"])
        assert len(cells) == 4
        assert cells[0] == ("up", "up", pytest.approx(1.0))
        assert cells[1][:2] == ("up", "down")
        assert cells[1][2] == pytest.approx(-1.0)

    def test_heatmap_label_mismatch(self):
        with pytest.raises(DimensionMismatch):
            charts.heatmap_data([[1.0, 2.0], [2.0, 1.0]], ["only"])
