"""Tests for descriptive statistics over prop value sequences."""

import math

import pytest

from nba_prop_analytics.analytics.descriptive import (
    average,
    consistency,
    median,
    percentile,
    round_half_up,
    standard_deviation,
    volatility,
)

SCENARIO = [25, 18, 30, 12, 20]


class TestRoundHalfUp:
    """Ties round toward +infinity like the dashboard, not to even."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (12.5, 13), (-12.5, -12), (-0.5, 0), (0.4, 0), (70.8, 71), (-3.6, -4)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestEmptyInput:
    """Every statistic of an empty sequence is 0."""

    def test_average(self):
        assert average([]) == 0

    def test_median(self):
        assert median([]) == 0

    def test_standard_deviation(self):
        assert standard_deviation([]) == 0

    def test_consistency_and_volatility(self):
        assert consistency([]) == 0
        assert volatility([]) == 0

    def test_percentile(self):
        assert percentile([], 20.5) == 0


class TestScenario:
    """Values [25, 18, 30, 12, 20] against a 19.5 line."""

    def test_average(self):
        assert average(SCENARIO) == 21

    def test_median_odd(self):
        assert median(SCENARIO) == 20

    def test_standard_deviation_is_population(self):
        # Squared deviations sum to 188, divided by n (not n-1)
        assert standard_deviation(SCENARIO) == pytest.approx(math.sqrt(188 / 5))

    def test_consistency(self):
        # 1 - 6.132/21 = 0.708
        assert consistency(SCENARIO) == 71

    def test_volatility(self):
        assert volatility(SCENARIO) == 29

    def test_percentile(self):
        """18 and 12 are at or below the line: 2 of 5."""
        assert percentile(SCENARIO, 19.5) == 40


class TestMedian:
    """Tests for median."""

    def test_even_length_averages_middles(self):
        assert median([10, 30, 20, 40]) == 25

    def test_single_value(self):
        assert median([7]) == 7

    def test_order_invariant(self):
        assert median([30, 12, 25, 20, 18]) == median(sorted(SCENARIO))


class TestOrderInvariance:
    """Average and spread do not depend on game order."""

    def test_average(self):
        assert average(list(reversed(SCENARIO))) == average(SCENARIO)

    def test_standard_deviation(self):
        assert standard_deviation(sorted(SCENARIO)) == pytest.approx(
            standard_deviation(SCENARIO)
        )


class TestZeroAverage:
    """Ratios against a zero mean return 0 instead of NaN or infinity."""

    def test_consistency(self):
        assert consistency([0, 0, 0]) == 0

    def test_volatility(self):
        assert volatility([0, 0, 0, 0]) == 0


class TestConsistencyVolatility:
    """Tests for consistency and volatility."""

    def test_constant_sequence(self):
        """No spread means perfect consistency and zero volatility."""
        assert consistency([20, 20, 20]) == 100
        assert volatility([20, 20, 20]) == 0

    def test_scores_sum_to_100(self):
        values = [25, 18, 30, 12, 20, 9, 33]
        assert consistency(values) + volatility(values) in (99, 100, 101)


class TestPercentile:
    """Tests for percentile."""

    def test_ties_count_as_at_or_below(self):
        assert percentile([20, 20, 25, 15], 20) == 75

    def test_line_above_everything(self):
        assert percentile([10, 12, 14], 40.5) == 100

    def test_rounding(self):
        assert percentile([10, 20, 30], 15) == 33
