"""Tests for nearest-argument lookup over sorted curves."""

import numpy as np
import pytest

from vbgp.configuration.mapping import GoalGainOrLossToValueMapping, MappingCurve
from vbgp.processes.nearest import (
    MAX_ARGUMENT_DELTA,
    find_nearest_value,
    find_nearest_value_index,
)


@pytest.fixture
def loss_curve(profit_elements):
    return GoalGainOrLossToValueMapping("Profit", profit_elements).loss_to_value


@pytest.fixture
def gain_curve(profit_elements):
    return GoalGainOrLossToValueMapping("Profit", profit_elements).gain_to_value


class TestBoundaries:
    """Queries outside the curve clamp to its ends."""

    def test_below_minimum_returns_first(self, loss_curve):
        assert find_nearest_value_index(loss_curve, -5.0) == 0
        assert find_nearest_value(loss_curve, -5.0) == pytest.approx(0.9)

    def test_at_minimum_returns_first(self, loss_curve):
        assert find_nearest_value_index(loss_curve, -1.0) == 0

    def test_above_maximum_returns_last(self, loss_curve):
        assert find_nearest_value_index(loss_curve, 0.0) == len(loss_curve) - 1
        assert find_nearest_value(loss_curve, 0.7) == pytest.approx(0.1)

    def test_single_point_curve(self):
        curve = MappingCurve([-0.3], [0.2])
        for arg in (-1.0, -0.3, 0.0, 1.0):
            assert find_nearest_value_index(curve, arg) == 0

    def test_empty_curve_rejected(self):
        with pytest.raises(ValueError):
            find_nearest_value_index(MappingCurve([], []), 0.0)


class TestMatching:
    """Exact and nearest matches inside the curve."""

    def test_exact_match_after_normalization(self, loss_curve):
        """-20 / 100 matches the stored -0.2 break point."""
        assert find_nearest_value(loss_curve, -20.0 / 100.0) == pytest.approx(0.3)

    def test_computed_argument_matches_within_rounding(self, loss_curve):
        """0.8 - 1.0 is not exactly -0.2 but still lands on that point."""
        arg = 80.0 / 100.0 - 1.0
        assert arg != -0.2
        assert find_nearest_value(loss_curve, arg) == pytest.approx(0.3)

    def test_nearest_lower_point(self, gain_curve):
        """0.2 is closer to 0.1 than to 0.5."""
        assert find_nearest_value_index(gain_curve, 0.2) == 1

    def test_nearest_upper_point(self, gain_curve):
        """0.4 is closer to 0.5 than to 0.1."""
        assert find_nearest_value_index(gain_curve, 0.4) == 2

    def test_every_break_point_finds_itself(self, loss_curve, gain_curve):
        for curve in (loss_curve, gain_curve):
            for index, point in enumerate(curve):
                assert find_nearest_value_index(curve, point.argument) == index


class TestTieBreak:
    """Equidistant queries prefer the lower point only when it is negative."""

    def test_straddling_zero_prefers_loss_point(self):
        curve = MappingCurve([-0.1, 0.1], [0.5, 0.7])
        assert find_nearest_value_index(curve, 0.0) == 0
        assert find_nearest_value(curve, 0.0) == 0.5

    def test_negative_pair_prefers_lower(self):
        curve = MappingCurve([-0.75, -0.25], [0.6, 0.2])
        assert find_nearest_value_index(curve, -0.5) == 0

    def test_positive_pair_prefers_upper(self):
        curve = MappingCurve([0.25, 0.75], [0.1, 0.3])
        assert find_nearest_value_index(curve, 0.5) == 1

    def test_tolerance_is_tiny(self):
        assert 0.0 < MAX_ARGUMENT_DELTA < 1e-16


class TestTotality:
    """Lookup always returns an in-range index of a nearest point."""

    def test_index_in_range_and_nearest(self, loss_curve, gain_curve):
        for curve in (loss_curve, gain_curve):
            arguments = curve.arguments
            for arg in np.linspace(-1.0, 1.0, 401):
                index = find_nearest_value_index(curve, float(arg))
                assert 0 <= index < len(curve)
                best = np.min(np.abs(arguments - arg))
                assert abs(arg - arguments[index]) <= best + 1e-12

    def test_idempotent(self, loss_curve):
        first = find_nearest_value_index(loss_curve, -0.33)
        second = find_nearest_value_index(loss_curve, -0.33)
        assert first == second
