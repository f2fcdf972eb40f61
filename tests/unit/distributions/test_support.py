from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import numpy as np
import pytest

from pysatl_statslib.distributions.support import (
    ContinuousSupport,
    ExplicitTableDiscreteSupport,
    Support,
)


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
            (nan, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
            "nan",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_continuous_support_doesnt_contain_inf(self, infinity):
        support = ContinuousSupport()
        assert infinity not in support
        assert support.contains(infinity) is False

    @pytest.mark.parametrize(
        "points,expected_result",
        [
            (np.array([-1.0, 0.0, 0.5, 1.0]), [False, True, True, False]),
            (np.array([]), []),
        ],
    )
    def test_continuous_support_contains_array(self, points, expected_result):
        result = self.support_example.contains(points)
        assert isinstance(result, np.ndarray)
        assert result.tolist() == expected_result

    def test_inf_bound_is_not_closed(self):
        assert ContinuousSupport().left_closed is False
        assert ContinuousSupport().right_closed is False

    def test_lower_and_upper_are_the_endpoints(self):
        assert self.support_example.lower == 0.0
        assert self.support_example.upper == 1.0
        assert ContinuousSupport().lower == -inf
        assert ContinuousSupport().upper == inf

    def test_is_a_support(self):
        assert isinstance(self.support_example, Support)


class TestExplicitTableDiscreteSupport:
    points_example = [3, 1, 2, 2, 5]
    support_example = ExplicitTableDiscreteSupport(points_example)

    def test_table_is_sorted_and_deduplicated(self):
        assert self.support_example.lower == 1.0
        assert self.support_example.upper == 5.0
        assert self.support_example.contains(np.array([1, 2, 3, 5])).all()

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (2, True),
            (4, False),
            (2.0, True),
            (2.5, False),
            (10, False),
        ],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize(
        "points, expected_result",
        [
            (np.array([0, 1, 2, 3, 4, 5]), [False, True, True, True, False, True]),
            (np.array([]), []),
            (np.array([1.0, 1.5, 2.0, 2.5]), [True, False, True, False]),
            ([0, 1, 2, 3, 4, 5], [False, True, True, True, False, True]),
        ],
    )
    def test_contains_array(self, points, expected_result):
        result = self.support_example.contains(points)
        assert isinstance(result, np.ndarray)
        assert result.tolist() == expected_result

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="at least one point"):
            ExplicitTableDiscreteSupport([])

    def test_is_a_support(self):
        assert isinstance(self.support_example, Support)
