"""
Tests for Uniform Distribution Family

This module tests the functionality of the continuous uniform distribution
family, including its three parameterizations and boundary behaviour.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(a=2.0, b=5.0)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM

        expected_parametrizations = {"standard", "meanWidth", "minRange"}
        assert set(self.uniform_family.parametrization_names) == expected_parametrizations
        assert self.uniform_family.base_parametrization_name == "standard"

    def test_standard_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.uniform_family(a=2.0, b=5.0)

        assert dist.family_name == FamilyName.CONTINUOUS_UNIFORM
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"a": 2.0, "b": 5.0}
        assert dist.parametrization_name == "standard"

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="a < b"):
            self.uniform_family(a=5.0, b=2.0)

        with pytest.raises(ValueError, match="finite"):
            self.uniform_family(a=0.0, b=math.inf)

        with pytest.raises(ValueError, match="width"):
            self.uniform_family(mean=1.0, width=-1.0, parametrization_name="meanWidth")

        with pytest.raises(ValueError, match="range_val"):
            self.uniform_family(minimum=1.0, range_val=0.0, parametrization_name="minRange")

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_a, expected_b",
        [
            ("standard", {"a": 2.0, "b": 5.0}, 2.0, 5.0),
            ("meanWidth", {"mean": 3.5, "width": 3.0}, 2.0, 5.0),
            ("minRange", {"minimum": 2.0, "range_val": 3.0}, 2.0, 5.0),
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params, expected_a, expected_b):
        """Test conversions between different parameterizations."""
        base_params = self.uniform_family.to_base(
            self.uniform_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["a"] - expected_a) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["b"] - expected_b) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [0.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.pdf),
            (CharacteristicName.CDF, [0.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.cdf),
            (CharacteristicName.PPF, [0.0, 0.1, 0.5, 0.9, 1.0], uniform.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against SciPy on array inputs."""
        char_func = self.uniform_dist_example.query_method(char_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(
            result_array, scipy_func(input_array, loc=2.0, scale=3.0)
        )

    def test_closed_support_endpoints(self):
        """Test that both endpoints carry the density."""
        dist = self.uniform_dist_example

        assert dist.pdf(2.0) == pytest.approx(1 / 3)
        assert dist.pdf(5.0) == pytest.approx(1 / 3)
        assert dist.pdf(5.0 + 1e-9) == 0.0
        assert dist.pdf(1.0, log_form=True) == -math.inf
        assert dist.pdf(3.0, log_form=True) == pytest.approx(-math.log(3.0))

    def test_cdf_and_ppf_boundaries(self):
        """Test the cdf at the endpoints and the ppf at 0 and 1."""
        dist = self.uniform_dist_example

        assert dist.cdf(2.0) == 0.0
        assert dist.cdf(5.0) == 1.0
        assert dist.cdf(2.0, log_form=True) == -math.inf
        assert dist.ppf(0.0) == 2.0
        assert dist.ppf(1.0) == 5.0

    @pytest.mark.parametrize(
        "parametrization_name, params",
        [
            ("meanWidth", {"mean": 3.5, "width": 3.0}),
            ("minRange", {"minimum": 2.0, "range_val": 3.0}),
        ],
    )
    def test_alternative_parametrizations_evaluate_alike(self, parametrization_name, params):
        """Test that every parametrization gives the same values."""
        dist = self.uniform_family(parametrization_name=parametrization_name, **params)
        x = np.array([1.0, 2.0, 3.0, 5.0, 6.0])

        self.assert_arrays_almost_equal(dist.pdf(x), self.uniform_dist_example.pdf(x))
        self.assert_arrays_almost_equal(dist.cdf(x), self.uniform_dist_example.cdf(x))
        assert dist.support == self.uniform_dist_example.support

    def test_uniform_support(self):
        """Test that uniform distribution has a closed bounded support."""
        support = self.uniform_dist_example.support

        assert support is not None
        assert support.left == 2.0
        assert support.right == 5.0
        assert support.left_closed and support.right_closed
