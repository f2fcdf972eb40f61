"""
Tests for Beta Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import beta

from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestBetaFamily(BaseDistributionTest):
    """Test suite for Beta distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.beta_family = configure_families_register().get(FamilyName.BETA)
        self.beta_dist_example = self.beta_family(a=2.0, b=5.0)

    def test_family_properties(self):
        """Test basic properties of beta family."""
        assert self.beta_family.name == FamilyName.BETA
        assert self.beta_family.parametrization_names == ["shapes"]

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="0 < a < inf"):
            self.beta_family(a=0.0, b=1.0)
        with pytest.raises(ValueError, match="0 < b < inf"):
            self.beta_family(a=1.0, b=-1.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [0.01, 0.2, 0.5, 0.8, 0.99], beta.pdf),
            (CharacteristicName.CDF, [0.0, 0.01, 0.2, 0.5, 0.8, 0.99, 1.0], beta.cdf),
            (CharacteristicName.PPF, [0.0, 0.01, 0.1, 0.5, 0.9, 0.99, 1.0], beta.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against SciPy on array inputs."""
        input_array = np.array(test_data)
        result_array = self.beta_dist_example.query_method(char_name)(input_array)

        assert result_array.shape == input_array.shape
        np.testing.assert_allclose(result_array, scipy_func(input_array, 2.0, 5.0), rtol=1e-9)

    @pytest.mark.parametrize(
        "a, b, at_zero, at_one",
        [
            (0.5, 0.5, math.inf, math.inf),
            (1.0, 3.0, 3.0, 0.0),
            (3.0, 1.0, 0.0, 3.0),
            (2.0, 2.0, 0.0, 0.0),
        ],
    )
    def test_endpoint_densities(self, a, b, at_zero, at_one):
        """Test the density at both endpoints of the support."""
        dist = self.beta_family(a=a, b=b)

        assert dist.pdf(0.0) == at_zero
        assert dist.pdf(1.0) == at_one

    def test_outside_support(self):
        """Test arguments outside of [0, 1]."""
        dist = self.beta_dist_example

        assert dist.pdf(-0.1) == 0.0
        assert dist.pdf(1.1, log_form=True) == -math.inf
        assert dist.cdf(-0.1) == 0.0
        assert dist.cdf(1.1) == 1.0

    def test_support(self):
        """Test that beta distribution is supported on [0, 1]."""
        support = self.beta_dist_example.support
        assert (support.lower, support.upper) == (0.0, 1.0)
        assert (support.lower, support.upper) == (0.0, 1.0)
