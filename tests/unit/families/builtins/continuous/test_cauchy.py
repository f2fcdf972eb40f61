"""
Tests for Cauchy Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import cauchy

from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestCauchyFamily(BaseDistributionTest):
    """Test suite for Cauchy distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.cauchy_family = configure_families_register().get(FamilyName.CAUCHY)
        self.cauchy_dist_example = self.cauchy_family(mu=1.0, sigma=2.0)

    def test_family_properties(self):
        """Test basic properties of Cauchy family."""
        assert self.cauchy_family.name == FamilyName.CAUCHY
        assert self.cauchy_family.parametrization_names == ["locScale"]
        assert self.cauchy_dist_example.parameters == {"mu": 1.0, "sigma": 2.0}

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="sigma"):
            self.cauchy_family(mu=0.0, sigma=0.0)
        with pytest.raises(ValueError, match="mu is finite"):
            self.cauchy_family(mu=math.nan, sigma=1.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-100.0, -1.0, 0.0, 1.0, 3.0, 1e6], cauchy.pdf),
            (CharacteristicName.CDF, [-100.0, -1.0, 0.0, 1.0, 3.0, 1e6], cauchy.cdf),
            (CharacteristicName.PPF, [0.01, 0.25, 0.5, 0.75, 0.99], cauchy.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against SciPy on array inputs."""
        input_array = np.array(test_data)
        result_array = self.cauchy_dist_example.query_method(char_name)(input_array)

        assert result_array.shape == input_array.shape
        np.testing.assert_allclose(
            result_array, scipy_func(input_array, loc=1.0, scale=2.0), rtol=1e-10
        )

    def test_standard_density_at_center(self):
        """Test that the standard Cauchy density at zero is 1/pi."""
        standard = self.cauchy_family(mu=0.0, sigma=1.0)
        assert standard.pdf(0.0) == pytest.approx(1 / math.pi, rel=1e-15)

    def test_log_forms(self):
        """Test the log-density and log-cdf against SciPy."""
        x = np.array([-5.0, 0.0, 1.0, 4.0])

        np.testing.assert_allclose(
            self.cauchy_dist_example.pdf(x, log_form=True),
            cauchy.logpdf(x, loc=1.0, scale=2.0),
            rtol=1e-12,
        )
        np.testing.assert_allclose(
            self.cauchy_dist_example.cdf(x, log_form=True),
            cauchy.logcdf(x, loc=1.0, scale=2.0),
            rtol=1e-12,
        )

    def test_ppf_boundaries(self):
        """Test PPF at the boundaries of [0, 1]."""
        assert self.cauchy_dist_example.ppf(0.0) == -math.inf
        assert self.cauchy_dist_example.ppf(1.0) == math.inf

    def test_support(self):
        """Test that Cauchy distribution is supported on the real line."""
        support = self.cauchy_dist_example.support
        assert (support.lower, support.upper) == (-math.inf, math.inf)
