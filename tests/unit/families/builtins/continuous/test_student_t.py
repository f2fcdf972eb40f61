"""
Tests for Student-t Distribution Family

This module tests the Student-t family, including infinite degrees of
freedom where it coincides with the standard normal distribution.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import t

from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestStudentTFamily(BaseDistributionTest):
    """Test suite for Student-t distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.student_t_family = registry.get(FamilyName.STUDENT_T)
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.student_t_dist_example = self.student_t_family(df=4.0)

    def test_family_properties(self):
        """Test basic properties of Student-t family."""
        assert self.student_t_family.name == FamilyName.STUDENT_T
        assert self.student_t_family.parametrization_names == ["df"]

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="df"):
            self.student_t_family(df=0.0)
        self.student_t_family(df=math.inf)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-30.0, -2.0, 0.0, 0.5, 3.0], t.pdf),
            (CharacteristicName.CDF, [-30.0, -2.0, 0.0, 0.5, 3.0], t.cdf),
            (CharacteristicName.PPF, [0.001, 0.1, 0.5, 0.7, 0.999], t.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against SciPy on array inputs."""
        input_array = np.array(test_data)
        result_array = self.student_t_dist_example.query_method(char_name)(input_array)

        assert result_array.shape == input_array.shape
        np.testing.assert_allclose(result_array, scipy_func(input_array, df=4.0), rtol=1e-9)

    def test_symmetry(self):
        """Test the symmetry of the cdf and the quantile about zero."""
        dist = self.student_t_dist_example

        assert dist.cdf(0.0) == 0.5
        assert dist.cdf(-1.7) == pytest.approx(1.0 - dist.cdf(1.7), rel=1e-14)
        assert dist.ppf(0.5) == 0.0
        assert dist.ppf(0.2) == pytest.approx(-dist.ppf(0.8), rel=1e-12)

    @pytest.mark.parametrize("p", [0.25, 0.125, 0.0625, 2.0**-20])
    def test_quantile_is_odd_for_complementary_probabilities(self, p):
        """Test that q(1 - p) == -q(p) when 1 - p is exact."""
        dist = self.student_t_family(df=5.0)

        assert dist.ppf(1.0 - p) == -dist.ppf(p)
        assert dist.ppf(p) == pytest.approx(t.ppf(p, df=5.0), rel=1e-12)

    def test_log_forms(self):
        """Test the log-density and log-cdf against SciPy."""
        x = np.array([-8.0, 0.0, 2.0])

        np.testing.assert_allclose(
            self.student_t_dist_example.pdf(x, log_form=True), t.logpdf(x, df=4.0), rtol=1e-10
        )
        np.testing.assert_allclose(
            self.student_t_dist_example.cdf(x, log_form=True), t.logcdf(x, df=4.0), rtol=1e-9
        )

    def test_ppf_boundaries(self):
        """Test the quantile at 0 and 1."""
        assert self.student_t_dist_example.ppf(0.0) == -math.inf
        assert self.student_t_dist_example.ppf(1.0) == math.inf


class TestStudentTInfiniteDegreesOfFreedom(BaseDistributionTest):
    """With infinite degrees of freedom the results are the standard normal ones."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.limit = registry.get(FamilyName.STUDENT_T)(df=math.inf)
        self.standard_normal = registry.get(FamilyName.NORMAL)(mu=0.0, sigma=1.0)

    @pytest.mark.parametrize("x", [-3.0, -0.25, 0.0, 1.0, 6.0])
    def test_pdf_and_cdf_equal_normal(self, x):
        """Test exact agreement of the densities and cdfs."""
        assert self.limit.pdf(x) == self.standard_normal.pdf(x)
        assert self.limit.cdf(x) == self.standard_normal.cdf(x)
        assert self.limit.cdf(x, log_form=True) == self.standard_normal.cdf(x, log_form=True)

    @pytest.mark.parametrize("p", [0.01, 0.3, 0.5, 0.95])
    def test_ppf_equals_normal(self, p):
        """Test exact agreement of the quantiles."""
        assert self.limit.ppf(p) == self.standard_normal.ppf(p)
