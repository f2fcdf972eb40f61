"""
Tests for Logistic Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import logistic

from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.stats import plogis
from pysatl_statslib.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestLogisticFamily(BaseDistributionTest):
    """Test suite for Logistic distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.logistic_family = configure_families_register().get(FamilyName.LOGISTIC)
        self.logistic_dist_example = self.logistic_family(mu=1.0, sigma=0.5)

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="sigma"):
            self.logistic_family(mu=1.0, sigma=-1.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-40.0, -2.0, 0.0, 1.0, 3.0, 40.0], logistic.pdf),
            (CharacteristicName.CDF, [-2.0, 0.0, 1.0, 3.0, 20.0], logistic.cdf),
            (CharacteristicName.PPF, [0.01, 0.25, 0.5, 0.75, 0.99], logistic.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against SciPy on array inputs."""
        input_array = np.array(test_data)
        result_array = self.logistic_dist_example.query_method(char_name)(input_array)

        assert result_array.shape == input_array.shape
        np.testing.assert_allclose(
            result_array, scipy_func(input_array, loc=1.0, scale=0.5), rtol=1e-10
        )

    def test_log_density_far_in_the_tails(self):
        """Test that the log-density stays finite where the density underflows."""
        log_pdf = self.logistic_dist_example.pdf(np.array([-600.0, 600.0]), log_form=True)
        np.testing.assert_allclose(log_pdf, logistic.logpdf([-600.0, 600.0], 1.0, 0.5))

    def test_ppf_boundaries(self):
        """Test the quantile at 0 and 1."""
        assert self.logistic_dist_example.ppf(0.0) == -math.inf
        assert self.logistic_dist_example.ppf(1.0) == math.inf
        assert self.logistic_dist_example.ppf(0.5) == 1.0

    def test_log_cdf_in_the_lower_tail(self):
        """Test that the log-cdf stays finite where the cdf underflows."""
        x = np.array([-1000.0, -30.0, 0.0, 5.0, 40.0])

        np.testing.assert_allclose(
            self.logistic_dist_example.cdf(x, log_form=True),
            logistic.logcdf(x, loc=1.0, scale=0.5),
            rtol=1e-12,
        )
        assert plogis(-1000.0, 0.0, 1.0, log_form=True) == -1000.0
