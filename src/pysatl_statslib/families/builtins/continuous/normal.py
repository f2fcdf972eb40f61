"""
Normal distribution family implementation.

Contains the Normal family with mean-std and mean-precision parameterizations,
and the Gaussian formulas reused by the Log-normal and Student-t families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import log_ndtr, ndtr, ndtri

from pysatl_statslib.distributions.support import ContinuousSupport
from pysatl_statslib.families.forms import exp_unless
from pysatl_statslib.families.parametric_family import ParametricFamily
from pysatl_statslib.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_statslib.families.registry import ParametricFamilyRegister
from pysatl_statslib.promotion import working_constants
from pysatl_statslib.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from pysatl_statslib.types import Real


def normal_log_pdf(x: Real, mu: Real, sigma: Real) -> Real:
    """Natural log of the normal density."""
    c = working_constants(x)
    z = (x - mu) / sigma
    return -c.half * c.log_2pi - np.log(sigma) - c.half * z * z


def normal_cdf(x: Real, mu: Real, sigma: Real, log_form: bool = False) -> Real:
    """Normal cdf; the log form is evaluated directly to keep the lower tail."""
    z = (x - mu) / sigma
    return log_ndtr(z) if log_form else ndtr(z)


def normal_ppf(p: Real, mu: Real, sigma: Real) -> Real:
    return mu + sigma * ndtri(p)


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: mean
            - sigma: standard deviation
        x : Real
            Point at which to evaluate the density, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x
        """
        parameters = cast(_MeanStd, parameters)
        return exp_unless(normal_log_pdf(x, parameters.mu, parameters.sigma), log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for normal distribution.

        Computed through the standard normal cdf of the kernel, ``Φ((x-μ)/σ)``.
        """
        parameters = cast(_MeanStd, parameters)
        return normal_cdf(x, parameters.mu, parameters.sigma, log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: mean
            - sigma: standard deviation
        p : Real
            Probability from (0, 1)

        Returns
        -------
        Real
            Quantile ``μ + σ Φ⁻¹(p)``
        """
        parameters = cast(_MeanStd, parameters)
        return normal_ppf(p, parameters.mu, parameters.sigma)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return 0 < self.sigma < math.inf

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < tau < inf")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return 0 < self.tau < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma = math.sqrt(1 / self.tau)
            return _MeanStd(mu=self.mu, sigma=sigma)

    ParametricFamilyRegister.register(Normal)
