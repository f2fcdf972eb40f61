"""
Log-normal distribution family implementation.

Contains the Log-normal family parameterized by the mean and standard
deviation of the underlying normal variable.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_statslib.distributions.support import ContinuousSupport
from pysatl_statslib.families.builtins.continuous.normal import (
    normal_cdf,
    normal_log_pdf,
    normal_ppf,
)
from pysatl_statslib.families.forms import exp_unless, log_if
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


def configure_lognormal_family() -> None:
    """
    Configure and register the Log-normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Log-normal distribution.

    Distribution of exp(Y) where Y is normal with mean μ and standard
    deviation σ.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: mean of log(X)
            - sigma: standard deviation of log(X)
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x, zero at ``x == 0``
        """
        parameters = cast(_LogMeanStd, parameters)
        c = working_constants(x)

        if x == c.zero:
            return log_if(c.zero, log_form)

        log_x = np.log(x)
        return exp_unless(normal_log_pdf(log_x, parameters.mu, parameters.sigma) - log_x, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for log-normal distribution.

        ``F(x) = Φ((ln x - μ)/σ)``
        """
        parameters = cast(_LogMeanStd, parameters)
        c = working_constants(x)

        if x < c.eps:
            return log_if(c.zero, log_form)
        return normal_cdf(np.log(x), parameters.mu, parameters.sigma, log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for log-normal distribution.

        ``Q(p) = exp(μ + σ Φ⁻¹(p))``
        """
        parameters = cast(_LogMeanStd, parameters)
        return np.exp(normal_ppf(p, parameters.mu, parameters.sigma))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of log-normal distribution"""
        return ContinuousSupport(left=0.0)

    LogNormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["logMeanStd"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    LogNormal.__doc__ = LOGNORMAL_DOC

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Standard parametrization of log-normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the logarithm of the variable
        sigma : float
            Standard deviation of the logarithm of the variable
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            return 0 < self.sigma < math.inf

    ParametricFamilyRegister.register(LogNormal)
