"""
Chi-squared distribution family implementation.

Contains the Chi-squared family parameterized by its degrees of freedom.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln

from pysatl_statslib.distributions.support import ContinuousSupport
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


def configure_chi_squared_family() -> None:
    """
    Configure and register the Chi-squared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution.

    Distribution of a sum of squares of k independent standard normal
    variables. It is the Gamma distribution with shape k/2 and scale 2.

    Probability density function:
        f(x) = x^(k/2 - 1) exp(-x/2) / (2^(k/2) Γ(k/2)) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for chi-squared distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df: degrees of freedom
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x. At zero it is ``+inf`` for ``df < 2``,
            ``1/2`` for ``df == 2`` and ``0`` for ``df > 2``.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(x)
        half_k = parameters.df * c.half

        if x == c.zero:
            if half_k < c.one:
                return log_if(c.inf, log_form)
            if half_k == c.one:
                return log_if(c.half, log_form)
            return log_if(c.zero, log_form)

        log_pdf = (
            -gammaln(half_k) - half_k * np.log(c.two) + (half_k - c.one) * np.log(x) - c.half * x
        )
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for chi-squared distribution.

        ``F(x) = P(k/2, x/2)``, the regularized lower incomplete gamma function.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(x)

        if x < c.eps:
            return log_if(c.zero, log_form)
        return log_if(gammainc(parameters.df * c.half, x * c.half), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for chi-squared distribution.

        ``Q(p) = 2 P⁻¹(k/2, p)``
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(p)

        return c.two * gammaincinv(parameters.df * c.half, p)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of chi-squared distribution"""
        return ContinuousSupport(left=0.0)

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["df"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    @parametrization(family=ChiSquared, name="df")
    class _DegreesOfFreedom(Parametrization):
        """
        Degrees-of-freedom parametrization of chi-squared distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom, ``0 < df < inf``
        """

        df: float

        @constraint(description="0 < df < inf")
        def check_df_positive(self) -> bool:
            return 0 < self.df < math.inf

    ParametricFamilyRegister.register(ChiSquared)
