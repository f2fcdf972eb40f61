"""
Fisher-Snedecor (F) distribution family implementation.

Contains the F family parameterized by numerator and denominator degrees of
freedom.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, betaln

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


def configure_f_family() -> None:
    """
    Configure and register the F distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.FISHER):
        return

    F_DOC = """
    Fisher-Snedecor (F) distribution.

    Distribution of the ratio of two independent chi-squared variables,
    each divided by its degrees of freedom d1 and d2.

    Probability density function:
        f(x) = (d1/d2)^(d1/2) x^(d1/2-1) (1 + d1 x/d2)^(-(d1+d2)/2) / B(d1/2, d2/2)
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for F distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df1: numerator degrees of freedom
            - df2: denominator degrees of freedom
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x. At zero it is ``+inf`` for ``df1 < 2``,
            ``1`` for ``df1 == 2`` and ``0`` for ``df1 > 2``.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(x)
        d1, d2 = parameters.df1, parameters.df2

        if x == c.zero:
            if d1 < c.two:
                return log_if(c.inf, log_form)
            if d1 == c.two:
                return log_if(c.one, log_form)
            return log_if(c.zero, log_form)

        half_d1 = c.half * d1
        log_pdf = (
            half_d1 * np.log(d1 / d2)
            + (half_d1 - c.one) * np.log(x)
            - c.half * (d1 + d2) * np.log1p(d1 * x / d2)
            - betaln(half_d1, c.half * d2)
        )
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for F distribution.

        ``F(x) = I(z/(1+z); d1/2, d2/2)`` with ``z = d1 x / d2``.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(x)
        d1, d2 = parameters.df1, parameters.df2

        if x < c.eps:
            return log_if(c.zero, log_form)
        z = d1 * x / d2
        return log_if(betainc(c.half * d1, c.half * d2, z / (c.one + z)), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for F distribution.

        ``Q(p) = d2 I / (d1 (1 - I))`` with ``I = I⁻¹(p; d1/2, d2/2)``.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(p)
        d1, d2 = parameters.df1, parameters.df2

        ratio = betaincinv(c.half * d1, c.half * d2, p)
        return d2 * ratio / (d1 * (c.one - ratio))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of F distribution"""
        return ContinuousSupport(left=0.0)

    Fisher = ParametricFamily(
        name=FamilyName.FISHER,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["df"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Fisher.__doc__ = F_DOC

    @parametrization(family=Fisher, name="df")
    class _DegreesOfFreedom(Parametrization):
        """
        Degrees-of-freedom parametrization of F distribution.

        Parameters
        ----------
        df1 : float
            Numerator degrees of freedom
        df2 : float
            Denominator degrees of freedom
        """

        df1: float
        df2: float

        @constraint(description="0 < df1 < inf")
        def check_df1_positive(self) -> bool:
            return 0 < self.df1 < math.inf

        @constraint(description="0 < df2 < inf")
        def check_df2_positive(self) -> bool:
            return 0 < self.df2 < math.inf

    ParametricFamilyRegister.register(Fisher)
