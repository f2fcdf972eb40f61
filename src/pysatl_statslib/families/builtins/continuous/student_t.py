"""
Student's t distribution family implementation.

Contains the Student-t family parameterized by its degrees of freedom.
Infinite degrees of freedom select the standard normal limit.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, gammaln

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


def configure_student_t_family() -> None:
    """
    Configure and register the Student-t distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student's t distribution.

    A symmetric continuous distribution with ν degrees of freedom. For
    ν = +inf it is the standard normal distribution.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + x²/ν)^(-(ν+1)/2)
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for Student's t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df: degrees of freedom, possibly ``+inf``
        x : Real
            Point at which to evaluate the density, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(x)
        nu = parameters.df

        if np.isinf(nu):
            return exp_unless(normal_log_pdf(x, c.zero, c.one), log_form)

        half_nu = c.half * nu
        log_pdf = (
            gammaln(half_nu + c.half)
            - gammaln(half_nu)
            - c.half * np.log(nu * c.pi)
            - (half_nu + c.half) * np.log1p(x * x / nu)
        )
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for Student's t distribution.

        Uses the tail ``I(ν/(ν+x²); ν/2, 1/2) / 2`` of the regularized
        incomplete beta function and the symmetry about zero.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(x)
        nu = parameters.df

        if np.isinf(nu):
            return normal_cdf(x, c.zero, c.one, log_form)

        tail = c.half * betainc(c.half * nu, c.half, nu / (nu + x * x))
        return log_if(c.one - tail if x > c.zero else tail, log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for Student's t distribution.

        Inverts the two-sided tail ``2 min(p, 1-p)`` with the inverse
        regularized incomplete beta function.
        """
        parameters = cast(_DegreesOfFreedom, parameters)
        c = working_constants(p)
        nu = parameters.df

        if np.isinf(nu):
            return normal_ppf(p, c.zero, c.one)
        if p == c.half:
            return c.zero

        ratio = betaincinv(c.half * nu, c.half, c.two * min(p, c.one - p))
        magnitude = np.sqrt(nu * (c.one - ratio) / ratio)
        return -magnitude if p < c.half else magnitude

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Student's t distribution"""
        return ContinuousSupport()

    StudentT = ParametricFamily(
        name=FamilyName.STUDENT_T,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["df"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    StudentT.__doc__ = STUDENT_T_DOC

    @parametrization(family=StudentT, name="df")
    class _DegreesOfFreedom(Parametrization):
        """
        Degrees-of-freedom parametrization of Student's t distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom, ``df > 0``; ``+inf`` is the normal limit
        """

        df: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    ParametricFamilyRegister.register(StudentT)
