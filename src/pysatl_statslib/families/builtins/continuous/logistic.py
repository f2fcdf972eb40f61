"""
Logistic distribution family implementation.

Contains the Logistic family with the location-scale parameterization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution.

    A symmetric continuous distribution whose cdf is the logistic function,
    defined by a location (μ) and a scale (s).

    Probability density function:
        f(x) = exp(-z) / (s (1 + exp(-z))²), z = (x-μ)/s
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for logistic distribution.

        The density is symmetric in ``z``, so it is evaluated at ``-|z|`` to
        keep the exponential from overflowing.
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(x)

        abs_z = np.abs((x - parameters.mu) / parameters.sigma)
        log_pdf = -abs_z - np.log(parameters.sigma) - c.two * np.log1p(np.exp(-abs_z))
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for logistic distribution.

        ``F(x) = 1 / (1 + exp(-(x-μ)/s))``; the log form is ``-log(1 + exp(-z))``,
        taken through ``logaddexp`` so that it stays finite in the lower tail.
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(x)

        z = (x - parameters.mu) / parameters.sigma
        if log_form:
            return -np.logaddexp(c.zero, -z)
        return c.one / (c.one + np.exp(-z))

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for logistic distribution.

        ``Q(p) = μ + s ln(p / (1-p))``
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(p)

        return parameters.mu + parameters.sigma * np.log(p / (c.one - p))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of logistic distribution"""
        return ContinuousSupport()

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Logistic.__doc__ = LOGISTIC_DOC

    @parametrization(family=Logistic, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of logistic distribution.

        Parameters
        ----------
        mu : float
            Location (mean and median)
        sigma : float
            Scale s
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            return 0 < self.sigma < math.inf

    ParametricFamilyRegister.register(Logistic)
