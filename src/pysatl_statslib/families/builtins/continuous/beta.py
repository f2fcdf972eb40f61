"""
Beta distribution family implementation.

Contains the Beta family with the two-shape parameterization.
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


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    A continuous distribution on [0, 1] with two positive shape parameters.

    Probability density function:
        f(x) = x^(a-1) (1-x)^(b-1) / B(a, b) for 0 ≤ x ≤ 1
    """

    def _endpoint_density(exponent_shape: Real, other_shape: Real) -> Real:
        # density at an endpoint where the factor with exponent_shape - 1 vanishes
        c = working_constants(exponent_shape)
        if exponent_shape < c.one:
            return c.inf
        if exponent_shape == c.one:
            return other_shape
        return c.zero

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: first shape
            - b: second shape
        x : Real
            Point of ``[0, 1]``, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x. The endpoints follow the three-way rule on
            the corresponding shape: ``+inf`` below one, the other shape at
            one, ``0`` above one.
        """
        parameters = cast(_Shapes, parameters)
        c = working_constants(x)
        a, b = parameters.a, parameters.b

        if x == c.zero:
            return log_if(_endpoint_density(a, b), log_form)
        if x == c.one:
            return log_if(_endpoint_density(b, a), log_form)

        log_pdf = (a - c.one) * np.log(x) + (b - c.one) * np.log1p(-x) - betaln(a, b)
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for beta distribution.

        ``F(x) = I(x; a, b)``, the regularized incomplete beta function.
        """
        parameters = cast(_Shapes, parameters)
        c = working_constants(x)

        if x < c.eps:
            return log_if(c.zero, log_form)
        return log_if(betainc(parameters.a, parameters.b, x), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for beta distribution.
        """
        parameters = cast(_Shapes, parameters)
        return betaincinv(parameters.a, parameters.b, p)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of beta distribution"""
        return ContinuousSupport(left=0.0, right=1.0)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapes"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="shapes")
    class _Shapes(Parametrization):
        """
        Standard parametrization of beta distribution.

        Parameters
        ----------
        a : float
            First shape parameter (α)
        b : float
            Second shape parameter (β)
        """

        a: float
        b: float

        @constraint(description="0 < a < inf")
        def check_a_positive(self) -> bool:
            return 0 < self.a < math.inf

        @constraint(description="0 < b < inf")
        def check_b_positive(self) -> bool:
            return 0 < self.b < math.inf

    ParametricFamilyRegister.register(Beta)
