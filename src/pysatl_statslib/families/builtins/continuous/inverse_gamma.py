"""
Inverse-gamma distribution family implementation.

Contains the Inverse-gamma family with shape-rate and shape-scale
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaincc, gammaincinv, gammaln

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


def configure_inverse_gamma_family() -> None:
    """
    Configure and register the Inverse-gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_GAMMA):
        return

    INVERSE_GAMMA_DOC = """
    Inverse-gamma distribution.

    Distribution of the reciprocal of a Gamma(α, rate β) variable.

    Probability density function (shape-rate parametrization):
        f(x) = β^α / Γ(α) x^(-α-1) exp(-β/x) for x > 0
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for inverse-gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: shape α
            - rate: rate β
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x, zero at ``x == 0``
        """
        parameters = cast(_ShapeRate, parameters)
        c = working_constants(x)
        alpha, beta = parameters.shape, parameters.rate

        if x == c.zero:
            return log_if(c.zero, log_form)

        log_pdf = alpha * np.log(beta) - gammaln(alpha) - (alpha + c.one) * np.log(x) - beta / x
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for inverse-gamma distribution.

        ``F(x) = 1 - P(α, β/x) = Q(α, β/x)``
        """
        parameters = cast(_ShapeRate, parameters)
        c = working_constants(x)

        if x < c.eps:
            return log_if(c.zero, log_form)
        return log_if(gammaincc(parameters.shape, parameters.rate / x), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for inverse-gamma distribution.

        ``Q(p) = β / P⁻¹(α, 1 - p)``
        """
        parameters = cast(_ShapeRate, parameters)
        c = working_constants(p)

        return parameters.rate / gammaincinv(parameters.shape, c.one - p)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of inverse-gamma distribution"""
        return ContinuousSupport(left=0.0)

    InverseGamma = ParametricFamily(
        name=FamilyName.INVERSE_GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    InverseGamma.__doc__ = INVERSE_GAMMA_DOC

    @parametrization(family=InverseGamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of inverse-gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter α
        rate : float
            Rate parameter β of the reciprocal gamma variable
        """

        shape: float
        rate: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0 < self.shape < math.inf

        @constraint(description="0 < rate < inf")
        def check_rate_positive(self) -> bool:
            return 0 < self.rate < math.inf

    @parametrization(family=InverseGamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of inverse-gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter α
        scale : float
            Scale of the reciprocal gamma variable, θ = 1/β
        """

        shape: float
        scale: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0 < self.shape < math.inf

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0 < self.scale < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(shape=self.shape, rate=1 / self.scale)

    ParametricFamilyRegister.register(InverseGamma)
