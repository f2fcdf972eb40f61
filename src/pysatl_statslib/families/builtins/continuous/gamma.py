"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations.
Shape zero is admitted and describes the point mass at zero.
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


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    A two-parameter family of continuous distributions on [0, ∞) with
    shape k and scale θ (or rate β = 1/θ).

    Probability density function (shape-scale parametrization):
        f(x) = x^(k-1) exp(-x/θ) / (θ^k Γ(k)) for x ≥ 0

    With k = 0 the distribution degenerates to the point mass at 0.
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: shape k
            - scale: scale θ
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x. At zero it is ``+inf`` for ``k < 1``,
            ``1/θ`` for ``k == 1`` and ``0`` for ``k > 1``.
        """
        parameters = cast(_ShapeScale, parameters)
        c = working_constants(x)
        k, theta = parameters.shape, parameters.scale

        if x == c.zero:
            if k < c.one:
                return log_if(c.inf, log_form)
            if k == c.one:
                return log_if(c.one / theta, log_form)
            return log_if(c.zero, log_form)

        log_pdf = -gammaln(k) - k * np.log(theta) + (k - c.one) * np.log(x) - x / theta
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for gamma distribution.

        ``F(x) = P(k, x/θ)``, the regularized lower incomplete gamma function.
        """
        parameters = cast(_ShapeScale, parameters)
        c = working_constants(x)

        if x < c.eps:
            return log_if(c.zero, log_form)
        return log_if(gammainc(parameters.shape, x / parameters.scale), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for gamma distribution.

        ``Q(p) = θ P⁻¹(k, p)``
        """
        parameters = cast(_ShapeScale, parameters)
        c = working_constants(p)

        if parameters.shape == c.zero:
            return c.zero
        return parameters.scale * gammaincinv(parameters.shape, p)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution; a single point for zero shape"""
        parameters = cast(_ShapeScale, parameters)
        if parameters.shape == 0:
            return ContinuousSupport(left=0.0, right=0.0)
        return ContinuousSupport(left=0.0)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k, ``0 <= k < inf``
        scale : float
            Scale parameter θ, ``0 < θ < inf``
        """

        shape: float
        scale: float

        @constraint(description="0 <= shape < inf")
        def check_shape_nonnegative(self) -> bool:
            return 0 <= self.shape < math.inf

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0 < self.scale < math.inf

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        rate : float
            Rate parameter β = 1/θ
        """

        shape: float
        rate: float

        @constraint(description="0 <= shape < inf")
        def check_shape_nonnegative(self) -> bool:
            return 0 <= self.shape < math.inf

        @constraint(description="0 < rate < inf")
        def check_rate_positive(self) -> bool:
            return 0 < self.rate < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale parametrization instance
            """
            return _ShapeScale(shape=self.shape, scale=1 / self.rate)

    ParametricFamilyRegister.register(Gamma)
