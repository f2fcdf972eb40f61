"""
Weibull distribution family implementation.

Contains the Weibull family with the shape-scale parameterization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution.

    A continuous distribution on [0, ∞) with shape k and scale λ, widely used
    for lifetimes and failure rates.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: shape k
            - scale: scale λ
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x. At zero it is ``+inf`` for ``k < 1``,
            ``1/λ`` for ``k == 1`` and ``0`` for ``k > 1``.
        """
        parameters = cast(_ShapeScale, parameters)
        c = working_constants(x)
        k, lam = parameters.shape, parameters.scale

        if x == c.zero:
            if k < c.one:
                return log_if(c.inf, log_form)
            if k == c.one:
                return log_if(c.one / lam, log_form)
            return log_if(c.zero, log_form)

        log_ratio = np.log(x) - np.log(lam)
        log_pdf = np.log(k) - np.log(lam) + (k - c.one) * log_ratio - np.exp(k * log_ratio)
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for Weibull distribution.

        ``F(x) = 1 - exp(-(x/λ)^k)``
        """
        parameters = cast(_ShapeScale, parameters)
        return log_if(-np.expm1(-((x / parameters.scale) ** parameters.shape)), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for Weibull distribution.

        ``Q(p) = λ (-ln(1-p))^(1/k)``
        """
        parameters = cast(_ShapeScale, parameters)
        c = working_constants(p)

        return parameters.scale * (-np.log1p(-p)) ** (c.one / parameters.shape)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Weibull distribution"""
        return ContinuousSupport(left=0.0)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of Weibull distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter λ
        """

        shape: float
        scale: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0 < self.shape < math.inf

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0 < self.scale < math.inf

    ParametricFamilyRegister.register(Weibull)
