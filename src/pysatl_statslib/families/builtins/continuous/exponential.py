"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
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
from pysatl_statslib.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from pysatl_statslib.types import Real


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    The exponential distribution is memoryless and is widely used in reliability
    engineering, queuing theory, and survival analysis.
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - rate: rate parameter λ
        x : Real
            Point of the support, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value ``λ exp(-λx)``
        """
        parameters = cast(_Rate, parameters)
        rate = parameters.rate
        return exp_unless(np.log(rate) - rate * x, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for exponential distribution.

        Returns
        -------
        Real
            ``P(X ≤ x) = 1 - exp(-λx)``, computed with ``expm1`` near zero
        """
        parameters = cast(_Rate, parameters)
        return log_if(-np.expm1(-parameters.rate * x), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for exponential distribution.

        Returns
        -------
        Real
            Quantile ``-ln(1-p)/λ``
        """
        parameters = cast(_Rate, parameters)
        return -np.log1p(-p) / parameters.rate

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of exponential distribution"""
        return ContinuousSupport(left=0.0)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        rate : float
            Rate parameter (λ) of the distribution
        """

        rate: float

        @constraint(description="0 < rate < inf")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return 0 < self.rate < math.inf

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        scale : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        scale: float

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return 0 < self.scale < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return _Rate(rate=1.0 / self.scale)

    ParametricFamilyRegister.register(Exponential)
