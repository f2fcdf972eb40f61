"""
Cauchy distribution family implementation.

Contains the Cauchy family with the location-scale parameterization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_statslib.distributions.support import ContinuousSupport
from pysatl_statslib.families.forms import log_if
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


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution.

    A continuous, symmetric, heavy-tailed distribution without finite moments,
    defined by a location (μ) and a scale (σ).

    Probability density function:
        f(x) = 1 / (πσ (1 + ((x-μ)/σ)²))
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for Cauchy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: location
            - sigma: scale
        x : Real
            Point at which to evaluate the density, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            Density value at x
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(x)

        z = (x - parameters.mu) / parameters.sigma
        return log_if(c.one / (c.pi * parameters.sigma * (c.one + z * z)), log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for Cauchy distribution.

        ``F(x) = 1/2 + arctan((x-μ)/σ) / π``
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(x)

        z = (x - parameters.mu) / parameters.sigma
        return log_if(c.half + np.arctan(z) / c.pi, log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for Cauchy distribution.

        ``Q(p) = μ + σ tan(π (p - 1/2))``
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(p)

        return parameters.mu + parameters.sigma * np.tan(c.pi * (p - c.half))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Cauchy distribution"""
        return ContinuousSupport()

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Cauchy distribution.

        Parameters
        ----------
        mu : float
            Location (median) of the distribution
        sigma : float
            Scale (half width at half maximum)
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            return 0 < self.sigma < math.inf

    ParametricFamilyRegister.register(Cauchy)
