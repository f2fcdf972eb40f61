"""
Laplace distribution family implementation.

Contains the Laplace (double exponential) family with the location-scale
parameterization.
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


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = 1/(2b) exp(-|x-μ|/b)
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: location
            - sigma: scale b
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
        b = parameters.sigma

        log_pdf = -np.abs(x - parameters.mu) / b - np.log(c.two * b)
        return exp_unless(log_pdf, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        parameters = cast(_LocScale, parameters)
        c = working_constants(x)

        z = (x - parameters.mu) / parameters.sigma
        if z < c.zero:
            return log_if(c.half * np.exp(z), log_form)
        return log_if(c.one - c.half * np.exp(-z), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        ``Q(p) = μ - b sign(p - 1/2) ln(1 - 2|p - 1/2|)``
        """
        parameters = cast(_LocScale, parameters)
        c = working_constants(p)

        centered = p - c.half
        return parameters.mu - parameters.sigma * np.sign(centered) * np.log(
            c.one - c.two * np.abs(centered)
        )

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Laplace distribution"""
        return ContinuousSupport()

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Location (mean and median)
        sigma : float
            Scale b
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            return 0 < self.sigma < math.inf

    ParametricFamilyRegister.register(Laplace)
