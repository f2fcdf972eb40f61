"""
Uniform distribution family implementation.

Contains the continuous Uniform family with standard, mean-width and
minimum-range parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

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


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution.

    All intervals of the same length within [a, b] are equally probable.

    Probability density function:
        f(x) = 1 / (b - a) for a ≤ x ≤ b
    """

    def pdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability density function for uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: lower bound
            - b: upper bound
        x : Real
            Point of ``[a, b]``, in the working type
        log_form : bool
            Return the log-density

        Returns
        -------
        Real
            The constant density ``1/(b-a)``
        """
        parameters = cast(_Standard, parameters)
        c = working_constants(x)
        return log_if(c.one / (parameters.b - parameters.a), log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for uniform distribution.

        ``F(x) = (x - a) / (b - a)`` inside the support.
        """
        parameters = cast(_Standard, parameters)
        return log_if((x - parameters.a) / (parameters.b - parameters.a), log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Percent point function (inverse CDF) for uniform distribution.

        ``Q(p) = a + p (b - a)``
        """
        parameters = cast(_Standard, parameters)
        return parameters.a + p * (parameters.b - parameters.a)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(
            left=parameters.a,
            right=parameters.b,
            left_closed=True,
            right_closed=True,
        )

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth", "minRange"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        a : float
            Lower bound of the distribution
        b : float
            Upper bound of the distribution
        """

        a: float
        b: float

        @constraint(description="a and b are finite")
        def check_bounds_finite(self) -> bool:
            return math.isfinite(self.a) and math.isfinite(self.b)

        @constraint(description="a < b")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.a < self.b

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (b - a)
        """

        mean: float
        width: float

        @constraint(description="mean is finite")
        def check_mean_finite(self) -> bool:
            return math.isfinite(self.mean)

        @constraint(description="0 < width < inf")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return 0 < self.width < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return _Standard(a=self.mean - half_width, b=self.mean + half_width)

    @parametrization(family=Uniform, name="minRange")
    class _MinRange(Parametrization):
        """
        Minimum-range parametrization of uniform distribution.

        Parameters
        ----------
        minimum : float
            Minimum value (lower bound)
        range_val : float
            Range of the distribution (b - a)
        """

        minimum: float
        range_val: float

        @constraint(description="minimum is finite")
        def check_minimum_finite(self) -> bool:
            return math.isfinite(self.minimum)

        @constraint(description="0 < range_val < inf")
        def check_range_positive(self) -> bool:
            """Check that range is positive."""
            return 0 < self.range_val < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Standard(a=self.minimum, b=self.minimum + self.range_val)

    ParametricFamilyRegister.register(Uniform)
