"""
Bernoulli distribution family implementation.

Contains the Bernoulli family parameterized by the success probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_statslib.distributions.support import ExplicitTableDiscreteSupport
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
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from pysatl_statslib.types import Real


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial with success (1) probability p and failure (0)
    probability 1 - p.

    Probability mass function:
        P(X = 1) = p, P(X = 0) = 1 - p
    """

    def pmf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Probability mass function for Bernoulli distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - prob: success probability
        x : Real
            Either 0 or 1, in the working type
        log_form : bool
            Return the log-probability

        Returns
        -------
        Real
            ``prob`` at 1 and ``1 - prob`` at 0
        """
        parameters = cast(_Probability, parameters)
        c = working_constants(x)

        if x == c.one:
            return log_if(parameters.prob, log_form)
        return log_if(c.one - parameters.prob, log_form)

    def cdf(parameters: Parametrization, x: Real, log_form: bool = False) -> Real:
        """
        Cumulative distribution function for Bernoulli distribution.

        Only called for ``0 <= x < 1``, where it equals ``1 - prob``.
        """
        parameters = cast(_Probability, parameters)
        c = working_constants(x)
        return log_if(c.one - parameters.prob, log_form)

    def ppf(parameters: Parametrization, p: Real) -> Real:
        """
        Quantile function for Bernoulli distribution.

        Returns 1 when ``p > 1 - prob`` and 0 otherwise, at every ``p`` of
        ``[0, 1]``.
        """
        parameters = cast(_Probability, parameters)
        c = working_constants(p)
        return c.one if p > c.one - parameters.prob else c.zero

    def _support(_: Parametrization) -> ExplicitTableDiscreteSupport:
        """Support of Bernoulli distribution"""
        return ExplicitTableDiscreteSupport([0.0, 1.0])

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["prob"],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="prob")
    class _Probability(Parametrization):
        """
        Success-probability parametrization of Bernoulli distribution.

        Parameters
        ----------
        prob : float
            Probability of success, ``0 <= prob <= 1``
        """

        prob: float

        @constraint(description="0 <= prob <= 1")
        def check_prob_in_unit_interval(self) -> bool:
            return 0 <= self.prob <= 1

    ParametricFamilyRegister.register(Bernoulli)
