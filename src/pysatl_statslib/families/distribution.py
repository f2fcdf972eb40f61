"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from pysatl_statslib.distributions.computation import AnalyticalComputation
from pysatl_statslib.distributions.distribution import Distribution
from pysatl_statslib.families.registry import ParametricFamilyRegister
from pysatl_statslib.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_statslib.distributions.sampling import Sample
    from pysatl_statslib.distributions.strategies import SamplingStrategy
    from pysatl_statslib.distributions.support import Support
    from pysatl_statslib.families.parametric_family import ParametricFamily
    from pysatl_statslib.families.parametrizations import Parametrization
    from pysatl_statslib.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for evaluation and sampling.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parametrization : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parametrization: Parametrization
    _support: Support | None

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values in the parametrization the distribution was built with."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Every computation evaluates through the family, so it shares the
        family's guards and broadcasting.
        """
        family = self.family
        return {
            characteristic: AnalyticalComputation(
                target=characteristic,
                func=partial(family.evaluate, characteristic, parameters=self.parametrization),
            )
            for characteristic in family.characteristics
        }

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def pdf(self, x: Any, log_form: bool = False) -> Any:
        """Density (mass for discrete families) at ``x``."""
        return self.calculate_characteristic(CharacteristicName.PDF, x, log_form=log_form)

    def cdf(self, x: Any, log_form: bool = False) -> Any:
        """Cumulative probability at ``x``."""
        return self.calculate_characteristic(CharacteristicName.CDF, x, log_form=log_form)

    def ppf(self, p: Any) -> Any:
        """Quantile at probability ``p``."""
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Additional options for sampling (``rng``, ``seed``).

        Returns
        -------
        Sample
            Generated samples.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
