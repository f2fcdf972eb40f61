"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
sampling strategies and by callers that only need characteristic access.

Notes
-----
- The univariate sampling strategy draws from the distribution's ``ppf``.
- Log-likelihood is the sum of the log-density over the observations.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_statslib.distributions.sampling import ArraySample

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_statslib.distributions.computation import AnalyticalComputation
    from pysatl_statslib.distributions.sampling import Sample
    from pysatl_statslib.distributions.strategies import SamplingStrategy
    from pysatl_statslib.distributions.support import Support
    from pysatl_statslib.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        try:
            return self.analytical_computations[characteristic_name]
        except KeyError as exc:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not available for this distribution"
            ) from exc

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def log_likelihood(self, data: Sample | Any) -> float:
        """
        Sum of the log-density over a sample.

        ``data`` is a :class:`Sample` or anything :func:`numpy.asarray` accepts.
        Points outside the support make the result ``-inf``.
        """
        values = np.asarray(data.array if isinstance(data, ArraySample) else data)
        log_density = self.calculate_characteristic("pdf", values, log_form=True)
        return float(np.sum(log_density))

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)
