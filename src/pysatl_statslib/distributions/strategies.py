"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
Strategies are stateless; randomness comes from the generator passed in the
options or from a fresh :func:`numpy.random.default_rng`.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``.

    Options
    -------
    rng : numpy.random.Generator, optional
        Source of the uniform variates.
    seed : int, optional
        Seed for a fresh generator when ``rng`` is not given.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError("Sample size must be non-negative")
        rng = options.get("rng")
        if rng is None:
            rng = np.random.default_rng(options.get("seed"))
        ppf = distr.query_method("ppf")
        U = rng.random(n)
        vals = np.asarray(ppf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
