"""
Element-wise Broadcasting
=========================

Applies a scalar evaluator independently to every element of a numeric
container and assembles an output container of the same backend and shape.

Notes
-----
- Only the primary variate is taken per element; distribution parameters are
  bound into the evaluator beforehand and are identical for every element.
- The output buffer is allocated with exactly ``size`` elements of the working
  type before anything is written to it; the shape is copied from the input
  adapter, never recomputed.
- No element depends on any other one, so the loop order is irrelevant.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_statslib.containers import as_container, is_container

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_statslib.types import Real

    type ScalarEvaluator = Callable[[Any], Real]


def broadcast(evaluator: ScalarEvaluator, data: Any, dtype: np.dtype[Any]) -> Any:
    """
    Evaluate ``evaluator`` on every element of a container.

    Parameters
    ----------
    evaluator : Callable[[Any], Real]
        Scalar evaluator with all parameters already bound.
    data : Any
        Container of any registered backend.
    dtype : numpy.dtype
        Working type of the output elements.

    Returns
    -------
    Any
        Container of the input's backend and shape where
        ``output[i] == evaluator(input[i])``.
    """
    container = as_container(data)
    out = np.empty(container.size, dtype=dtype)
    for i, value in enumerate(container.read_flat()):
        out[i] = evaluator(value)
    return container.write_flat(out)


def fill(data: Any, value: Real, dtype: np.dtype[Any]) -> Any:
    """Build a container shaped like ``data`` with every element set to ``value``."""
    container = as_container(data)
    return container.write_flat(np.full(container.size, value, dtype=dtype))


def apply(evaluator: ScalarEvaluator, data: Any, dtype: np.dtype[Any]) -> Any:
    """Evaluate a scalar directly, or broadcast over a container."""
    if is_container(data):
        return broadcast(evaluator, data, dtype)
    if isinstance(data, np.ndarray):
        data = data[()]
    return dtype.type(evaluator(data))


__all__ = [
    "apply",
    "broadcast",
    "fill",
]
