"""
Support Primitives
==================

Supports of univariate distributions, used by the evaluation guards:

- :class:`ContinuousSupport` — an interval, possibly unbounded or degenerate.
- :class:`ExplicitTableDiscreteSupport` — a finite ordered set of points.

Both expose ``contains`` plus the ``lower`` / ``upper`` ends of the support.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_statslib.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def lower(self) -> float: ...
    @property
    def upper(self) -> float: ...


class ContinuousSupport(Interval1D, Support): ...


class ExplicitTableDiscreteSupport(Support):
    """Finite set of atoms; the table is kept sorted and free of duplicates."""

    __slots__ = ("_atoms",)

    def __init__(self, points: Iterable[Number]) -> None:
        atoms = np.unique(np.asarray(list(points), dtype=np.float64))
        if atoms.size == 0:
            raise ValueError("Discrete support needs at least one point")
        self._atoms = atoms

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        result = np.isin(arr, self._atoms)
        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def lower(self) -> float:
        return float(self._atoms[0])

    @property
    def upper(self) -> float:
        return float(self._atoms[-1])
