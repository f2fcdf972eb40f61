"""
Computation Primitives
======================

This module defines the callable wrapper handed out by distributions for a
single characteristic:

- :class:`Computation` — protocol of a characteristic callable.
- :class:`AnalyticalComputation` — closed-form callable with the distribution
  parameters already bound.

Notes
-----
Callables accept a real scalar or a numeric container; element-wise
application is done by the broadcasting layer, not by the callable's author.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_statslib.types import (
    GenericCharacteristicName,
)


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable. Options such as ``log_form`` are forwarded.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
