"""
Working Type Resolution
=======================

Every evaluation runs in exactly one floating-point *working type*, picked from
the primary input and the parameter values of the call:

- integral and boolean arguments promote to ``float64``;
- floating arguments keep their precision (``float16`` is widened to
  ``float32``);
- the most precise of the promoted types wins.

The ``log_form`` flag never takes part in promotion. The working type fixes the
return type of the call, and every sentinel (``nan``, ``inf``, ``eps``) used by
the evaluators is taken from it through :class:`WorkingConstants`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_statslib.containers import as_container, is_container

if TYPE_CHECKING:
    from typing import Any

    from pysatl_statslib.types import Real

DEFAULT_DTYPE = np.dtype(np.float64)
"""Working type used when no argument carries a floating-point type."""


def promote_dtype(dtype: np.dtype[Any]) -> np.dtype[Any]:
    """
    Map a storage dtype to the floating dtype it is evaluated in.

    Raises
    ------
    TypeError
        If the dtype is not a real numeric type.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in "biu":
        return DEFAULT_DTYPE
    if dtype.kind == "f":
        if dtype.itemsize < 4:
            return np.dtype(np.float32)
        return dtype
    raise TypeError(f"Unsupported numeric type '{dtype}'")


def argument_dtype(arg: Any) -> np.dtype[Any]:
    """
    Floating dtype contributed by a single scalar or container argument.

    Raises
    ------
    TypeError
        If the argument is neither a real number nor a supported container.
    """
    if isinstance(arg, np.generic | np.ndarray):
        return promote_dtype(arg.dtype)
    if isinstance(arg, bool | int | float):
        return DEFAULT_DTYPE
    if is_container(arg):
        return promote_dtype(as_container(arg).dtype)
    raise TypeError(f"Cannot evaluate with argument of type '{type(arg).__name__}'")


def working_dtype(*args: Any) -> np.dtype[Any]:
    """
    Resolve the working floating-point type of a call.

    Parameters
    ----------
    *args : Any
        Primary input (scalar or container) and parameter values.

    Returns
    -------
    numpy.dtype
        The common floating dtype. ``float64`` if called without arguments.
    """
    if not args:
        return DEFAULT_DTYPE
    return cast("np.dtype[Any]", np.result_type(*(argument_dtype(arg) for arg in args)))


@dataclass(frozen=True, slots=True)
class WorkingConstants:
    """
    Constants expressed in one working type.

    Parameters
    ----------
    dtype : numpy.dtype
        Working floating dtype.
    """

    dtype: np.dtype[Any]
    zero: Real
    one: Real
    two: Real
    half: Real
    eps: Real
    nan: Real
    inf: Real
    pi: Real
    log_2pi: Real

    def cast(self, value: Any) -> Real:
        """Convert a scalar to the working type."""
        return cast("Real", self.dtype.type(value))


@lru_cache(maxsize=None)
def _constants_for(dtype: np.dtype[Any]) -> WorkingConstants:
    t = dtype.type
    return WorkingConstants(
        dtype=dtype,
        zero=t(0),
        one=t(1),
        two=t(2),
        half=t(0.5),
        eps=t(np.finfo(dtype).eps),
        nan=t(np.nan),
        inf=t(np.inf),
        pi=t(np.pi),
        log_2pi=np.log(t(2) * t(np.pi)),
    )


def working_constants(value: Any) -> WorkingConstants:
    """
    Get the constants of a working type.

    Parameters
    ----------
    value : numpy.dtype or numpy scalar
        Either the working dtype itself or a value already cast to it.
    """
    dtype = value if isinstance(value, np.dtype) else np.asarray(value).dtype
    return _constants_for(promote_dtype(dtype))


__all__ = [
    "DEFAULT_DTYPE",
    "WorkingConstants",
    "argument_dtype",
    "promote_dtype",
    "working_constants",
    "working_dtype",
]
