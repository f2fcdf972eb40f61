"""
Numeric Containers
==================

This module defines the minimal container abstraction consumed by the
broadcasting layer, and adapters for the supported backends:

- :class:`NumericContainer` — protocol with element count, shape, element
  dtype, flat read and flat write.
- :class:`NDArrayContainer` — dense :class:`numpy.ndarray` of any shape and
  memory order (subclasses such as :class:`numpy.matrix` are preserved).
- :class:`TypedBufferContainer` — one-dimensional :class:`array.array` typed
  buffers.
- :class:`NestedSequenceContainer` — rectangular nested ``list``/``tuple``
  objects.

Backends are looked up at runtime; :func:`register_container_adapter` plugs in
additional ones.

Notes
-----
- Elements are always traversed in C (row-major) order. Since the evaluation
  is purely element-wise, the traversal order is not observable.
- Adapters never own the wrapped object and never modify it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import array
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any

    import numpy.typing as npt

    type ContainerFactory = Callable[[Any], NumericContainer]

logger = logging.getLogger(__name__)


@runtime_checkable
class NumericContainer(Protocol):
    """
    Protocol for containers evaluated element-wise.

    Attributes
    ----------
    size : int
        Number of elements.
    shape : tuple[int, ...]
        Shape descriptor, copied verbatim to the output.
    dtype : numpy.dtype
        Element storage type (before promotion).
    """

    @property
    def size(self) -> int: ...
    @property
    def shape(self) -> tuple[int, ...]: ...
    @property
    def dtype(self) -> np.dtype[Any]: ...
    def read_flat(self) -> Iterator[Any]: ...
    def write_flat(self, values: npt.NDArray[Any]) -> Any: ...


class NDArrayContainer:
    """
    Adapter for dense NumPy arrays.

    Parameters
    ----------
    data : numpy.ndarray
        Wrapped array. It is only read.
    """

    __slots__ = ("_data",)

    def __init__(self, data: npt.NDArray[Any]) -> None:
        self._data = data

    @property
    def size(self) -> int:
        return int(self._data.size)

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(n) for n in self._data.shape)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    def read_flat(self) -> Iterator[Any]:
        return iter(self._data.flat)

    def write_flat(self, values: npt.NDArray[Any]) -> npt.NDArray[Any]:
        """
        Build an array shaped, ordered and typed like the input.

        The output keeps the input's memory layout and array subclass; its
        element type is the dtype of ``values``.
        """
        if values.size != self.size:
            raise ValueError(f"Expected {self.size} values, got {values.size}")
        out = np.empty_like(self._data, dtype=values.dtype)
        out.flat[:] = values
        return out


class TypedBufferContainer:
    """
    Adapter for :class:`array.array` typed buffers.

    The output is a new :class:`array.array` of typecode ``'f'`` for
    ``float32`` results and ``'d'`` otherwise.
    """

    __slots__ = ("_data", "_dtype")

    def __init__(self, data: array.array[Any]) -> None:
        try:
            dtype = np.dtype(data.typecode)
        except TypeError as exc:
            raise TypeError(f"Unsupported array typecode '{data.typecode}'") from exc
        if dtype.kind not in "biuf":
            raise TypeError(f"Unsupported array typecode '{data.typecode}'")
        self._data = data
        self._dtype = dtype

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def shape(self) -> tuple[int, ...]:
        return (len(self._data),)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._dtype

    def read_flat(self) -> Iterator[Any]:
        return iter(np.array(self._data, dtype=self._dtype))

    def write_flat(self, values: npt.NDArray[Any]) -> array.array[Any]:
        if values.size != self.size:
            raise ValueError(f"Expected {self.size} values, got {values.size}")
        typecode = "f" if values.dtype == np.float32 else "d"
        return array.array(typecode, values.astype(typecode).tobytes())


class NestedSequenceContainer:
    """
    Adapter for rectangular nested sequences (lists of lists, tuples, ...).

    The output is a nested ``list`` of the same shape whose leaves are scalars
    of the working type.

    Raises
    ------
    ValueError
        If the nesting is ragged.
    TypeError
        If the leaves are not real numbers.
    """

    __slots__ = ("_data",)

    def __init__(self, data: list[Any] | tuple[Any, ...]) -> None:
        try:
            arr = np.asarray(data)
        except ValueError as exc:
            raise ValueError("Nested sequence must be rectangular") from exc
        if arr.dtype.kind == "O":
            raise ValueError("Nested sequence must be rectangular")
        if arr.dtype.kind not in "biuf":
            raise TypeError(f"Unsupported element type '{arr.dtype}'")
        self._data = arr

    @property
    def size(self) -> int:
        return int(self._data.size)

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(n) for n in self._data.shape)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    def read_flat(self) -> Iterator[Any]:
        return iter(self._data.flat)

    def write_flat(self, values: npt.NDArray[Any]) -> list[Any]:
        if values.size != self.size:
            raise ValueError(f"Expected {self.size} values, got {values.size}")
        return _nest(list(values), self.shape)


def _nest(flat: list[Any], shape: tuple[int, ...]) -> list[Any]:
    if len(shape) <= 1:
        return flat
    step = len(flat) // shape[0] if shape[0] else 0
    return [_nest(flat[i * step : (i + 1) * step], shape[1:]) for i in range(shape[0])]


_ADAPTERS: list[tuple[type | tuple[type, ...], ContainerFactory]] = [
    (np.ndarray, NDArrayContainer),
    (array.array, TypedBufferContainer),
    ((list, tuple), NestedSequenceContainer),
]


def register_container_adapter(
    types: type | tuple[type, ...], factory: ContainerFactory
) -> None:
    """
    Register an adapter for an additional container backend.

    Parameters
    ----------
    types : type or tuple of types
        Container types handled by the adapter.
    factory : Callable[[Any], NumericContainer]
        Builds the adapter for a given container object.

    Notes
    -----
    Adapters registered later take precedence over earlier ones.
    """
    _ADAPTERS.insert(0, (types, factory))
    logger.debug("Registered container adapter %r for %r", factory, types)


def is_container(obj: Any) -> bool:
    """Check whether ``obj`` is evaluated element-wise."""
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    if isinstance(obj, NumericContainer):
        return True
    return any(isinstance(obj, types) for types, _ in _ADAPTERS)


def as_container(obj: Any) -> NumericContainer:
    """
    Wrap ``obj`` into the adapter of its backend.

    Raises
    ------
    TypeError
        If no adapter handles ``obj``.
    """
    if isinstance(obj, NumericContainer):
        return obj
    for types, factory in _ADAPTERS:
        if isinstance(obj, types):
            return factory(obj)
    raise TypeError(f"No container adapter registered for '{type(obj).__name__}'")


__all__ = [
    "NumericContainer",
    "NDArrayContainer",
    "TypedBufferContainer",
    "NestedSequenceContainer",
    "register_container_adapter",
    "is_container",
    "as_container",
]
