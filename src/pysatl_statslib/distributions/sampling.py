"""
Samples
=======

Container returned by :meth:`Distribution.sample`. Draws are stored row-wise in
a float array of shape ``(n, 1)`` so that a sample can be passed straight back
to :meth:`Distribution.log_likelihood`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """Draws of a distribution, exposed as a 2D array."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, int]: ...


class ArraySample:
    """
    Draws held in an array of shape ``(n_draws, 1)``.

    Raises
    ------
    ValueError
        If ``draws`` is not two-dimensional.
    """

    __slots__ = ("_draws",)

    def __init__(self, draws: npt.NDArray[np.floating[Any]]) -> None:
        if draws.ndim != 2:
            raise ValueError(f"Sample draws must be a 2D array, got shape {draws.shape}")
        self._draws = draws

    def __len__(self) -> int:
        return self._draws.shape[0]

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self._draws

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._draws.shape
        return int(rows), int(cols)
