__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import array

import numpy as np
import pytest

from pysatl_statslib.promotion import (
    DEFAULT_DTYPE,
    argument_dtype,
    promote_dtype,
    working_constants,
    working_dtype,
)


class TestPromoteDtype:
    @pytest.mark.parametrize(
        "dtype, expected",
        [
            (np.bool_, np.float64),
            (np.int8, np.float64),
            (np.uint64, np.float64),
            (np.float16, np.float32),
            (np.float32, np.float32),
            (np.float64, np.float64),
            (np.longdouble, np.longdouble),
        ],
    )
    def test_promotion_table(self, dtype, expected) -> None:
        assert promote_dtype(np.dtype(dtype)) == np.dtype(expected)

    @pytest.mark.parametrize("dtype", [np.complex128, np.str_, np.object_])
    def test_non_real_types_raise(self, dtype) -> None:
        with pytest.raises(TypeError, match="Unsupported"):
            promote_dtype(np.dtype(dtype))


class TestWorkingDtype:
    def test_python_scalars_are_double(self) -> None:
        assert working_dtype(1, 2.5, True) == DEFAULT_DTYPE

    def test_no_arguments_default_to_double(self) -> None:
        assert working_dtype() == DEFAULT_DTYPE

    def test_single_precision_is_kept(self) -> None:
        x = np.ones(4, dtype=np.float32)
        assert working_dtype(x, np.float32(2.0), np.float16(1.0)) == np.float32

    def test_most_precise_argument_wins(self) -> None:
        assert working_dtype(np.float32(1.0), 2.0) == np.float64
        assert working_dtype(np.float32(1.0), np.int16(2)) == np.float64

    def test_containers_contribute_their_element_type(self) -> None:
        assert argument_dtype(array.array("f", [1.0])) == np.float32
        assert argument_dtype(array.array("i", [1])) == np.float64
        assert argument_dtype([[1, 2], [3, 4]]) == np.float64

    def test_unsupported_argument_raises(self) -> None:
        with pytest.raises(TypeError, match="Cannot evaluate"):
            working_dtype(object())


class TestWorkingConstants:
    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_constants_share_the_working_type(self, dtype) -> None:
        c = working_constants(np.dtype(dtype))

        for value in (c.zero, c.one, c.two, c.half, c.eps, c.nan, c.inf, c.pi, c.log_2pi):
            assert isinstance(value, dtype)
        assert c.eps == np.finfo(dtype).eps
        assert np.isnan(c.nan)
        assert np.isposinf(c.inf)

    def test_constants_from_a_value(self) -> None:
        assert working_constants(np.float32(3.0)).dtype == np.float32
        assert working_constants(np.float64(3.0)) is working_constants(DEFAULT_DTYPE)

    def test_cast(self) -> None:
        c = working_constants(np.dtype(np.float32))
        assert isinstance(c.cast(1), np.float32)
        assert c.cast(0.5) == np.float32(0.5)
