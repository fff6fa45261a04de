"""Unit tests for the integer capability trait."""

import numpy as np
import pytest

from numcalc import (
    BIGINT,
    INT8,
    INT64,
    INT128,
    UINT8,
    UINT64,
    UINT128,
    IntegerType,
    UnsupportedTypeError,
    integer_type_of,
    is_supported_integer,
)
from numcalc.types import box, resolve_integer_type


class TestIntegerType:
    """Tests for IntegerType limits."""

    def test_signed_limits(self):
        assert INT8.max_value == 127
        assert INT8.min_value == -128
        assert INT64.max_value == 9223372036854775807

    def test_unsigned_limits(self):
        assert UINT8.max_value == 255
        assert UINT8.min_value == 0
        assert UINT64.max_value == 18446744073709551615

    def test_128_bit_limits(self):
        assert INT128.max_value == 2**127 - 1
        assert INT128.min_value == -(2**127)
        assert UINT128.max_value == 2**128 - 1

    def test_bigint_has_no_maximum(self):
        assert not BIGINT.bounded
        assert BIGINT.max_value is None
        assert BIGINT.min_value is None
        assert BIGINT.signed

    def test_contains(self):
        assert UINT8.contains(0)
        assert UINT8.contains(255)
        assert not UINT8.contains(256)
        assert not UINT8.contains(-1)
        assert BIGINT.contains(10**100)

    def test_rejects_unbounded_unsigned(self):
        with pytest.raises(ValueError):
            IntegerType("ubig", None, signed=False)

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            IntegerType("int0", 0, signed=True)

    def test_str_is_name(self):
        assert str(UINT128) == "uint128"


class TestClassification:
    """Tests for is_supported_integer and integer_type_of."""

    @pytest.mark.parametrize("value", [0, -5, 10**40, np.int8(1), np.uint64(7), int, np.int32])
    def test_supported(self, value):
        assert is_supported_integer(value)

    @pytest.mark.parametrize("value", [1.0, True, False, "1", None, np.float64(1.0), float, bool])
    def test_unsupported(self, value):
        assert not is_supported_integer(value)

    def test_python_int_is_bigint(self):
        assert integer_type_of(42) is BIGINT

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (np.int8(1), INT8),
            (np.uint8(1), UINT8),
            (np.int64(1), INT64),
            (np.uint64(1), UINT64),
        ],
    )
    def test_numpy_scalars(self, value, expected):
        assert integer_type_of(value) == expected

    def test_rejects_float(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            integer_type_of(1.5)
        assert "float" in str(exc_info.value)

    def test_unsupported_type_error_is_type_error(self):
        with pytest.raises(TypeError):
            integer_type_of("12")


class TestResolveIntegerType:
    """Tests for resolve_integer_type."""

    def test_plain_ints_default_to_bigint(self):
        assert resolve_integer_type(3, 4) is BIGINT

    def test_plain_ints_adopt_numpy_type(self):
        assert resolve_integer_type(np.uint64(5), 2) == UINT64

    def test_explicit_dtype_wins(self):
        assert resolve_integer_type(3, 4, dtype=INT128) is INT128

    def test_mixed_numpy_types_rejected(self):
        with pytest.raises(UnsupportedTypeError):
            resolve_integer_type(np.int32(1), np.int64(1))

    def test_numpy_type_conflicting_with_dtype_rejected(self):
        with pytest.raises(UnsupportedTypeError):
            resolve_integer_type(np.int32(1), dtype=INT64)


class TestBox:
    """Tests for box."""

    def test_returns_int_for_plain_operands(self):
        value = box(120, 5)
        assert value == 120
        assert type(value) is int

    def test_returns_numpy_type_of_operand(self):
        value = box(120, 5, np.uint16(3))
        assert isinstance(value, np.uint16)
        assert value == 120
