"""Unit tests for the generic checked loops."""

import math

import pytest

from numcalc import BIGINT, INT8, INT64, INT128, UINT8, UINT64, MathError, Result
from numcalc.fallbacks import (
    generic_combinations,
    generic_factorial,
    generic_log,
    generic_permutations,
    generic_power,
    multiplication_overflows,
)


class TestMultiplicationOverflows:
    """Tests for the pre-multiplication overflow check."""

    def test_unbounded_never_overflows(self):
        assert not multiplication_overflows(10**100, 10**100, BIGINT)

    def test_zero_operand(self):
        assert not multiplication_overflows(0, 10**9, INT8)
        assert not multiplication_overflows(10**9, 0, INT8)

    def test_unsigned_boundary(self):
        assert not multiplication_overflows(15, 17, UINT8)  # 255
        assert multiplication_overflows(16, 16, UINT8)  # 256

    def test_signed_positive_boundary(self):
        assert not multiplication_overflows(127, 1, INT8)
        assert multiplication_overflows(64, 2, INT8)

    def test_signed_negative_boundary(self):
        assert not multiplication_overflows(-64, 2, INT8)  # -128
        assert not multiplication_overflows(64, -2, INT8)
        assert multiplication_overflows(-65, 2, INT8)
        assert multiplication_overflows(-64, -2, INT8)  # +128


class TestGenericFactorial:
    """Tests for generic_factorial."""

    def test_small(self):
        assert generic_factorial(0, INT64) == Result.ok(1)
        assert generic_factorial(5, INT64) == Result.ok(120)

    def test_uint64_boundary(self):
        assert generic_factorial(20, UINT64) == Result.ok(2432902008176640000)
        assert generic_factorial(21, UINT64) == Result.failure(MathError.OVERFLOW)

    def test_unbounded(self):
        assert generic_factorial(50, BIGINT).value == math.factorial(50)


class TestGenericPermutations:
    """Tests for generic_permutations."""

    def test_small(self):
        assert generic_permutations(10, 3, INT64).value == 720

    def test_overflow(self):
        assert generic_permutations(34, 33, INT128).error is MathError.OVERFLOW


class TestGenericCombinations:
    """Tests for generic_combinations."""

    def test_small(self):
        assert generic_combinations(5, 2, INT64).value == 10
        assert generic_combinations(10, 3, INT64).value == 120

    def test_result_fits_although_naive_intermediate_would_not(self):
        # C(62, 31) * 31 exceeds int64, C(62, 31) itself fits.
        assert math.comb(62, 31) * 31 > INT64.max_value
        assert generic_combinations(62, 31, INT64).value == math.comb(62, 31)


class TestGenericPower:
    """Tests for generic_power."""

    def test_exponent_zero(self):
        assert generic_power(0, 0, INT64).value == 1
        assert generic_power(7, 0, INT64).value == 1

    def test_base_zero(self):
        assert generic_power(0, 5, INT64).value == 0

    def test_small(self):
        assert generic_power(7, 5, INT64).value == 16807
        assert generic_power(2, 10, INT64).value == 1024

    def test_negative_base(self):
        assert generic_power(-2, 7, INT8).value == -128
        assert generic_power(-3, 3, INT64).value == -27
        assert generic_power(-2, 8, INT8).error is MathError.OVERFLOW

    def test_overflow(self):
        assert generic_power(2, 7, INT8).error is MathError.OVERFLOW
        assert generic_power(3, 81, INT128).error is MathError.OVERFLOW

    def test_last_bit_does_not_square(self):
        # 16**1 fits uint8 even though 16**2 would not.
        assert generic_power(16, 1, UINT8).value == 16
        assert generic_power(15, 2, UINT8).value == 225


class TestGenericLog:
    """Tests for generic_log."""

    def test_values(self):
        assert generic_log(7, 342).value == 2
        assert generic_log(7, 343).value == 3
        assert generic_log(3, 1).value == 0

    @pytest.mark.parametrize(("base", "n"), [(1, 10), (0, 10), (-2, 10), (10, 0), (10, -5)])
    def test_domain(self, base, n):
        assert generic_log(base, n).error is MathError.DOMAIN_ERROR
