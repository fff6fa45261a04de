"""Checked factorial, permutations and combinations."""

from __future__ import annotations

import logging

from numcalc.errors import MathError
from numcalc.fallbacks import generic_combinations, generic_factorial, generic_permutations
from numcalc.result import Result
from numcalc.tables import FACTORIAL_TABLE_SIZE, factorial_table
from numcalc.types import Integer, IntegerType, box
from numcalc.validators import validate_operands

logger = logging.getLogger(__name__)


def _domain_error(operation: str, *operands: int) -> Result[Integer]:
    logger.debug("%s%s is outside the domain", operation, operands)
    return Result.failure(MathError.DOMAIN_ERROR)


def _check_selection(name: str, n: int, k: int, dtype: IntegerType) -> Result[Integer] | None:
    # For unsigned types negative operands were already rejected as out of range.
    if dtype.signed and (n < 0 or k < 0):
        return _domain_error(name, n, k)
    if k > n:
        return _domain_error(name, n, k)
    return None


def factorial(n: Integer, *, dtype: IntegerType | None = None) -> Result[Integer]:
    """
    Compute n! in the integer type of ``n``.

    Properties:
        - factorial(0) == factorial(1) == 1
        - factorial(n) == n * factorial(n - 1)

    Args:
        n: A non-negative integer
        dtype: Integer type to evaluate in (default: inferred from ``n``)

    Returns:
        Result holding n!, or DOMAIN_ERROR for n < 0, or OVERFLOW if n! does
        not fit the type

    Raises:
        UnsupportedTypeError: If n is not a supported integer
        OutOfRangeError: If n is not representable in ``dtype``
    """
    dtype, (value,) = validate_operands(n, dtype=dtype)

    if dtype.signed and value < 0:
        return _domain_error("factorial", value)

    if value < FACTORIAL_TABLE_SIZE:
        table_value = factorial_table(value)
        if dtype.bounded and table_value > dtype.max_value:
            logger.debug("factorial(%d) from table overflows %s", value, dtype)
            return Result.failure(MathError.OVERFLOW)
        return Result.ok(box(table_value, n))

    logger.debug("factorial(%d): generic loop in %s", value, dtype)
    return generic_factorial(value, dtype).map(lambda v: box(v, n))


def permutations(n: Integer, k: Integer, *, dtype: IntegerType | None = None) -> Result[Integer]:
    """
    Compute P(n, k) = n! / (n-k)! as the product n * (n-1) * ... * (n-k+1).

    Properties:
        - permutations(n, 0) == 1
        - permutations(n, n) == factorial(n)
        - permutations(n, 1) == n

    Args:
        n: Number of items
        k: Number of items arranged
        dtype: Integer type to evaluate in (default: inferred from the operands)

    Returns:
        Result holding P(n, k), or DOMAIN_ERROR for negative operands or
        k > n, or OVERFLOW if the result does not fit the type
    """
    dtype, (n_value, k_value) = validate_operands(n, k, dtype=dtype)

    failed = _check_selection("permutations", n_value, k_value, dtype)
    if failed is not None:
        return failed
    if k_value == 0:
        return Result.ok(box(1, n, k))

    return generic_permutations(n_value, k_value, dtype).map(lambda v: box(v, n, k))


def combinations(n: Integer, k: Integer, *, dtype: IntegerType | None = None) -> Result[Integer]:
    """
    Compute C(n, k) = n! / (k! * (n-k)!).

    Uses C(n, k) == C(n, n-k) to iterate over the smaller of the two.

    Properties:
        - combinations(n, 0) == combinations(n, n) == 1
        - combinations(n, k) == combinations(n, n - k)
        - combinations(n, k) * factorial(k) == permutations(n, k)

    Args:
        n: Number of items
        k: Number of items chosen
        dtype: Integer type to evaluate in (default: inferred from the operands)

    Returns:
        Result holding C(n, k), or DOMAIN_ERROR for negative operands or
        k > n, or OVERFLOW if the result does not fit the type
    """
    dtype, (n_value, k_value) = validate_operands(n, k, dtype=dtype)

    failed = _check_selection("combinations", n_value, k_value, dtype)
    if failed is not None:
        return failed

    if k_value > n_value // 2:
        k_value = n_value - k_value
    if k_value == 0:
        return Result.ok(box(1, n, k))

    return generic_combinations(n_value, k_value, dtype).map(lambda v: box(v, n, k))
