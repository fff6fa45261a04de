"""Checked integer power and integer logarithms."""

from __future__ import annotations

import logging

from numcalc.errors import MathError
from numcalc.fallbacks import generic_log, generic_power
from numcalc.result import Result
from numcalc.tables import POWERS_OF_10, has_power_table, lookup_power, power_table_size
from numcalc.types import Integer, IntegerType, box
from numcalc.validators import validate_integer, validate_non_negative, validate_operands

logger = logging.getLogger(__name__)

# Smallest value whose log10 is past the last table slot.
_LOG10_TABLE_LIMIT = 10 * max(POWERS_OF_10)


def integer_power(
    base: Integer, exp: Integer, *, dtype: IntegerType | None = None
) -> Result[Integer]:
    """
    Compute base ** exp exactly.

    Bases 2, 3, 5 and 10 are answered from the lookup tables. Any other base
    uses binary exponentiation.

    Properties:
        - integer_power(a, 0) == 1
        - integer_power(a, 1) == a
        - integer_power(1, n) == 1

    Args:
        base: The base, evaluated in its own integer type (or ``dtype``)
        exp: The exponent, an unsigned quantity

    Returns:
        Result holding base ** exp, or OVERFLOW if it does not fit the type

    Raises:
        UnsupportedTypeError: If an operand is not a supported integer
        InvalidInputError: If exp is negative
        OutOfRangeError: If base is not representable in ``dtype``
    """
    dtype, (base_value,) = validate_operands(base, dtype=dtype)
    exp_value = validate_non_negative(exp)

    if has_power_table(base_value):
        if exp_value < power_table_size(base_value):
            table_value = lookup_power(base_value, exp_value)
            if table_value is None or (dtype.bounded and table_value > dtype.max_value):
                logger.debug("%d^%d from table overflows %s", base_value, exp_value, dtype)
                return Result.failure(MathError.OVERFLOW)
            return Result.ok(box(table_value, base))
        if dtype.bounded:
            # The table covers every power below 2**128; no bounded type is wider.
            logger.debug("%d^%d is past the table for %s", base_value, exp_value, dtype)
            return Result.failure(MathError.OVERFLOW)

    logger.debug("%d^%d: binary exponentiation in %s", base_value, exp_value, dtype)
    return generic_power(base_value, exp_value, dtype).map(lambda v: box(v, base))


def integer_log2(n: Integer) -> Result[int]:
    """
    Compute floor(log2(n)) from the position of the highest set bit.

    Properties:
        - integer_log2(1) == 0
        - integer_log2(2**k) == k

    Returns:
        Result holding the logarithm, or DOMAIN_ERROR for n <= 0
    """
    value = validate_integer(n)
    if value <= 0:
        return Result.failure(MathError.DOMAIN_ERROR)
    return Result.ok(value.bit_length() - 1)


def integer_log10(n: Integer) -> Result[int]:
    """
    Compute floor(log10(n)) by binary search over the powers-of-10 table.

    Overflow sentinels in the table are treated as "too large". Values
    beyond the table, only reachable with unbounded types, are counted by
    repeated division.

    Returns:
        Result holding the logarithm, or DOMAIN_ERROR for n <= 0
    """
    value = validate_integer(n)
    if value <= 0:
        return Result.failure(MathError.DOMAIN_ERROR)
    if value >= _LOG10_TABLE_LIMIT:
        return generic_log(10, value)

    low = 0
    high = len(POWERS_OF_10) - 1
    log = 0
    while low <= high:
        mid = (low + high) // 2
        entry = POWERS_OF_10[mid]
        if entry == 0:
            high = mid - 1
            continue
        if value >= entry:
            log = mid
            low = mid + 1
        else:
            high = mid - 1
    return Result.ok(log)


def integer_log(base: Integer, n: Integer) -> Result[int]:
    """
    Compute floor(log_base(n)).

    Base 2 and base 10 go to their dedicated implementations; other bases
    use repeated division. All paths agree on overlapping inputs.

    Args:
        base: The base, must be > 1
        n: The argument, must be > 0

    Returns:
        Result holding the logarithm, or DOMAIN_ERROR for base <= 1 or n <= 0
    """
    base_value = validate_integer(base)
    value = validate_integer(n)

    if base_value <= 1 or value <= 0:
        return Result.failure(MathError.DOMAIN_ERROR)
    if base_value == 2:
        return integer_log2(value)
    if base_value == 10:
        return integer_log10(value)
    return generic_log(base_value, value)
