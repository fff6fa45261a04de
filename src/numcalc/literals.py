"""
Parsing of decimal integer literals into a declared integer type.

Kept apart from the arithmetic so it can be used and tested on its own.
"""

from __future__ import annotations

from numcalc.errors import MathError
from numcalc.result import Result
from numcalc.types import DEFAULT_TYPE, IntegerType
from numcalc.validators import validate_integer

_DIGITS = "0123456789"


def parse_integer(text: str, dtype: IntegerType = DEFAULT_TYPE) -> Result[int]:
    """
    Parse a decimal literal such as ``"-170141183460469231731687303715884105728"``.

    Surrounding whitespace and one leading ``+`` or ``-`` are accepted.
    Range is checked digit by digit before each multiply-add, so an
    out-of-range literal is never materialised in a bounded type.

    Args:
        text: The literal
        dtype: Integer type the literal is declared as

    Returns:
        Result holding the value, DOMAIN_ERROR for malformed text, OVERFLOW
        above the maximum, UNDERFLOW below the minimum
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    body = text.strip()
    negative = body.startswith("-")
    if body[:1] in ("+", "-"):
        body = body[1:]
    if not body or any(ch not in _DIGITS for ch in body):
        return Result.failure(MathError.DOMAIN_ERROR)

    # Negative literals are accumulated as magnitudes against |min|.
    if not dtype.bounded:
        limit = None
    elif negative:
        limit = -dtype.min_value
    else:
        limit = dtype.max_value
    out_of_range = MathError.UNDERFLOW if negative else MathError.OVERFLOW

    magnitude = 0
    for ch in body:
        digit = _DIGITS.index(ch)
        if limit is not None and magnitude > (limit - digit) // 10:
            return Result.failure(out_of_range)
        magnitude = magnitude * 10 + digit

    return Result.ok(-magnitude if negative else magnitude)


def power_of_two(n: int, dtype: IntegerType = DEFAULT_TYPE) -> Result[int]:
    """
    ``2 ** n`` as a literal of ``dtype``.

    Returns:
        Result holding the power, DOMAIN_ERROR for negative n, OVERFLOW when
        it does not fit (n >= bits - 1 for signed, n >= bits for unsigned)
    """
    exponent = validate_integer(n)
    if exponent < 0:
        return Result.failure(MathError.DOMAIN_ERROR)
    if dtype.bounded:
        width = dtype.bits - 1 if dtype.signed else dtype.bits
        if exponent >= width:
            return Result.failure(MathError.OVERFLOW)
    return Result.ok(1 << exponent)
