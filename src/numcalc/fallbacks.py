"""
Generic checked loops.

Each loop tests whether the next multiplication would leave the integer
type before performing it, so an error is reported instead of a wrapped
value. For unbounded types the test is always false.
"""

from __future__ import annotations

import logging
import math

from numcalc.errors import MathError
from numcalc.result import Result
from numcalc.types import IntegerType

logger = logging.getLogger(__name__)


def multiplication_overflows(a: int, b: int, dtype: IntegerType) -> bool:
    """
    Whether ``a * b`` falls outside ``dtype``, decided without multiplying.

    Uses ``|a| > limit // |b|`` where ``limit`` is the maximum for a
    non-negative product and the magnitude of the minimum for a negative one.
    """
    if not dtype.bounded or a == 0 or b == 0:
        return False
    if (a < 0) != (b < 0):
        limit = -dtype.min_value
    else:
        limit = dtype.max_value
    return abs(a) > limit // abs(b)


def _overflow(operation: str, dtype: IntegerType, *operands: int) -> Result[int]:
    logger.debug("%s%s overflows %s", operation, operands, dtype)
    return Result.failure(MathError.OVERFLOW)


def generic_factorial(n: int, dtype: IntegerType) -> Result[int]:
    """O(n) factorial; the check is skipped for the first factor."""
    result = 1
    for i in range(1, n + 1):
        if i > 1 and multiplication_overflows(result, i, dtype):
            return _overflow("factorial", dtype, n)
        result *= i
    return Result.ok(result)


def generic_permutations(n: int, k: int, dtype: IntegerType) -> Result[int]:
    """``n * (n-1) * ... * (n-k+1)`` without forming ``n!``."""
    result = 1
    for i in range(k):
        term = n - i
        if multiplication_overflows(result, term, dtype):
            return _overflow("permutations", dtype, n, k)
        result *= term
    return Result.ok(result)


def generic_combinations(n: int, k: int, dtype: IntegerType) -> Result[int]:
    """
    ``C(n, k)`` as a running multiply-then-divide.

    After step ``i`` the accumulator is exactly ``C(n, i)``. Dividing
    ``gcd(result, i)`` out of the accumulator and the rest of ``i`` out of
    the term before multiplying makes the checked product that same
    ``C(n, i)``, so overflow is reported only when a true intermediate
    does not fit. Callers pass ``k <= n // 2``, where ``C(n, i)`` grows
    with ``i``.
    """
    result = 1
    for i in range(1, k + 1):
        term = n - i + 1
        g = math.gcd(result, i)
        result //= g
        term //= i // g
        if multiplication_overflows(result, term, dtype):
            return _overflow("combinations", dtype, n, k)
        result *= term
    return Result.ok(result)


def generic_power(base: int, exp: int, dtype: IntegerType) -> Result[int]:
    """
    Right-to-left binary exponentiation, O(log exp) multiplications.

    Both the accumulator multiply and the squaring are checked; the base is
    not squared after the highest bit of the exponent.
    """
    if exp == 0:
        return Result.ok(1)
    if base == 0:
        return Result.ok(0)

    result = 1
    b = base
    e = exp
    while e > 0:
        if e & 1:
            if multiplication_overflows(result, b, dtype):
                return _overflow("power", dtype, base, exp)
            result *= b
        if e > 1:
            if multiplication_overflows(b, b, dtype):
                return _overflow("power", dtype, base, exp)
            b *= b
        e >>= 1
    return Result.ok(result)


def generic_log(base: int, n: int) -> Result[int]:
    """``floor(log_base(n))`` by repeated division."""
    if base <= 1 or n <= 0:
        return Result.failure(MathError.DOMAIN_ERROR)
    if n == 1:
        return Result.ok(0)

    log = 0
    current = n
    while current >= base:
        current //= base
        log += 1
    return Result.ok(log)
