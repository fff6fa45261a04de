"""Input validation functions with strict type checking."""

from __future__ import annotations

from typing import Any

from numcalc.exceptions import InvalidInputError, OutOfRangeError
from numcalc.types import IntegerType, integer_type_of, resolve_integer_type


def validate_integer(value: Any) -> int:
    """
    Validate that a value is a supported integer.

    Args:
        value: The value to validate

    Returns:
        The value as a Python int

    Raises:
        UnsupportedTypeError: If value is a float, bool, string or any other non-integer
    """
    integer_type_of(value)
    return int(value)


def validate_non_negative(value: Any) -> int:
    """
    Validate that a value is a non-negative integer.

    Used for quantities that are unsigned by contract, such as exponents.

    Raises:
        UnsupportedTypeError: If value is not a supported integer
        InvalidInputError: If value is negative
    """
    number = validate_integer(value)
    if number < 0:
        raise InvalidInputError(value, "Value must be non-negative")
    return number


def validate_range(value: Any, dtype: IntegerType) -> int:
    """
    Validate that a value is representable in an integer type.

    Args:
        value: The value to validate
        dtype: The type the value is declared as

    Returns:
        The value as a Python int

    Raises:
        UnsupportedTypeError: If value is not a supported integer
        OutOfRangeError: If value is outside [dtype.min_value, dtype.max_value]
    """
    number = validate_integer(value)
    if not dtype.contains(number):
        raise OutOfRangeError(number, dtype.min_value, dtype.max_value, dtype.name)
    return number


def validate_operands(
    *values: Any, dtype: IntegerType | None = None
) -> tuple[IntegerType, list[int]]:
    """Resolve the shared integer type of some operands and unbox them."""
    resolved = resolve_integer_type(*values, dtype=dtype)
    return resolved, [validate_range(value, resolved) for value in values]
