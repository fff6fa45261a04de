"""
Integer capability trait.

Every operation is evaluated against an ``IntegerType``: a description of
the integer family the caller works in. It answers three questions:

- is a value a supported integer (Python ``int`` or a NumPy integer scalar)?
- is the type signed?
- is the type bounded, and if so what is its maximum?

Unbounded types report ``max_value is None``; the checked loops never
report overflow for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Union

import numpy as np

from numcalc.exceptions import UnsupportedTypeError

Integer = Union[int, np.integer]


@dataclass(frozen=True)
class IntegerType:
    """
    A signed or unsigned integer family of fixed or unbounded width.

    Example:
        >>> UINT64.max_value
        18446744073709551615
        >>> BIGINT.bounded
        False
    """

    name: str
    bits: int | None
    signed: bool

    def __post_init__(self) -> None:
        if self.bits is not None and self.bits <= 0:
            raise ValueError(f"bits ({self.bits}) must be positive")
        if self.bits is None and not self.signed:
            raise ValueError("unbounded integer types are signed")

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def max_value(self) -> int | None:
        """Largest representable value, or None when there is no maximum."""
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int | None:
        """Smallest representable value, or None when there is no minimum."""
        if self.bits is None:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    def contains(self, value: int) -> bool:
        if self.max_value is not None and value > self.max_value:
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        return True

    def __str__(self) -> str:
        return self.name


INT8 = IntegerType("int8", 8, signed=True)
INT16 = IntegerType("int16", 16, signed=True)
INT32 = IntegerType("int32", 32, signed=True)
INT64 = IntegerType("int64", 64, signed=True)
INT128 = IntegerType("int128", 128, signed=True)
UINT8 = IntegerType("uint8", 8, signed=False)
UINT16 = IntegerType("uint16", 16, signed=False)
UINT32 = IntegerType("uint32", 32, signed=False)
UINT64 = IntegerType("uint64", 64, signed=False)
UINT128 = IntegerType("uint128", 128, signed=False)
BIGINT = IntegerType("bigint", None, signed=True)

DEFAULT_TYPE: Final[IntegerType] = BIGINT

_BY_LAYOUT: dict[tuple[int, bool], IntegerType] = {
    (t.bits, t.signed): t
    for t in (INT8, INT16, INT32, INT64, INT128, UINT8, UINT16, UINT32, UINT64, UINT128)
}


def _numpy_integer_type(tp: type) -> IntegerType:
    info = np.iinfo(tp)
    return _BY_LAYOUT[(info.bits, info.kind == "i")]


def is_supported_integer(value_or_type: Any) -> bool:
    """
    Whether a value (or a type) belongs to a supported integer family.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    tp = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    if issubclass(tp, bool):
        return False
    return issubclass(tp, (int, np.integer))


def integer_type_of(value: Any) -> IntegerType:
    """
    Classify a value.

    Args:
        value: A Python int or NumPy integer scalar

    Returns:
        BIGINT for Python ints, the matching fixed-width preset for NumPy scalars

    Raises:
        UnsupportedTypeError: If the value is not a supported integer
    """
    if not is_supported_integer(value):
        raise UnsupportedTypeError(value)
    if isinstance(value, np.integer):
        return _numpy_integer_type(type(value))
    return BIGINT


def resolve_integer_type(*values: Any, dtype: IntegerType | None = None) -> IntegerType:
    """
    Pick the integer type all operands of one call are evaluated in.

    An explicit ``dtype`` wins. Otherwise the NumPy type of the operands is
    used and plain ints adopt it; with no NumPy operand the type is BIGINT.

    Raises:
        UnsupportedTypeError: On non-integers or operands of different NumPy types
    """
    numpy_types = set()
    for value in values:
        found = integer_type_of(value)
        if isinstance(value, np.integer):
            numpy_types.add(found)

    if len(numpy_types) > 1:
        names = ", ".join(sorted(t.name for t in numpy_types))
        raise UnsupportedTypeError(values, f"Operands have different integer types ({names})")

    if dtype is None:
        dtype = numpy_types.pop() if numpy_types else DEFAULT_TYPE
    elif numpy_types and dtype not in numpy_types:
        raise UnsupportedTypeError(
            values, f"Operands of type {numpy_types.pop()} cannot be evaluated as {dtype}"
        )
    return dtype


def box(value: int, *like: Any) -> Integer:
    """Return ``value`` in the NumPy type of the first NumPy operand, else as int."""
    for operand in like:
        if isinstance(operand, np.integer):
            return type(operand)(value)
    return value
