"""
Precomputed lookup tables for factorials and powers of 2, 3, 5 and 10.

Tables are tuples of 128-bit unsigned intermediates built once at import
and never mutated afterwards, so they can be read from any thread.

Power tables stop filling the moment the next product would exceed
``TABLE_MAX``; the remaining slots hold ``0``. No power of a base > 1 is 0,
so a 0 at a nonzero index always means "overflowed". Index 0 holds
``base**0 == 1`` and is never a sentinel.
"""

from __future__ import annotations

from typing import Final

TABLE_MAX: Final[int] = (1 << 128) - 1

# 34! is the first factorial that does not fit a signed 128-bit integer.
FACTORIAL_TABLE_SIZE: Final[int] = 34

POWER_TABLE_SIZES: Final[dict[int, int]] = {
    2: 128,  # 2^0 .. 2^127
    3: 81,  # 3^0 .. 3^80
    5: 56,  # 5^0 .. 5^55
    10: 39,  # 10^0 .. 10^38
}


def generate_power_table(base: int, size: int, limit: int = TABLE_MAX) -> tuple[int, ...]:
    """
    Build ``(base**0, base**1, ...)`` with ``size`` slots.

    Args:
        base: Base of the powers, at least 2
        size: Number of slots
        limit: Largest storable value

    Returns:
        The table; slots past the last storable power are 0
    """
    if base < 2:
        raise ValueError(f"base ({base}) must be >= 2")

    table = [0] * size
    current = 1
    for i in range(size):
        if i > 0:
            if current > limit // base:
                break
            current *= base
        table[i] = current
    return tuple(table)


def generate_factorial_table(size: int) -> tuple[int, ...]:
    """Build ``(0!, 1!, ..., (size-1)!)``."""
    table = [1] * size
    for i in range(1, size):
        table[i] = table[i - 1] * i
    return tuple(table)


FACTORIALS: Final[tuple[int, ...]] = generate_factorial_table(FACTORIAL_TABLE_SIZE)

POWERS_OF_2: Final[tuple[int, ...]] = generate_power_table(2, POWER_TABLE_SIZES[2])
POWERS_OF_3: Final[tuple[int, ...]] = generate_power_table(3, POWER_TABLE_SIZES[3])
POWERS_OF_5: Final[tuple[int, ...]] = generate_power_table(5, POWER_TABLE_SIZES[5])
POWERS_OF_10: Final[tuple[int, ...]] = generate_power_table(10, POWER_TABLE_SIZES[10])

_POWER_TABLES: Final[dict[int, tuple[int, ...]]] = {
    2: POWERS_OF_2,
    3: POWERS_OF_3,
    5: POWERS_OF_5,
    10: POWERS_OF_10,
}


def factorial_table(i: int) -> int:
    """Exact ``i!`` for ``0 <= i < FACTORIAL_TABLE_SIZE``."""
    if not 0 <= i < FACTORIAL_TABLE_SIZE:
        raise IndexError(f"factorial table index out of range: {i}")
    return FACTORIALS[i]


def has_power_table(base: int) -> bool:
    return base in _POWER_TABLES


def power_table_size(base: int) -> int:
    return len(_POWER_TABLES[base])


def power_table(base: int, exp: int) -> int:
    """Raw table entry for ``base**exp``; may be the 0 overflow sentinel."""
    table = _POWER_TABLES[base]
    if not 0 <= exp < len(table):
        raise IndexError(f"power table index out of range for base {base}: {exp}")
    return table[exp]


def lookup_power(base: int, exp: int) -> int | None:
    """``base**exp`` from the table, or None if that slot overflowed."""
    value = power_table(base, exp)
    if value == 0 and exp != 0:
        return None
    return value
