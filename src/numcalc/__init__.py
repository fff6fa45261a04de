"""
Checked integer arithmetic over fixed-width and arbitrary-precision integers.

This package provides:
- Factorial, permutations and combinations
- Integer power and integer logarithms (base 2, base 10, any base)
- Overflow detected before it happens, reported through Result values
- Lookup tables for small factorials and powers of 2, 3, 5 and 10
"""

import logging

from numcalc.combinatorics import combinations, factorial, permutations
from numcalc.core import Calculator, Evaluation
from numcalc.errors import MathError, error_to_string
from numcalc.exceptions import (
    ArithmeticResultError,
    DivisionByZeroError,
    DomainError,
    InvalidInputError,
    NumCalcError,
    OutOfRangeError,
    OverflowError,
    ResultAccessError,
    UnderflowError,
    UnsupportedTypeError,
)
from numcalc.integer_ops import integer_log, integer_log2, integer_log10, integer_power
from numcalc.literals import parse_integer, power_of_two
from numcalc.result import Result
from numcalc.types import (
    BIGINT,
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    IntegerType,
    integer_type_of,
    is_supported_integer,
)
from numcalc.validators import (
    validate_integer,
    validate_non_negative,
    validate_range,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BIGINT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT128",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT128",
    "ArithmeticResultError",
    "Calculator",
    "DivisionByZeroError",
    "DomainError",
    "Evaluation",
    "IntegerType",
    "InvalidInputError",
    "MathError",
    "NumCalcError",
    "OutOfRangeError",
    "OverflowError",
    "Result",
    "ResultAccessError",
    "UnderflowError",
    "UnsupportedTypeError",
    "combinations",
    "error_to_string",
    "factorial",
    "integer_log",
    "integer_log2",
    "integer_log10",
    "integer_power",
    "integer_type_of",
    "is_supported_integer",
    "parse_integer",
    "permutations",
    "power_of_two",
    "validate_integer",
    "validate_non_negative",
    "validate_range",
]

__version__ = "0.1.0"
