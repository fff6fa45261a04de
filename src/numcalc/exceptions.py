"""Custom exceptions for the numcalc package.

Input-domain and overflow conditions are never raised by the operations
themselves; they come back as failed ``Result`` values. The exceptions here
cover contract violations and reading the wrong side of a ``Result``.
"""

from typing import Any

from numcalc.errors import MathError, error_to_string


class NumCalcError(Exception):
    """Base exception for all numcalc errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidInputError(NumCalcError):
    """Raised when an operand breaks the operation's contract."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class UnsupportedTypeError(InvalidInputError, TypeError):
    """Raised when a value is not a supported integer (float, bool, str, ...)."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        if reason is None:
            reason = f"Expected a supported integer, got {type(value).__name__}"
        super().__init__(value, reason)


class OutOfRangeError(NumCalcError):
    """Raised when an operand is not representable in its declared integer type."""

    def __init__(
        self,
        value: int,
        min_val: int | None = None,
        max_val: int | None = None,
        type_name: str | None = None,
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        if type_name is not None:
            range_str = f"{type_name} {range_str}"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val
        self.type_name = type_name


class ResultAccessError(NumCalcError):
    """Raised when the error of a successful Result is requested."""

    def __init__(self, value: Any) -> None:
        super().__init__("Result holds a value, not an error", value)


class ArithmeticResultError(NumCalcError):
    """Raised when the value of a failed Result is requested."""

    code = MathError.NO_ERROR

    def __init__(self, operation: str | None = None) -> None:
        message = error_to_string(self.code)
        if operation is not None:
            message = f"{message} in {operation}"
        super().__init__(message)
        self.operation = operation


class OverflowError(ArithmeticResultError):
    """The true result exceeds the maximum of the integer type."""

    code = MathError.OVERFLOW


class UnderflowError(ArithmeticResultError):
    """The true result is below the minimum of the integer type."""

    code = MathError.UNDERFLOW


class DivisionByZeroError(ArithmeticResultError):
    """A division by zero was requested."""

    code = MathError.DIVISION_BY_ZERO


class DomainError(ArithmeticResultError):
    """The input is outside the mathematically valid domain."""

    code = MathError.DOMAIN_ERROR


_EXCEPTIONS: dict[MathError, type[ArithmeticResultError]] = {
    cls.code: cls
    for cls in (OverflowError, UnderflowError, DivisionByZeroError, DomainError)
}


def exception_for(error: MathError) -> type[ArithmeticResultError]:
    """Exception class raised when reading the value of a Result failed with ``error``."""
    return _EXCEPTIONS[error]
