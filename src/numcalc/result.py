"""Result type carrying either a value or a MathError."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from numcalc.errors import MathError, error_to_string
from numcalc.exceptions import ResultAccessError, exception_for

T = TypeVar("T")
U = TypeVar("U")

_MISSING = object()


class Result(Generic[T]):
    """
    Outcome of a checked computation: a value or an error code, never both.

    Reading the side that is not there raises immediately:
    ``value`` on a failure raises the exception mapped to the error code,
    ``error`` on a success raises ResultAccessError.

    Example:
        >>> r = Result.ok(120)
        >>> r.value
        120
        >>> Result.failure(MathError.OVERFLOW).value_or(-1)
        -1
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Any = _MISSING, error: MathError = MathError.NO_ERROR) -> None:
        if (value is _MISSING) == (error is MathError.NO_ERROR):
            raise ValueError("Result needs exactly one of a value or an error code")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_error", error)

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: MathError) -> Result[Any]:
        """Build a failed result. NO_ERROR is not a failure."""
        if not isinstance(error, MathError):
            raise TypeError(f"Expected MathError, got {type(error).__name__}")
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is MathError.NO_ERROR

    @property
    def value(self) -> T:
        """
        The computed value.

        Raises:
            ArithmeticResultError: The subclass matching the error code, if failed
        """
        if not self.is_ok:
            raise exception_for(self._error)()
        return self._value

    @property
    def error(self) -> MathError:
        """
        The error code.

        Raises:
            ResultAccessError: If the result holds a value
        """
        if self.is_ok:
            raise ResultAccessError(self._value)
        return self._error

    def value_or(self, default: U) -> T | U:
        """Value if successful, otherwise ``default``."""
        return self._value if self.is_ok else default

    def map(self, func: Callable[[T], U]) -> Result[U]:
        """Apply ``func`` to the value; failures pass through unchanged."""
        if not self.is_ok:
            return self
        return Result.ok(func(self._value))

    def __bool__(self) -> bool:
        return self.is_ok

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Result is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self.is_ok != other.is_ok:
            return False
        if self.is_ok:
            return self._value == other._value
        return self._error is other._error

    def __hash__(self) -> int:
        if self.is_ok:
            return hash((True, self._value))
        return hash((False, self._error))

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Result.ok({self._value!r})"
        return f"Result.failure({self._error})"

    def __str__(self) -> str:
        if self.is_ok:
            return str(self._value)
        return error_to_string(self._error)
