"""Calculator class binding the checked operations to one integer type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from numcalc.combinatorics import combinations, factorial, permutations
from numcalc.exceptions import NumCalcError
from numcalc.integer_ops import integer_log, integer_log2, integer_log10, integer_power
from numcalc.literals import parse_integer
from numcalc.types import DEFAULT_TYPE, IntegerType
from numcalc.validators import validate_operands

if TYPE_CHECKING:
    from collections.abc import Callable

    from numcalc.result import Result


@dataclass(frozen=True)
class Evaluation:
    """Immutable record of one calculator call."""

    operation: str
    operands: tuple[Any, ...]
    result: Result[Any]

    def __str__(self) -> str:
        return f"{self.operation}({', '.join(map(str, self.operands))}) = {self.result}"


class Calculator:
    """
    Checked integer calculator evaluating every call in one integer type.

    Operations never raise for overflow or domain errors; they return a
    Result, and every call is kept in the history.

    Example:
        >>> from numcalc import UINT64
        >>> calc = Calculator(UINT64)
        >>> calc.factorial(20).value
        2432902008176640000
        >>> calc.factorial(21).error
        <MathError.OVERFLOW: 2>
        >>> len(calc.history)
        2
    """

    def __init__(self, dtype: IntegerType = DEFAULT_TYPE) -> None:
        if not isinstance(dtype, IntegerType):
            raise TypeError(f"Expected IntegerType, got {type(dtype).__name__}")
        self._dtype = dtype
        self._history: list[Evaluation] = []

    @property
    def dtype(self) -> IntegerType:
        """Integer type all operations are evaluated in."""
        return self._dtype

    @property
    def history(self) -> list[Evaluation]:
        """List of all evaluations performed."""
        return self._history.copy()

    @property
    def last(self) -> Evaluation:
        """
        The most recent evaluation.

        Raises:
            NumCalcError: If nothing has been evaluated yet
        """
        if not self._history:
            raise NumCalcError("No evaluations yet")
        return self._history[-1]

    def _record(self, operation: str, func: Callable[..., Result[Any]], *operands: Any) -> Result[Any]:
        result = func(*operands)
        self._history.append(Evaluation(operation=operation, operands=operands, result=result))
        return result

    def factorial(self, n: int) -> Result[Any]:
        return self._record("factorial", lambda a: factorial(a, dtype=self._dtype), n)

    def permutations(self, n: int, k: int) -> Result[Any]:
        return self._record("permutations", lambda a, b: permutations(a, b, dtype=self._dtype), n, k)

    def combinations(self, n: int, k: int) -> Result[Any]:
        return self._record("combinations", lambda a, b: combinations(a, b, dtype=self._dtype), n, k)

    def power(self, base: int, exp: int) -> Result[Any]:
        return self._record("power", lambda a, b: integer_power(a, b, dtype=self._dtype), base, exp)

    def log2(self, n: int) -> Result[int]:
        validate_operands(n, dtype=self._dtype)
        return self._record("log2", integer_log2, n)

    def log10(self, n: int) -> Result[int]:
        validate_operands(n, dtype=self._dtype)
        return self._record("log10", integer_log10, n)

    def log(self, base: int, n: int) -> Result[int]:
        validate_operands(base, n, dtype=self._dtype)
        return self._record("log", integer_log, base, n)

    def parse(self, text: str) -> Result[int]:
        """Parse a decimal literal in this calculator's integer type."""
        return self._record("parse", lambda t: parse_integer(t, self._dtype), text)

    def clear(self) -> Calculator:
        """Forget all evaluations."""
        self._history.clear()
        return self

    def __repr__(self) -> str:
        return f"Calculator(dtype={self._dtype}, history_len={len(self._history)})"
