"""Error codes reported by checked integer operations."""

from enum import Enum, auto


class MathError(Enum):
    """Why a checked computation produced no value."""

    NO_ERROR = auto()
    OVERFLOW = auto()
    UNDERFLOW = auto()
    DIVISION_BY_ZERO = auto()
    DOMAIN_ERROR = auto()  # e.g. factorial(-1), log(0)


_DESCRIPTIONS = {
    MathError.NO_ERROR: "No error",
    MathError.OVERFLOW: "Overflow: result exceeds the maximum of the integer type",
    MathError.UNDERFLOW: "Underflow: result is below the minimum of the integer type",
    MathError.DIVISION_BY_ZERO: "Division by zero",
    MathError.DOMAIN_ERROR: "Domain error: input outside the valid domain",
}


def error_to_string(error: MathError) -> str:
    """
    Describe an error code for display.

    Args:
        error: The error code

    Returns:
        A human-readable description
    """
    return _DESCRIPTIONS[error]
