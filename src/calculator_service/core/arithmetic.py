"""Arithmetic primitives used by the calculator.

Results are plain IEEE-754 double arithmetic with no rounding applied.
"""

from typing import Optional


class InvalidOperandError(ValueError):
    """Raised when an arithmetic function receives a missing operand."""


class ResultOverflowError(ArithmeticError):
    """Raised when a result of finite operands is not a finite double."""


def _require_operands(a: Optional[float], b: Optional[float]) -> None:
    if a is None or b is None:
        raise InvalidOperandError("Operands cannot be null")


def add(a: Optional[float], b: Optional[float]) -> float:
    """Return the sum of two operands.

    Raises:
        InvalidOperandError: If either operand is None
    """
    _require_operands(a, b)
    return a + b


def multiply(a: Optional[float], b: Optional[float]) -> float:
    """Return the product of two operands.

    Raises:
        InvalidOperandError: If either operand is None
    """
    _require_operands(a, b)
    return a * b
