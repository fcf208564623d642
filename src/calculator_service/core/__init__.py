"""Core calculation logic."""

from .arithmetic import InvalidOperandError, ResultOverflowError, add, multiply
from .calculator import Calculator

__all__ = ["InvalidOperandError", "ResultOverflowError", "add", "multiply", "Calculator"]
