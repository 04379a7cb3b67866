"""Shared domain primitives."""

from .errors import (
    CalculatorDomainError,
    UnknownActivityLevelError,
    UnknownKeyError,
    UnknownSexError,
    UnknownUnitSystemError,
)
from .rounding import round_half_up, round_to_int

__all__ = [
    "CalculatorDomainError",
    "UnknownKeyError",
    "UnknownUnitSystemError",
    "UnknownSexError",
    "UnknownActivityLevelError",
    "round_half_up",
    "round_to_int",
]
