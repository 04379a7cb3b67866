"""
Domain exceptions.

Numeric input never raises: missing or invalid numbers become the
"incomplete" sentinel. These exceptions cover contract violations by the
caller, such as an unknown unit system or activity key.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class CalculatorDomainError(Exception):
    """
    Base exception for all calculator domain errors.

    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# KEY PARSING EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class UnknownKeyError(CalculatorDomainError, ValueError):
    """
    A selection key does not match any known option.

    Subclasses ValueError so pydantic validators report it as a
    validation error.
    """

    kind = "key"

    def __init__(self, key: object, allowed: list[str]) -> None:
        super().__init__(
            f"Unknown {self.kind} {key!r}, expected one of: {', '.join(allowed)}"
        )
        self.key = key
        self.allowed = allowed


class UnknownUnitSystemError(UnknownKeyError):
    """Unit system key is neither 'metric' nor 'imperial'."""

    kind = "unit system"


class UnknownSexError(UnknownKeyError):
    """Biological sex key is not supported by the BMR equation."""

    kind = "biological sex"


class UnknownActivityLevelError(UnknownKeyError):
    """Activity key matches neither a level name nor a multiplier."""

    kind = "activity level"
