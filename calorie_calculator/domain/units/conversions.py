"""Unit conversions between metric and imperial body metrics.

Conversions here keep full precision unless stated otherwise. The
``reexpress_*`` helpers round for display and are only used to carry
values across when the user switches unit systems.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from ..shared.rounding import round_half_up

RawValue = Union[str, int, float, None]

KG_PER_LB = 0.45359237
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def parse_number(raw: RawValue) -> float:
    """Parse a raw form value into a number.

    Empty, non-numeric and non-finite values parse to 0.0: an unfilled
    field is not an error, it just leaves the measurement incomplete.

    Example:
        >>> parse_number("70.5")
        70.5
        >>> parse_number("")
        0.0
        >>> parse_number("abc")
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return 0.0
    return value if math.isfinite(value) else 0.0


def lb_to_kg(lb: float) -> float:
    """Convert pounds to kilograms."""
    return lb * KG_PER_LB


def kg_to_lb(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg / KG_PER_LB


def ft_in_to_cm(feet: float, inches: float) -> float:
    """Convert feet + inches to centimeters.

    Example:
        >>> round(ft_in_to_cm(5, 9), 2)
        175.26
    """
    total_inches = feet * INCHES_PER_FOOT + inches
    return total_inches * CM_PER_INCH


def cm_to_ft_in(cm: float) -> Tuple[int, float]:
    """Convert centimeters to whole feet and inches.

    Inches are rounded to one decimal place; a value that rounds up to a
    full foot carries over, so 182.87 cm gives (6, 0.0) rather than
    (5, 12.0).

    Returns:
        Tuple[int, float]: (feet, inches)
    """
    if not math.isfinite(cm) or cm <= 0:
        return 0, 0.0
    total_inches = cm / CM_PER_INCH
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = round_half_up(total_inches - feet * INCHES_PER_FOOT, 1)
    if inches >= INCHES_PER_FOOT:
        feet += 1
        inches = round_half_up(inches - INCHES_PER_FOOT, 1)
    return feet, inches


# Display re-expression (unit switch)


def reexpress_kg_as_lb(kg: float) -> float:
    """Kilograms as pounds, rounded to one decimal for display."""
    return round_half_up(kg_to_lb(kg), 1)


def reexpress_lb_as_kg(lb: float) -> float:
    """Pounds as kilograms, rounded to one decimal for display."""
    return round_half_up(lb_to_kg(lb), 1)


def reexpress_ft_in_as_cm(feet: float, inches: float) -> float:
    """Feet + inches as centimeters, rounded to one decimal for display."""
    return round_half_up(ft_in_to_cm(feet, inches), 1)


def format_display_number(value: Optional[float]) -> str:
    """Render a re-expressed number without a trailing '.0'."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
