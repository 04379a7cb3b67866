"""Half-up rounding for non-negative display values."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` with ties going up.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); the
    calculator rounds ties up so that ``1658.5`` kcal becomes ``1659``.
    Values that are not finite, or overflow once scaled, round to 0.0.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        float: Rounded value

    Example:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(22.857, 1)
        22.9
    """
    factor = 10**ndigits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return 0.0
    return math.floor(scaled) / factor


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer.

    Non-finite values round to 0, the unavailable sentinel.
    """
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))
