"""UnitNormalizer - raw form values to canonical Measurement."""

from __future__ import annotations

import math

from .conversions import RawValue, ft_in_to_cm, lb_to_kg, parse_number
from .value_objects import Measurement, UnitSystem


class UnitNormalizer:
    """Convert metric or imperial input into a canonical Measurement.

    Metric:
        mass = weight (kg), height = primary height field (cm).
        The secondary height field is ignored.

    Imperial:
        mass = weight (lb) × 0.45359237
        height = (feet × 12 + inches) × 2.54

    No rounding is applied. Negative results, and imperial values that
    overflow during conversion, become 0 so the Measurement always holds
    finite, non-negative values.
    """

    def normalize(
        self,
        unit_system: UnitSystem | str,
        raw_weight: RawValue,
        raw_height_primary: RawValue,
        raw_height_secondary: RawValue = None,
    ) -> Measurement:
        """Normalize raw field values.

        Args:
            unit_system: Unit system the values were entered in
            raw_weight: Weight field (kg or lb)
            raw_height_primary: Height in cm (metric) or feet (imperial)
            raw_height_secondary: Inches (imperial only)

        Returns:
            Measurement: Canonical kg / cm measurement

        Raises:
            UnknownUnitSystemError: If unit_system is not recognised

        Example:
            >>> m = UnitNormalizer().normalize("imperial", "154", "5", "9")
            >>> round(m.mass_kg, 2), round(m.height_cm, 2)
            (69.85, 175.26)
        """
        system = UnitSystem.from_key(unit_system)
        weight = parse_number(raw_weight)
        primary = parse_number(raw_height_primary)

        if system is UnitSystem.METRIC:
            mass_kg = weight
            height_cm = primary
        else:
            mass_kg = lb_to_kg(weight)
            height_cm = ft_in_to_cm(primary, parse_number(raw_height_secondary))

        return Measurement(mass_kg=_clamp(mass_kg), height_cm=_clamp(height_cm))


def _clamp(value: float) -> float:
    return value if math.isfinite(value) and value > 0 else 0.0


_default_normalizer = UnitNormalizer()


def normalize(
    unit_system: UnitSystem | str,
    weight: RawValue,
    height_primary: RawValue,
    height_secondary: RawValue = None,
) -> Measurement:
    """Module-level shortcut for UnitNormalizer.normalize."""
    return _default_normalizer.normalize(unit_system, weight, height_primary, height_secondary)
