"""Unit value objects - unit system selection and canonical measurement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..shared.errors import UnknownUnitSystemError


class UnitSystem(str, Enum):
    """Unit system the user enters body metrics in.

    - METRIC: weight in kg, height in cm
    - IMPERIAL: weight in lb, height in feet + inches
    """

    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def from_key(cls, key: UnitSystem | str) -> UnitSystem:
        """Parse unit system from its key.

        Args:
            key: UnitSystem or key string ('metric' / 'imperial')

        Returns:
            UnitSystem: Parsed unit system

        Raises:
            UnknownUnitSystemError: If key is not recognised
        """
        if isinstance(key, cls):
            return key
        normalized = str(key).strip().lower()
        for system in cls:
            if system.value == normalized:
                return system
        raise UnknownUnitSystemError(key, [s.value for s in cls])


@dataclass(frozen=True)
class Measurement:
    """Canonical body measurement in metric units.

    Produced by the unit normalizer with full floating precision. A
    measurement whose mass or height is not strictly positive is
    incomplete: estimators treat it as unavailable instead of computing
    nonsensical values.

    Attributes:
        mass_kg: Body mass in kilograms
        height_cm: Height in centimeters
    """

    mass_kg: float
    height_cm: float

    @staticmethod
    def _usable(value: float) -> bool:
        return math.isfinite(value) and value > 0

    @property
    def has_mass(self) -> bool:
        """Whether mass is present and positive."""
        return self._usable(self.mass_kg)

    @property
    def has_height(self) -> bool:
        """Whether height is present and positive."""
        return self._usable(self.height_cm)

    @property
    def is_complete(self) -> bool:
        """Whether both mass and height are usable."""
        return self.has_mass and self.has_height

    @classmethod
    def empty(cls) -> Measurement:
        """Measurement for a form with nothing filled in yet."""
        return cls(mass_kg=0.0, height_cm=0.0)
