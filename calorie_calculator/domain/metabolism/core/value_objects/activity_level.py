"""ActivityLevel value object - physical activity level for TDEE."""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

from ....shared.errors import UnknownActivityLevelError


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Ordered from least to most active; each level multiplies BMR by a
    factor in [1.2, 1.9]:
    - SEDENTARY: Little or no exercise
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Hard training or physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return _MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Sedentary (little or no exercise)",
            ActivityLevel.LIGHT: "Light (1-3 days/week)",
            ActivityLevel.MODERATE: "Moderate (3-5 days/week)",
            ActivityLevel.VERY_ACTIVE: "Very active (6-7 days/week)",
            ActivityLevel.EXTRA_ACTIVE: "Extra active (hard training/physical job)",
        }
        return descriptions[self]

    @classmethod
    def from_key(cls, key: Union[ActivityLevel, str, float]) -> ActivityLevel:
        """Parse an activity level from a key or multiplier.

        Accepts the level name ("moderate") or its multiplier, either as a
        number or the string the selection widget submits ("1.55").

        Raises:
            UnknownActivityLevelError: If key matches no level

        Example:
            >>> ActivityLevel.from_key("1.725")
            <ActivityLevel.VERY_ACTIVE: 'very_active'>
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            normalized = key.strip().lower()
            for level in cls:
                if level.value == normalized:
                    return level
            try:
                multiplier = float(normalized)
            except ValueError:
                raise UnknownActivityLevelError(key, cls.keys()) from None
        elif isinstance(key, (int, float)) and not isinstance(key, bool):
            multiplier = float(key)
        else:
            raise UnknownActivityLevelError(key, cls.keys())

        for level, value in _MULTIPLIERS.items():
            if math.isclose(value, multiplier):
                return level
        raise UnknownActivityLevelError(key, cls.keys())

    @classmethod
    def keys(cls) -> list[str]:
        """Level keys in activity order."""
        return [level.value for level in cls]


_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,  # Minimal activity
    ActivityLevel.LIGHT: 1.375,  # Light exercise
    ActivityLevel.MODERATE: 1.55,  # Moderate exercise
    ActivityLevel.VERY_ACTIVE: 1.725,  # Hard exercise
    ActivityLevel.EXTRA_ACTIVE: 1.9,  # Very hard exercise
}
