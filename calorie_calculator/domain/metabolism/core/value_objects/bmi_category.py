"""BMICategory value object - BMI classification bands."""

from __future__ import annotations

from enum import Enum
from typing import Optional

# Visualization range of the BMI gauge
BMI_GAUGE_MIN = 12.0
BMI_GAUGE_MAX = 40.0

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 24.9


class BMICategory(str, Enum):
    """BMI classification over the gauge range [12, 40].

    - UNDERWEIGHT: BMI < 18.5
    - NORMAL: 18.5 <= BMI < 24.9
    - OVERWEIGHT: BMI >= 24.9
    """

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"

    @classmethod
    def from_bmi(cls, bmi: float) -> Optional[BMICategory]:
        """Classify a BMI value.

        Args:
            bmi: Body Mass Index (0 means unavailable)

        Returns:
            Optional[BMICategory]: Category, or None if BMI is unavailable

        Example:
            >>> BMICategory.from_bmi(22.9)
            <BMICategory.NORMAL: 'normal'>
        """
        if bmi <= 0:
            return None
        if bmi < UNDERWEIGHT_BELOW:
            return cls.UNDERWEIGHT
        if bmi < OVERWEIGHT_FROM:
            return cls.NORMAL
        return cls.OVERWEIGHT

    def label(self) -> str:
        """Get display label."""
        labels = {
            BMICategory.UNDERWEIGHT: "Underweight",
            BMICategory.NORMAL: "Normal",
            BMICategory.OVERWEIGHT: "Overweight",
        }
        return labels[self]


def bmi_gauge_position(bmi: float) -> Optional[float]:
    """Position of a BMI value on the gauge as a fraction in [0, 1].

    Values outside [12, 40] are clamped to the gauge ends.

    Example:
        >>> bmi_gauge_position(26.0)
        0.5
    """
    if bmi <= 0:
        return None
    clamped = min(max(bmi, BMI_GAUGE_MIN), BMI_GAUGE_MAX)
    return (clamped - BMI_GAUGE_MIN) / (BMI_GAUGE_MAX - BMI_GAUGE_MIN)
