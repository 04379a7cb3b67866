"""Calorie calculator core: BMR, TDEE and BMI from body metrics."""

from .domain.metabolism import (
    ActivityLevel,
    BiologicalSex,
    BMICategory,
    EstimateResult,
    GoalBands,
    Subject,
    estimate,
)
from .domain.units import Measurement, UnitSystem, normalize

__version__ = "1.0.0"

__all__ = [
    "normalize",
    "estimate",
    "UnitSystem",
    "Measurement",
    "BiologicalSex",
    "Subject",
    "ActivityLevel",
    "EstimateResult",
    "GoalBands",
    "BMICategory",
]
