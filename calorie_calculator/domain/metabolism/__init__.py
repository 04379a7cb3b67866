"""Metabolic estimation: BMR, TDEE, BMI and calorie goal bands."""

from .calculation import BMIService, BMRService, GoalService, TDEEService
from .core.value_objects import (
    ActivityLevel,
    BiologicalSex,
    BMICategory,
    EstimateResult,
    GoalBands,
    Subject,
    bmi_gauge_position,
)
from .estimator import MetabolicEstimator, estimate

__all__ = [
    "ActivityLevel",
    "BiologicalSex",
    "Subject",
    "BMICategory",
    "bmi_gauge_position",
    "GoalBands",
    "EstimateResult",
    "BMRService",
    "TDEEService",
    "BMIService",
    "GoalService",
    "MetabolicEstimator",
    "estimate",
]
