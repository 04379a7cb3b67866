"""Calculation services for metabolic estimation."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .goal_service import GoalService
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "BMIService",
    "GoalService",
]
