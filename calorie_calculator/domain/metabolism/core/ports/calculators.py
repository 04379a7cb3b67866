"""Calculator ports - interfaces for BMR/TDEE/BMI/goal calculations."""

from abc import ABC, abstractmethod
from typing import Optional

from ....units.value_objects import Measurement
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.estimate_result import GoalBands
from ..value_objects.subject import Subject


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, measurement: Measurement, subject: Subject) -> int:
        """Calculate BMR in kcal/day, 0 when inputs are incomplete.

        Args:
            measurement: Canonical mass and height
            subject: Sex and age

        Returns:
            int: Rounded BMR, never negative
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: int, activity_level: ActivityLevel) -> int:
        """Calculate TDEE in kcal/day, 0 when BMR is unavailable.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            int: Rounded TDEE
        """
        pass


class IBMICalculator(ABC):
    """Port for Body Mass Index calculation."""

    @abstractmethod
    def calculate(self, measurement: Measurement) -> float:
        """Calculate BMI rounded to one decimal, 0 when unavailable."""
        pass


class IGoalCalculator(ABC):
    """Port for calorie goal bands around TDEE."""

    @abstractmethod
    def calculate(self, tdee: int) -> Optional[GoalBands]:
        """Calculate goal bands, None when TDEE is unavailable."""
        pass
