"""MetabolicEstimator - BMR, TDEE, BMI and goal bands from one snapshot."""

from typing import Optional

from ..units.value_objects import Measurement
from .calculation.bmi_service import BMIService
from .calculation.bmr_service import BMRService
from .calculation.goal_service import GoalService
from .calculation.tdee_service import TDEEService
from .core.ports.calculators import (
    IBMICalculator,
    IBMRCalculator,
    IGoalCalculator,
    ITDEECalculator,
)
from .core.value_objects.activity_level import ActivityLevel
from .core.value_objects.estimate_result import EstimateResult
from .core.value_objects.subject import Subject


class MetabolicEstimator:
    """
    Derives an EstimateResult from measurement, subject and activity.

    Flow:
    1. BMI from mass and height (independent of age and sex)
    2. BMR from measurement and subject
    3. TDEE from BMR and activity level
    4. Goal bands from TDEE

    Incompleteness propagates down the chain: an unavailable BMR makes
    TDEE unavailable, which leaves the goal bands unset. The estimator
    never raises on numeric input.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        bmi_service: Optional[IBMICalculator] = None,
        goal_service: Optional[IGoalCalculator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._bmi_service = bmi_service or BMIService()
        self._goal_service = goal_service or GoalService()

    def estimate(
        self,
        measurement: Measurement,
        subject: Subject,
        activity_level: ActivityLevel,
    ) -> EstimateResult:
        """
        Estimate energy expenditure and BMI.

        Args:
            measurement: Canonical mass (kg) and height (cm)
            subject: Biological sex and age
            activity_level: Physical activity level

        Returns:
            EstimateResult with unavailable fields set to 0 / None
        """
        bmi = self._bmi_service.calculate(measurement)
        bmr = self._bmr_service.calculate(measurement, subject)
        tdee = self._tdee_service.calculate(bmr, activity_level)
        goals = self._goal_service.calculate(tdee)

        return EstimateResult(bmr=bmr, tdee=tdee, bmi=bmi, goals=goals)


_default_estimator = MetabolicEstimator()


def estimate(
    measurement: Measurement,
    subject: Subject,
    activity_level: ActivityLevel,
) -> EstimateResult:
    """Module-level shortcut for MetabolicEstimator.estimate."""
    return _default_estimator.estimate(measurement, subject, activity_level)
