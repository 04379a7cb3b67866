"""TDEEService - Total Daily Energy Expenditure calculation."""

from ...shared.rounding import round_to_int
from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = round(BMR × PAL)

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Very Active: 1.725 (hard exercise 6-7 days/week)
        - Extra Active: 1.9 (hard training + physical job)
    """

    def calculate(self, bmr: int, activity_level: ActivityLevel) -> int:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate (0 = unavailable)
            activity_level: Physical activity level

        Returns:
            int: TDEE in kcal/day, 0 if BMR is unavailable

        Example:
            >>> TDEEService().calculate(1659, ActivityLevel.SEDENTARY)
            1991
        """
        if bmr <= 0:
            return 0
        return round_to_int(bmr * activity_level.pal_multiplier())
