"""BMIService - Body Mass Index calculation."""

import math

from ...shared.rounding import round_half_up
from ...units.value_objects import Measurement
from ..core.ports.calculators import IBMICalculator


class BMIService(IBMICalculator):
    """Calculate Body Mass Index.

    Formula:
        BMI = weight(kg) / height(m)²

    Needs only mass and height, so it is available before age and sex
    are filled in.
    """

    def calculate(self, measurement: Measurement) -> float:
        """Calculate BMI rounded to one decimal place.

        Args:
            measurement: Mass (kg) and height (cm)

        Returns:
            float: BMI, 0.0 if mass or height is missing or the
            division is out of floating-point range

        Example:
            >>> BMIService().calculate(Measurement(mass_kg=70.0, height_cm=175.0))
            22.9
        """
        if not measurement.is_complete:
            return 0.0
        meters = measurement.height_cm / 100
        squared = meters * meters
        if squared == 0:
            return 0.0
        bmi = measurement.mass_kg / squared
        if not math.isfinite(bmi):
            return 0.0
        return round_half_up(bmi, 1)
