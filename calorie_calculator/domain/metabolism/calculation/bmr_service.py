"""BMRService - Basal Metabolic Rate calculation."""

import math

from ...units.value_objects import Measurement
from ...shared.rounding import round_to_int
from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.subject import BiologicalSex, Subject

MALE_CONSTANT = 5
FEMALE_CONSTANT = -161


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    The Mifflin-St Jeor equation is considered the most accurate formula
    for BMR calculation in normal-weight and overweight individuals.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    The result is floored at 0 and rounded to the nearest integer. A
    measurement or subject that is incomplete yields 0, as does a base
    value outside floating-point range.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, measurement: Measurement, subject: Subject) -> int:
        """Calculate BMR from canonical measurement and subject.

        Args:
            measurement: Mass (kg) and height (cm)
            subject: Biological sex and age

        Returns:
            int: BMR in kcal/day, 0 if unavailable

        Example:
            >>> service = BMRService()
            >>> service.calculate(
            ...     Measurement(mass_kg=70.0, height_cm=175.0),
            ...     Subject(biological_sex=BiologicalSex.MALE, age_years=28),
            ... )
            1659
        """
        if not measurement.is_complete or not subject.is_complete:
            return 0

        # Base calculation (common for both sexes)
        base = 10 * measurement.mass_kg + 6.25 * measurement.height_cm - 5 * subject.age_years
        if not math.isfinite(base):
            return 0

        # Sex-specific adjustment
        if subject.biological_sex is BiologicalSex.MALE:
            bmr_value = base + MALE_CONSTANT
        else:
            bmr_value = base + FEMALE_CONSTANT

        return round_to_int(max(0.0, bmr_value))
