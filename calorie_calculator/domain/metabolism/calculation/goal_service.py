"""GoalService - calorie goal bands around TDEE."""

from typing import Optional

from ...shared.rounding import round_to_int
from ..core.ports.calculators import IGoalCalculator
from ..core.value_objects.estimate_result import GoalBands

CUT_FACTOR = 0.85
GAIN_FACTOR = 1.15


class GoalService(IGoalCalculator):
    """Derive maintenance, deficit and surplus calorie targets.

    Bands:
        maintain = TDEE
        cut      = round(TDEE × 0.85)
        gain     = round(TDEE × 1.15)
    """

    def calculate(self, tdee: int) -> Optional[GoalBands]:
        """Calculate goal bands.

        Args:
            tdee: Total daily energy expenditure (0 = unavailable)

        Returns:
            Optional[GoalBands]: Bands, or None if TDEE is unavailable

        Example:
            >>> GoalService().calculate(2000)
            GoalBands(maintain=2000, cut=1700, gain=2300)
        """
        if tdee <= 0:
            return None
        return GoalBands(
            maintain=tdee,
            cut=round_to_int(tdee * CUT_FACTOR),
            gain=round_to_int(tdee * GAIN_FACTOR),
        )
