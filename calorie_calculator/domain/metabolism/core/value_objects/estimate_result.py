"""EstimateResult value object - derived BMR/TDEE/BMI estimate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bmi_category import BMICategory


@dataclass(frozen=True)
class GoalBands:
    """Daily calorie targets around TDEE.

    Attributes:
        maintain: Calories to maintain weight (= TDEE)
        cut: Calories for a 15% deficit
        gain: Calories for a 15% surplus
    """

    maintain: int
    cut: int
    gain: int


@dataclass(frozen=True)
class EstimateResult:
    """Estimate derived from the current input snapshot.

    Recomputed from scratch on every input change and never mutated.
    Unavailable values use 0 (and ``goals=None``); the ``has_*`` flags
    tell a computed value apart from a missing one.

    Attributes:
        bmr: Basal metabolic rate in kcal/day (0 = unavailable)
        tdee: Total daily energy expenditure in kcal/day (0 = unavailable)
        bmi: Body Mass Index, one decimal (0 = unavailable)
        goals: Calorie goal bands, present only when TDEE is available
    """

    bmr: int = 0
    tdee: int = 0
    bmi: float = 0.0
    goals: Optional[GoalBands] = None

    @property
    def has_bmr(self) -> bool:
        return self.bmr > 0

    @property
    def has_tdee(self) -> bool:
        return self.tdee > 0

    @property
    def has_bmi(self) -> bool:
        return self.bmi > 0

    @property
    def bmi_category(self) -> Optional[BMICategory]:
        """BMI classification, None while BMI is unavailable."""
        return BMICategory.from_bmi(self.bmi)

    @classmethod
    def unavailable(cls) -> EstimateResult:
        """Result for a snapshot with nothing computable."""
        return cls()
