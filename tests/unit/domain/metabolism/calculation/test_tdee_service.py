"""Unit tests for TDEEService."""

import pytest

from calorie_calculator.domain.metabolism.calculation.tdee_service import TDEEService
from calorie_calculator.domain.metabolism.core.value_objects import ActivityLevel


class TestTDEEService:
    """Test TDEE calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    def test_sedentary(self):
        """Test 1659 × 1.2 = 1990.8."""
        assert self.service.calculate(1659, ActivityLevel.SEDENTARY) == 1991

    def test_moderate(self):
        """Test 1320 × 1.55 = 2046."""
        assert self.service.calculate(1320, ActivityLevel.MODERATE) == 2046

    @pytest.mark.parametrize(
        "level, expected",
        [
            (ActivityLevel.SEDENTARY, 1200),
            (ActivityLevel.LIGHT, 1375),
            (ActivityLevel.MODERATE, 1550),
            (ActivityLevel.VERY_ACTIVE, 1725),
            (ActivityLevel.EXTRA_ACTIVE, 1900),
        ],
    )
    def test_all_multipliers(self, level, expected):
        """Test each activity level multiplier."""
        assert self.service.calculate(1000, level) == expected

    @pytest.mark.parametrize("level", list(ActivityLevel))
    def test_unavailable_bmr_propagates(self, level):
        """Test TDEE is 0 whenever BMR is 0."""
        assert self.service.calculate(0, level) == 0

    def test_higher_activity_higher_tdee(self):
        """Test TDEE grows with activity level."""
        values = [self.service.calculate(1700, level) for level in ActivityLevel]

        assert values == sorted(values)
