"""Unit tests for GoalService."""

from calorie_calculator.domain.metabolism.calculation.goal_service import GoalService
from calorie_calculator.domain.metabolism.core.value_objects import GoalBands


class TestGoalService:
    """Test calorie goal bands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = GoalService()

    def test_bands_for_2000(self):
        """Test ±15% around 2000 kcal."""
        assert self.service.calculate(2000) == GoalBands(maintain=2000, cut=1700, gain=2300)

    def test_bands_are_rounded(self):
        """Test 1991 × 0.85 = 1692.35 and 1991 × 1.15 = 2289.65."""
        bands = self.service.calculate(1991)

        assert bands.maintain == 1991
        assert bands.cut == 1692
        assert bands.gain == 2290

    def test_no_bands_without_tdee(self):
        """Test bands are absent while TDEE is unavailable."""
        assert self.service.calculate(0) is None
