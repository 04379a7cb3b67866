"""Unit tests for BMIService."""

from calorie_calculator.domain.metabolism.calculation.bmi_service import BMIService
from calorie_calculator.domain.units.value_objects import Measurement


class TestBMIService:
    """Test BMI calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMIService()

    def test_calculate_bmi(self):
        """Test 70 kg / 1.75 m² = 22.86."""
        assert self.service.calculate(Measurement(mass_kg=70.0, height_cm=175.0)) == 22.9

    def test_calculate_bmi_whole_decimal(self):
        """Test 60 kg / 1.65 m² = 22.04."""
        assert self.service.calculate(Measurement(mass_kg=60.0, height_cm=165.0)) == 22.0

    def test_rounds_to_one_decimal(self):
        """Test 80 kg / 1.80 m² = 24.69."""
        assert self.service.calculate(Measurement(mass_kg=80.0, height_cm=180.0)) == 24.7

    def test_missing_mass(self):
        """Test zero mass gives 0."""
        assert self.service.calculate(Measurement(mass_kg=0.0, height_cm=175.0)) == 0.0

    def test_missing_height(self):
        """Test zero height gives 0 instead of dividing by zero."""
        assert self.service.calculate(Measurement(mass_kg=70.0, height_cm=0.0)) == 0.0

    def test_height_squared_underflow(self):
        """Test a tiny height whose square underflows to 0 gives 0."""
        assert self.service.calculate(Measurement(mass_kg=70.0, height_cm=1e-300)) == 0.0

    def test_huge_height(self):
        """Test a huge height does not overflow."""
        assert self.service.calculate(Measurement(mass_kg=70.0, height_cm=1e308)) == 0.0

    def test_bmi_out_of_float_range(self):
        """Test a BMI that cannot be represented gives 0."""
        assert self.service.calculate(Measurement(mass_kg=1e308, height_cm=1e-150)) == 0.0
