"""Unit tests for UnitNormalizer."""

import pytest

from calorie_calculator.domain.shared.errors import UnknownUnitSystemError
from calorie_calculator.domain.units import (
    Measurement,
    UnitNormalizer,
    UnitSystem,
    normalize,
)


class TestUnitNormalizer:
    """Test raw input normalization to kg / cm."""

    def setup_method(self):
        """Set up test fixtures."""
        self.normalizer = UnitNormalizer()

    def test_metric_passes_through(self):
        """Test metric values are unchanged."""
        measurement = self.normalizer.normalize("metric", "70", "175")

        assert measurement == Measurement(mass_kg=70.0, height_cm=175.0)

    def test_metric_ignores_secondary_height(self):
        """Test the inches field does not affect metric height."""
        measurement = self.normalizer.normalize(UnitSystem.METRIC, "70", "175", "9")

        assert measurement.height_cm == 175.0

    def test_metric_keeps_full_precision(self):
        """Test no rounding is applied."""
        measurement = self.normalizer.normalize("metric", "70.123456", "175.654321")

        assert measurement.mass_kg == 70.123456
        assert measurement.height_cm == 175.654321

    def test_imperial_conversion(self):
        """Test 154 lb, 5 ft 9 in."""
        measurement = self.normalizer.normalize("imperial", "154", "5", "9")

        assert measurement.mass_kg == pytest.approx(69.85, abs=0.01)
        assert measurement.height_cm == pytest.approx(175.26, abs=0.01)

    def test_imperial_feet_only(self):
        """Test an empty inches field counts as 0."""
        measurement = self.normalizer.normalize("imperial", "180", "6", "")

        assert measurement.height_cm == pytest.approx(182.88)

    def test_imperial_accepts_numbers(self):
        """Test numeric (not string) inputs."""
        measurement = self.normalizer.normalize("imperial", 154, 5, 9)

        assert measurement.height_cm == pytest.approx(175.26)

    def test_empty_fields_give_zero(self):
        """Test an unfilled form normalizes to zeros, not an error."""
        measurement = self.normalizer.normalize("metric", "", "")

        assert measurement == Measurement.empty()
        assert not measurement.is_complete

    def test_non_numeric_fields_give_zero(self):
        """Test non-numeric input parses to 0."""
        measurement = self.normalizer.normalize("imperial", "abc", "five", None)

        assert measurement.mass_kg == 0.0
        assert measurement.height_cm == 0.0

    def test_negative_values_clamped(self):
        """Test negative values never leave the normalizer."""
        measurement = self.normalizer.normalize("metric", "-70", "-175")

        assert measurement.mass_kg == 0.0
        assert measurement.height_cm == 0.0

    def test_unit_system_key_is_case_insensitive(self):
        """Test unit system parsing tolerates case and spaces."""
        measurement = self.normalizer.normalize(" Imperial ", "154", "5", "9")

        assert measurement.height_cm == pytest.approx(175.26)

    def test_unknown_unit_system_raises(self):
        """Test unknown unit system key raises."""
        with pytest.raises(UnknownUnitSystemError, match="stone"):
            self.normalizer.normalize("stone", "10", "5", "9")

    def test_module_level_normalize(self):
        """Test the module shortcut matches the service."""
        assert normalize("imperial", "154", "5", "9") == self.normalizer.normalize(
            "imperial", "154", "5", "9"
        )


class TestMeasurement:
    """Test Measurement completeness flags."""

    def test_complete(self):
        """Test positive mass and height are complete."""
        measurement = Measurement(mass_kg=70.0, height_cm=175.0)

        assert measurement.has_mass
        assert measurement.has_height
        assert measurement.is_complete

    def test_missing_height(self):
        """Test zero height is incomplete."""
        measurement = Measurement(mass_kg=70.0, height_cm=0.0)

        assert measurement.has_mass
        assert not measurement.is_complete

    def test_non_finite_is_incomplete(self):
        """Test directly constructed non-finite values are unusable."""
        measurement = Measurement(mass_kg=float("inf"), height_cm=175.0)

        assert not measurement.has_mass
        assert not measurement.is_complete


class TestNormalizerExtremes:
    """Test values at the edge of floating-point range."""

    def test_imperial_height_overflow_becomes_zero(self):
        """Test feet that overflow when converted give 0 cm."""
        measurement = normalize("imperial", "150", "1e308", "0")

        assert measurement.height_cm == 0.0
        assert measurement.mass_kg == pytest.approx(68.04, abs=0.01)

    def test_huge_metric_values_stay_finite(self):
        """Test huge but finite metric values pass through unchanged."""
        measurement = normalize("metric", "1e308", "175")

        assert measurement.mass_kg == 1e308
        assert measurement.is_complete
