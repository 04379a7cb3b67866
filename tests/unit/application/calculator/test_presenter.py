"""Unit tests for ResultPresenter."""

import pytest

from calorie_calculator.application.calculator.presenter import (
    PLACEHOLDER,
    ResultPresenter,
    format_kcal,
)
from calorie_calculator.domain.metabolism import EstimateResult, GoalBands


class TestResultPresenter:
    """Test display strings."""

    def setup_method(self):
        """Set up test fixtures."""
        self.presenter = ResultPresenter()

    def test_full_result(self):
        """Test every tile is rendered."""
        view = self.presenter.present(
            EstimateResult(
                bmr=1659,
                tdee=1991,
                bmi=22.9,
                goals=GoalBands(maintain=1991, cut=1692, gain=2290),
            )
        )

        assert view.bmr == "1659 kcal/day"
        assert view.tdee == "1991 kcal/day"
        assert view.maintain == "1991 kcal/day"
        assert view.cut == "1692 kcal/day"
        assert view.gain == "2290 kcal/day"
        assert view.bmi == "22.9"
        assert view.bmi_category == "Normal"
        assert view.bmi_gauge == pytest.approx((22.9 - 12) / 28)

    def test_unavailable_result(self):
        """Test placeholders for an empty form."""
        view = self.presenter.present(EstimateResult.unavailable())

        assert view.bmr == PLACEHOLDER
        assert view.tdee == PLACEHOLDER
        assert view.maintain == PLACEHOLDER
        assert view.cut == PLACEHOLDER
        assert view.gain == PLACEHOLDER
        assert view.bmi == PLACEHOLDER
        assert view.bmi_category == PLACEHOLDER
        assert view.bmi_gauge is None

    def test_bmi_only(self):
        """Test BMI shows while energy values are pending."""
        view = self.presenter.present(EstimateResult(bmi=22.0))

        assert view.bmr == PLACEHOLDER
        assert view.bmi == "22.0"
        assert view.bmi_category == "Normal"

    def test_note_present(self):
        """Test estimate disclaimer is included."""
        view = self.presenter.present(EstimateResult.unavailable())

        assert view.note.startswith("Note: This is an estimate.")


def test_format_kcal():
    """Test kcal formatting."""
    assert format_kcal(2046) == "2046 kcal/day"
    assert format_kcal(0) == PLACEHOLDER
