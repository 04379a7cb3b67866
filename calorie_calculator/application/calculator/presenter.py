"""ResultPresenter - display strings for an EstimateResult."""

from dataclasses import dataclass
from typing import Optional

from ...domain.metabolism.core.value_objects.bmi_category import bmi_gauge_position
from ...domain.metabolism.core.value_objects.estimate_result import EstimateResult

PLACEHOLDER = "—"
ESTIMATE_NOTE = (
    "Note: This is an estimate. Individual needs vary due to metabolism, "
    "body composition, and other factors."
)


@dataclass(frozen=True)
class ResultView:
    """Rendered result tiles; unavailable values show the placeholder."""

    bmr: str
    tdee: str
    maintain: str
    cut: str
    gain: str
    bmi: str
    bmi_category: str
    bmi_gauge: Optional[float]
    note: str = ESTIMATE_NOTE


def format_kcal(value: int) -> str:
    """'1659 kcal/day', or the placeholder for 0."""
    return f"{value} kcal/day" if value > 0 else PLACEHOLDER


class ResultPresenter:
    """Turns an EstimateResult into strings a view can show as-is."""

    def present(self, result: EstimateResult) -> ResultView:
        goals = result.goals
        category = result.bmi_category
        return ResultView(
            bmr=format_kcal(result.bmr),
            tdee=format_kcal(result.tdee),
            maintain=format_kcal(goals.maintain) if goals else PLACEHOLDER,
            cut=format_kcal(goals.cut) if goals else PLACEHOLDER,
            gain=format_kcal(goals.gain) if goals else PLACEHOLDER,
            bmi=f"{result.bmi:.1f}" if result.has_bmi else PLACEHOLDER,
            bmi_category=category.label() if category else PLACEHOLDER,
            bmi_gauge=bmi_gauge_position(result.bmi),
        )
