"""Calculator form application services."""

from .form import CalculatorFormInput
from .orchestrator import CalculatorOrchestrator, CalculatorSnapshot
from .presenter import PLACEHOLDER, ResultPresenter, ResultView

__all__ = [
    "CalculatorFormInput",
    "CalculatorOrchestrator",
    "CalculatorSnapshot",
    "ResultPresenter",
    "ResultView",
    "PLACEHOLDER",
]
