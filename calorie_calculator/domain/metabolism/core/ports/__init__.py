"""Ports for the metabolic estimation domain."""

from .calculators import (
    IBMICalculator,
    IBMRCalculator,
    IGoalCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IBMICalculator",
    "IGoalCalculator",
]
