"""Value objects for the metabolic estimation domain."""

from .activity_level import ActivityLevel
from .bmi_category import BMICategory, bmi_gauge_position
from .estimate_result import EstimateResult, GoalBands
from .subject import BiologicalSex, Subject

__all__ = [
    "ActivityLevel",
    "BiologicalSex",
    "Subject",
    "BMICategory",
    "bmi_gauge_position",
    "GoalBands",
    "EstimateResult",
]
