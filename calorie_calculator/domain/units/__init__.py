"""Unit normalization: metric / imperial input to canonical kg and cm."""

from .conversions import (
    CM_PER_INCH,
    KG_PER_LB,
    cm_to_ft_in,
    ft_in_to_cm,
    kg_to_lb,
    lb_to_kg,
    parse_number,
)
from .normalizer import UnitNormalizer, normalize
from .value_objects import Measurement, UnitSystem

__all__ = [
    "UnitSystem",
    "Measurement",
    "UnitNormalizer",
    "normalize",
    "parse_number",
    "kg_to_lb",
    "lb_to_kg",
    "cm_to_ft_in",
    "ft_in_to_cm",
    "KG_PER_LB",
    "CM_PER_INCH",
]
