"""CalculatorFormInput - raw snapshot of the calculator form."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.metabolism.core.value_objects.activity_level import ActivityLevel
from ...domain.metabolism.core.value_objects.subject import (
    MAX_AGE_YEARS,
    BiologicalSex,
    Subject,
)
from ...domain.units.conversions import (
    cm_to_ft_in,
    format_display_number,
    parse_number,
    reexpress_ft_in_as_cm,
    reexpress_kg_as_lb,
    reexpress_lb_as_kg,
)
from ...domain.units.normalizer import UnitNormalizer
from ...domain.units.value_objects import Measurement, UnitSystem
from ...infrastructure.config import (
    get_default_activity_level,
    get_default_unit_system,
)

RawField = Union[str, int, float, None]


class CalculatorFormInput(BaseModel):
    """
    Raw field values as the user entered them.

    Numeric fields are kept raw (possibly empty or non-numeric); they are
    only interpreted when projected onto the domain. Selection fields are
    parsed with the domain key parsers, so an unknown key fails
    validation.

    Default unit system and activity come from CALCULATOR_DEFAULT_* in the
    process environment. A .env file only contributes to those defaults
    once the caller has run ``infrastructure.config.load_environment()``.

    Example:
        >>> form = CalculatorFormInput(age="28", weight="70", height_cm="175")
        >>> form.to_measurement().mass_kg
        70.0
    """

    model_config = ConfigDict(frozen=True)

    unit_system: UnitSystem = Field(default_factory=get_default_unit_system)
    sex: BiologicalSex = BiologicalSex.MALE
    age: RawField = ""
    weight: RawField = ""
    height_cm: RawField = ""
    height_ft: RawField = ""
    height_in: RawField = ""
    activity: ActivityLevel = Field(default_factory=get_default_activity_level)

    @field_validator("unit_system", mode="before")
    @classmethod
    def parse_unit_system(cls, v: Any) -> UnitSystem:
        return UnitSystem.from_key(v)

    @field_validator("sex", mode="before")
    @classmethod
    def parse_sex(cls, v: Any) -> BiologicalSex:
        return BiologicalSex.from_key(v)

    @field_validator("activity", mode="before")
    @classmethod
    def parse_activity(cls, v: Any) -> ActivityLevel:
        return ActivityLevel.from_key(v)

    def with_changes(self, **changes: Any) -> CalculatorFormInput:
        """Return a validated copy with some fields replaced."""
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_unit_system(self, target: Union[UnitSystem, str]) -> CalculatorFormInput:
        """
        Switch unit system, carrying entered values across.

        Filled weight and height fields are re-expressed in the target
        system (rounded for display) instead of being cleared. Fields with
        no usable value become empty.

        Args:
            target: Unit system to switch to

        Returns:
            New form snapshot in the target unit system
        """
        target = UnitSystem.from_key(target)
        if target is self.unit_system:
            return self

        if target is UnitSystem.IMPERIAL:
            changes = self._metric_to_imperial()
        else:
            changes = self._imperial_to_metric()
        return self.with_changes(unit_system=target, **changes)

    def _metric_to_imperial(self) -> dict[str, str]:
        kg = parse_number(self.weight)
        cm = parse_number(self.height_cm)
        changes = {"weight": format_display_number(reexpress_kg_as_lb(kg) if kg > 0 else None)}
        if cm > 0:
            feet, inches = cm_to_ft_in(cm)
            changes.update(height_ft=str(feet), height_in=format_display_number(inches))
        else:
            changes.update(height_ft="", height_in="")
        return changes

    def _imperial_to_metric(self) -> dict[str, str]:
        lb = parse_number(self.weight)
        feet = parse_number(self.height_ft)
        inches = parse_number(self.height_in)
        cm = reexpress_ft_in_as_cm(feet, inches) if feet > 0 or inches > 0 else None
        return {
            "weight": format_display_number(reexpress_lb_as_kg(lb) if lb > 0 else None),
            "height_cm": format_display_number(cm if cm and cm > 0 else None),
        }

    def height_fields(self) -> tuple[RawField, RawField]:
        """(primary, secondary) height fields for the active unit system."""
        if self.unit_system is UnitSystem.METRIC:
            return self.height_cm, None
        return self.height_ft, self.height_in

    def to_measurement(self, normalizer: Optional[UnitNormalizer] = None) -> Measurement:
        """Project onto the canonical measurement."""
        normalizer = normalizer or UnitNormalizer()
        primary, secondary = self.height_fields()
        return normalizer.normalize(self.unit_system, self.weight, primary, secondary)

    def to_subject(self) -> Subject:
        """Project onto the subject.

        Fractional ages are truncated; ages outside 1-150 years leave the
        subject incomplete.
        """
        age = parse_number(self.age)
        age_years = int(age) if 0 < age <= MAX_AGE_YEARS else 0
        return Subject(biological_sex=self.sex, age_years=age_years)
