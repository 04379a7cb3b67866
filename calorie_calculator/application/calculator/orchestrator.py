"""CalculatorOrchestrator - recomputes the estimate from the form."""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from ...domain.metabolism.core.value_objects.estimate_result import EstimateResult
from ...domain.metabolism.core.value_objects.subject import Subject
from ...domain.metabolism.estimator import MetabolicEstimator
from ...domain.units.normalizer import UnitNormalizer
from ...domain.units.value_objects import Measurement, UnitSystem
from .form import CalculatorFormInput

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalculatorSnapshot:
    """Form snapshot together with everything derived from it."""

    form: CalculatorFormInput
    measurement: Measurement
    subject: Subject
    result: EstimateResult


class CalculatorOrchestrator:
    """
    Runs normalize then estimate for a form snapshot.

    Flow:
    1. Normalize weight and height fields to kg / cm
    2. Project age and sex onto a Subject
    3. Estimate BMR, TDEE, BMI and goal bands

    Every call recomputes from scratch; there is no cached state, so it
    is safe to call on every field change.
    """

    def __init__(
        self,
        normalizer: Optional[UnitNormalizer] = None,
        estimator: Optional[MetabolicEstimator] = None,
    ):
        self._normalizer = normalizer or UnitNormalizer()
        self._estimator = estimator or MetabolicEstimator()

    def recalculate(self, form: CalculatorFormInput) -> CalculatorSnapshot:
        """
        Recalculate all derived values.

        Args:
            form: Current raw form snapshot

        Returns:
            CalculatorSnapshot with measurement, subject and result
        """
        measurement = form.to_measurement(self._normalizer)
        subject = form.to_subject()
        result = self._estimator.estimate(measurement, subject, form.activity)

        logger.debug(
            "calculator_recalculated",
            unit_system=form.unit_system.value,
            activity=form.activity.value,
            measurement_complete=measurement.is_complete,
            subject_complete=subject.is_complete,
            bmr=result.bmr,
            tdee=result.tdee,
            bmi=result.bmi,
        )

        return CalculatorSnapshot(
            form=form,
            measurement=measurement,
            subject=subject,
            result=result,
        )

    def switch_unit_system(
        self, form: CalculatorFormInput, target: Union[UnitSystem, str]
    ) -> CalculatorSnapshot:
        """Switch unit system and recalculate.

        Re-expressed values are rounded for display, so the result can
        differ slightly from the pre-switch result.
        """
        switched = form.with_unit_system(target)
        if switched is not form:
            logger.info(
                "calculator_unit_system_switched",
                source=form.unit_system.value,
                target=switched.unit_system.value,
            )
        return self.recalculate(switched)
