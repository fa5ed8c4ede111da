from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus, ThresholdProfile
from ..shifts.model import ShiftSchedule
from .factory import ClassificationStrategyFactory
from .model import AttendanceObservation, ClassificationResult
from .thresholds import ClassifierThresholds, PROFILES


class AttendanceStatusClassifier:
    """Suggest an attendance status from a schedule and recorded times.

    Pure and stateless: missing input yields an empty result (status None)
    with an explanatory reason instead of raising, since a manual status can
    always be selected upstream. Safe to call per keystroke and per row.
    """

    def __init__(
        self,
        thresholds: ClassifierThresholds | None = None,
        *,
        strategy_factory: ClassificationStrategyFactory | None = None,
    ):
        self._thresholds = thresholds or PROFILES[ThresholdProfile.STRICT]
        self._factory = strategy_factory or ClassificationStrategyFactory()

    def classify(
        self,
        schedule: Optional[ShiftSchedule],
        observation: AttendanceObservation,
    ) -> ClassificationResult:
        if schedule is None:
            return ClassificationResult.empty("No schedule found")

        if observation.time_in is None and observation.time_out is None:
            return ClassificationResult.empty("No times provided")

        if observation.time_in is None:
            return ClassificationResult(
                status=AttendanceStatus.FAILED_BIO_IN,
                reason="Missing time in record",
                violations=(AttendanceStatus.FAILED_BIO_IN,),
                is_partial=True,
            )

        strategy = self._factory.for_schedule(schedule)
        return strategy.classify(schedule=schedule, observation=observation, thresholds=self._thresholds)
