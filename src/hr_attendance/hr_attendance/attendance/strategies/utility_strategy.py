from __future__ import annotations

from dataclasses import replace

from ...common.datetime_utils import minutes_between
from ...core.constants import UTILITY_MIN_WORKED_HOURS
from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftSchedule
from ..model import AttendanceObservation, ClassificationResult
from ..thresholds import ClassifierThresholds
from .base import ClassificationStrategy
from .standard_strategy import StandardShiftStrategy


class UtilityShiftStrategy(ClassificationStrategy):
    """24h utility staff: judged on hours worked, not on tardy/undertime."""

    def __init__(self, fallback: ClassificationStrategy | None = None):
        self._fallback = fallback or StandardShiftStrategy()

    def classify(
        self,
        *,
        schedule: ShiftSchedule,
        observation: AttendanceObservation,
        thresholds: ClassifierThresholds,
    ) -> ClassificationResult:
        if observation.time_out is None:
            # Hours worked are unknown: keep the schedule-relative status, minutes are not tracked.
            result = self._fallback.classify(schedule=schedule, observation=observation, thresholds=thresholds)
            return replace(result, tardy_minutes=0, undertime_minutes=0, overtime_minutes=0)

        worked_minutes = minutes_between(observation.time_in.instant, observation.time_out.instant)
        hours = int(worked_minutes // 60)

        if hours >= UTILITY_MIN_WORKED_HOURS:
            return ClassificationResult(status=AttendanceStatus.ON_TIME, reason="24H utility shift completed")

        return ClassificationResult(
            status=AttendanceStatus.UNDERTIME,
            reason=f"24H utility shift: worked {hours} hours",
            violations=(AttendanceStatus.UNDERTIME,),
            warnings=(f"24H UTILITY: Only {hours:.1f} hours worked (minimum {UTILITY_MIN_WORKED_HOURS} hours expected).",),
        )
