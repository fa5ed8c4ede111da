from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import (
    format_instant,
    parse_iso_date,
    parse_optional_date,
    parse_optional_time,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..shifts.model import ShiftSchedule
from .classifier import AttendanceStatusClassifier
from .dates import infer_time_out_date
from .model import AttendanceObservation, ClassificationResult, RecordedTime, StatusSuggestion

logger = logging.getLogger(__name__)


STATUS_LABELS: dict[AttendanceStatus, tuple[str, str]] = {
    AttendanceStatus.ON_TIME: ("On Time", "bg-green-500"),
    AttendanceStatus.TARDY: ("Tardy", "bg-yellow-500"),
    AttendanceStatus.HALF_DAY_ABSENCE: ("Half Day", "bg-orange-500"),
    AttendanceStatus.ADVISED_ABSENCE: ("Advised Absence", "bg-blue-500"),
    AttendanceStatus.ON_LEAVE: ("On Leave", "bg-blue-600"),
    AttendanceStatus.NCNS: ("NCNS", "bg-red-500"),
    AttendanceStatus.WHOLE_DAY_ABSENCE: ("Whole Day Absence", "bg-red-600"),
    AttendanceStatus.UNDERTIME: ("Undertime", "bg-orange-400"),
    AttendanceStatus.UNDERTIME_MORE_THAN_HOUR: ("UT >1hr", "bg-orange-600"),
    AttendanceStatus.FAILED_BIO_IN: ("Failed Bio In", "bg-purple-500"),
    AttendanceStatus.FAILED_BIO_OUT: ("Failed Bio Out", "bg-purple-500"),
    AttendanceStatus.NEEDS_MANUAL_REVIEW: ("Needs Review", "bg-amber-500"),
    AttendanceStatus.PRESENT_NO_BIO: ("Present (No Bio)", "bg-gray-500"),
    AttendanceStatus.NON_WORK_DAY: ("Non-Work Day", "bg-slate-500"),
}


@dataclass(frozen=True)
class BulkEntry:
    user_id: int
    schedule: Optional[ShiftSchedule]
    observation: AttendanceObservation


@dataclass(frozen=True)
class BulkSuggestion:
    user_id: int
    observation: AttendanceObservation
    result: ClassificationResult


class AttendanceSuggestionService:
    """Status suggestions for the manual and bulk attendance entry forms."""

    def __init__(self, classifier: AttendanceStatusClassifier, *, default_grace_minutes: int = 15):
        self._classifier = classifier
        self._default_grace_minutes = int(default_grace_minutes)

    def parse_schedule(self, data: Optional[Mapping]) -> Optional[ShiftSchedule]:
        if not data:
            return None
        return ShiftSchedule.from_dict(data, default_grace_minutes=self._default_grace_minutes)

    def observation_from_fields(
        self,
        *,
        schedule: Optional[ShiftSchedule],
        shift_date: str,
        time_in_date: Optional[str] = None,
        time_in_time: Optional[str] = None,
        time_out_date: Optional[str] = None,
        time_out_time: Optional[str] = None,
    ) -> AttendanceObservation:
        """Build an observation from raw form fields.

        The time-in date defaults to the shift date; a time-out entered
        without a date gets the next day when the shift crosses midnight.
        """
        shift_day = parse_iso_date(shift_date)
        in_time = parse_optional_time(time_in_time)
        out_time = parse_optional_time(time_out_time)

        time_in = None
        if in_time is not None:
            time_in = RecordedTime(date=parse_optional_date(time_in_date) or shift_day, time=in_time)

        time_out = None
        if out_time is not None:
            out_day = parse_optional_date(time_out_date) or infer_time_out_date(schedule, shift_day, in_time, out_time)
            time_out = RecordedTime(date=out_day, time=out_time)

        if time_in and time_out and time_out.instant < time_in.instant:
            raise ValidationError("Time out must be after time in")

        return AttendanceObservation(shift_date=shift_day, time_in=time_in, time_out=time_out)

    def suggest(self, schedule: Optional[ShiftSchedule], observation: AttendanceObservation) -> ClassificationResult:
        return self._classifier.classify(schedule, observation)

    def suggest_bulk(self, entries: Sequence[BulkEntry]) -> list[BulkSuggestion]:
        suggestions = [
            BulkSuggestion(
                user_id=e.user_id,
                observation=e.observation,
                result=self._classifier.classify(e.schedule, e.observation),
            )
            for e in entries
        ]
        logger.debug(
            "bulk suggestion: %d employees, %d without suggestion",
            len(suggestions),
            sum(1 for s in suggestions if s.result.is_empty),
        )
        return suggestions

    def resolve(self, result: ClassificationResult, user_status: Optional[str] = None) -> StatusSuggestion:
        return StatusSuggestion(suggested=result, user_override=self.parse_status(user_status))

    @staticmethod
    def parse_status(value: Optional[str]) -> Optional[AttendanceStatus]:
        if value is None or not str(value).strip():
            return None
        try:
            return AttendanceStatus(str(value).strip())
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {value!r}")

    def build_payload(
        self,
        *,
        user_id: int,
        observation: AttendanceObservation,
        suggestion: StatusSuggestion,
        notes: Optional[str] = None,
    ) -> dict:
        """Request body for the attendance API's create endpoint."""

        status = suggestion.effective_status
        if status is None:
            raise ValidationError(f"Select a status: {suggestion.suggested.reason}")

        secondary = suggestion.effective_secondary_status
        return {
            "user_id": int(user_id),
            "shift_date": observation.shift_date.strftime("%Y-%m-%d"),
            "actual_time_in": format_instant(observation.time_in.instant if observation.time_in else None),
            "actual_time_out": format_instant(observation.time_out.instant if observation.time_out else None),
            "status": status.value,
            "secondary_status": secondary.value if secondary else None,
            "undertime_minutes": 0 if suggestion.is_overridden else suggestion.suggested.undertime_minutes,
            "notes": notes.strip() if notes and notes.strip() else None,
        }

    @staticmethod
    def status_catalog() -> list[dict]:
        return [
            {"value": status.value, "label": label, "css_class": css}
            for status, (label, css) in STATUS_LABELS.items()
        ]
