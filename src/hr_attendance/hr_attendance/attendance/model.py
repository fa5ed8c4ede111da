from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import combine
from ..core.enums import AttendanceStatus
from .points import total_points


@dataclass(frozen=True)
class RecordedTime:
    """A biometric or manually entered timestamp (local wall clock)."""

    date: date
    time: time

    @property
    def instant(self) -> datetime:
        return combine(self.date, self.time)


@dataclass(frozen=True)
class AttendanceObservation:
    shift_date: date
    time_in: Optional[RecordedTime] = None
    time_out: Optional[RecordedTime] = None


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of the status classifier.

    `status` is None when no suggestion is possible (no schedule, no times);
    the caller then requires a manual selection.
    """

    status: Optional[AttendanceStatus]
    reason: str
    secondary_status: Optional[AttendanceStatus] = None
    undertime_minutes: int = 0
    tardy_minutes: int = 0
    overtime_minutes: int = 0
    violations: tuple[AttendanceStatus, ...] = ()
    is_partial: bool = False
    warnings: tuple[str, ...] = ()

    @classmethod
    def empty(cls, reason: str) -> "ClassificationResult":
        return cls(status=None, reason=reason)

    @property
    def is_empty(self) -> bool:
        return self.status is None

    @property
    def points(self) -> float:
        return total_points(self.violations)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value if self.status else None,
            "secondary_status": self.secondary_status.value if self.secondary_status else None,
            "reason": self.reason,
            "undertime_minutes": self.undertime_minutes,
            "tardy_minutes": self.tardy_minutes,
            "overtime_minutes": self.overtime_minutes,
            "violations": [v.value for v in self.violations],
            "is_partial": self.is_partial,
            "points": self.points,
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class StatusSuggestion:
    """Auto-suggested result paired with the user's manual selection, if any."""

    suggested: ClassificationResult
    user_override: Optional[AttendanceStatus] = None

    @property
    def is_overridden(self) -> bool:
        return self.user_override is not None and self.user_override != self.suggested.status

    @property
    def effective_status(self) -> Optional[AttendanceStatus]:
        return self.user_override if self.is_overridden else self.suggested.status

    @property
    def effective_secondary_status(self) -> Optional[AttendanceStatus]:
        # A manual primary status drops the suggested secondary one.
        return None if self.is_overridden else self.suggested.secondary_status

    def with_override(self, status: Optional[AttendanceStatus]) -> "StatusSuggestion":
        return replace(self, user_override=status)

    def reset(self) -> "StatusSuggestion":
        return replace(self, user_override=None)
