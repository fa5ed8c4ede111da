from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Mapping

from ..common.datetime_utils import parse_time_of_day
from ..common.validators import require_int_range
from ..core.constants import DEFAULT_GRACE_PERIOD_MINUTES, MAX_GRACE_PERIOD_MINUTES
from ..core.enums import ShiftType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftSchedule:
    """Employee shift schedule (read-only input to the classifier).

    For night/graveyard shifts the scheduled time out is earlier than the
    scheduled time in and falls on the following calendar day.
    """

    shift_type: ShiftType
    scheduled_time_in: time
    scheduled_time_out: time
    grace_period_minutes: int = DEFAULT_GRACE_PERIOD_MINUTES

    @property
    def is_overnight(self) -> bool:
        return (
            self.shift_type == ShiftType.NIGHT
            or self.scheduled_time_out.hour < self.scheduled_time_in.hour
        )

    @property
    def is_utility(self) -> bool:
        return self.shift_type == ShiftType.UTILITY_24H

    @classmethod
    def from_dict(cls, data: Mapping, *, default_grace_minutes: int = DEFAULT_GRACE_PERIOD_MINUTES) -> "ShiftSchedule":
        if not isinstance(data, Mapping):
            raise ValidationError("schedule must be an object")

        try:
            shift_type = ShiftType(str(data.get("shift_type") or "").strip())
        except ValueError:
            raise ValidationError(f"Unknown shift type: {data.get('shift_type')!r}")

        grace = data.get("grace_period_minutes")
        grace_minutes = (
            default_grace_minutes
            if grace is None or grace == ""
            else require_int_range(grace, "grace_period_minutes", min_value=0, max_value=MAX_GRACE_PERIOD_MINUTES)
        )

        return cls(
            shift_type=shift_type,
            scheduled_time_in=parse_time_of_day(data.get("scheduled_time_in")),
            scheduled_time_out=parse_time_of_day(data.get("scheduled_time_out")),
            grace_period_minutes=grace_minutes,
        )

    def to_dict(self) -> dict:
        return {
            "shift_type": self.shift_type.value,
            "scheduled_time_in": self.scheduled_time_in.strftime("%H:%M"),
            "scheduled_time_out": self.scheduled_time_out.strftime("%H:%M"),
            "grace_period_minutes": self.grace_period_minutes,
            "is_overnight": self.is_overnight,
            "shift_band": detect_shift_type(self.scheduled_time_in),
        }


def detect_shift_type(time_in: time) -> str:
    """Label a shift by its scheduled start hour.

    Display helper only: 05-11 morning, 12-17 afternoon, 18-21 evening,
    22-23 night, 00-04 graveyard.
    """
    hour = time_in.hour
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 18:
        return "afternoon"
    if 18 <= hour < 22:
        return "evening"
    if hour >= 22:
        return "night"
    return "graveyard"
