from __future__ import annotations

from enum import Enum


class ShiftType(str, Enum):
    """Shift types accepted by the employee schedule form."""

    MORNING = "morning_shift"
    AFTERNOON = "afternoon_shift"
    NIGHT = "night_shift"
    GRAVEYARD = "graveyard_shift"
    UTILITY_24H = "utility_24h"


class AttendanceStatus(str, Enum):
    """Attendance statuses as stored by the attendance API."""

    ON_TIME = "on_time"
    TARDY = "tardy"
    HALF_DAY_ABSENCE = "half_day_absence"
    UNDERTIME = "undertime"
    UNDERTIME_MORE_THAN_HOUR = "undertime_more_than_hour"
    FAILED_BIO_IN = "failed_bio_in"
    FAILED_BIO_OUT = "failed_bio_out"

    # Manual statuses, never produced by the classifier.
    ADVISED_ABSENCE = "advised_absence"
    ON_LEAVE = "on_leave"
    NCNS = "ncns"
    WHOLE_DAY_ABSENCE = "whole_day_absence"
    NEEDS_MANUAL_REVIEW = "needs_manual_review"
    PRESENT_NO_BIO = "present_no_bio"
    NON_WORK_DAY = "non_work_day"


class ThresholdProfile(str, Enum):
    """Tardy/undertime trigger sets found in the attendance forms."""

    STRICT = "strict"
    LENIENT = "lenient"
