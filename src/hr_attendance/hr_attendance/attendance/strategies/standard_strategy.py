from __future__ import annotations

from datetime import timedelta

from ...common.datetime_utils import combine, minutes_between
from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftSchedule
from ..model import AttendanceObservation, ClassificationResult
from ..thresholds import ClassifierThresholds
from .base import ClassificationStrategy


class StandardShiftStrategy(ClassificationStrategy):
    """Schedule-relative tardy/undertime classification.

    Resolution order (highest first):
    - no time out: half day, tardy (both + failed_bio_out) or failed_bio_out
    - half day (+ undertime), tardy (+ undertime), undertime alone
    - on time
    """

    def classify(
        self,
        *,
        schedule: ShiftSchedule,
        observation: AttendanceObservation,
        thresholds: ClassifierThresholds,
    ) -> ClassificationResult:
        grace = schedule.grace_period_minutes

        scheduled_in = combine(observation.shift_date, schedule.scheduled_time_in)
        out_date = observation.shift_date + timedelta(days=1) if schedule.is_overnight else observation.shift_date
        scheduled_out = combine(out_date, schedule.scheduled_time_out)

        tardy_minutes = max(0.0, minutes_between(scheduled_in, observation.time_in.instant))
        is_half_day = tardy_minutes > grace
        is_tardy = not is_half_day and tardy_minutes > 0 and tardy_minutes >= thresholds.tardy_threshold_minutes
        tardy = round(tardy_minutes)

        has_time_out = observation.time_out is not None
        undertime_minutes = 0
        overtime_minutes = 0
        undertime_status = None
        if has_time_out:
            early_minutes = minutes_between(observation.time_out.instant, scheduled_out)
            if early_minutes > 0 and early_minutes >= thresholds.undertime_threshold_minutes:
                undertime_minutes = round(early_minutes)
                undertime_status = (
                    AttendanceStatus.UNDERTIME_MORE_THAN_HOUR
                    if undertime_minutes > thresholds.undertime_hour_minutes
                    else AttendanceStatus.UNDERTIME
                )
            elif -early_minutes > thresholds.overtime_threshold_minutes:
                overtime_minutes = round(-early_minutes)

        violations = []
        if is_half_day:
            violations.append(AttendanceStatus.HALF_DAY_ABSENCE)
        if is_tardy:
            violations.append(AttendanceStatus.TARDY)
        if undertime_status:
            violations.append(undertime_status)
        if not has_time_out:
            violations.append(AttendanceStatus.FAILED_BIO_OUT)

        secondary = None
        if not has_time_out:
            if is_half_day:
                status = AttendanceStatus.HALF_DAY_ABSENCE
                secondary = AttendanceStatus.FAILED_BIO_OUT
                reason = f"Arrived {tardy} minutes late (more than {grace}min grace period), missing time out"
            elif is_tardy:
                status = AttendanceStatus.TARDY
                secondary = AttendanceStatus.FAILED_BIO_OUT
                reason = f"Arrived {tardy} minutes late, missing time out"
            else:
                status = AttendanceStatus.FAILED_BIO_OUT
                reason = "Missing time out record"
        elif is_half_day and undertime_status:
            status = AttendanceStatus.HALF_DAY_ABSENCE
            secondary = undertime_status
            reason = f"Arrived {tardy} minutes late AND left {undertime_minutes} minutes early"
        elif is_half_day:
            status = AttendanceStatus.HALF_DAY_ABSENCE
            reason = f"Arrived {tardy} minutes late (more than {grace}min grace period)"
        elif is_tardy and undertime_status:
            status = AttendanceStatus.TARDY
            secondary = undertime_status
            reason = f"Arrived {tardy} minutes late AND left {undertime_minutes} minutes early"
        elif is_tardy:
            status = AttendanceStatus.TARDY
            reason = f"Arrived {tardy} minutes late"
        elif undertime_status:
            status = undertime_status
            reason = f"Left {undertime_minutes} minutes early"
        else:
            status = AttendanceStatus.ON_TIME
            reason = "Arrived on time"

        return ClassificationResult(
            status=status,
            secondary_status=secondary,
            reason=reason,
            undertime_minutes=undertime_minutes,
            tardy_minutes=tardy if (is_half_day or is_tardy) else 0,
            overtime_minutes=overtime_minutes,
            violations=tuple(violations),
            is_partial=not has_time_out,
        )
