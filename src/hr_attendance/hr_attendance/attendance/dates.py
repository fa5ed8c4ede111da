from __future__ import annotations

from datetime import date, time, timedelta
from typing import Optional

from ..core.constants import (
    OVERNIGHT_TIME_IN_MIN_HOUR,
    OVERNIGHT_TIME_OUT_MAX_HOUR,
    UNSCHEDULED_TIME_IN_MIN_HOUR,
    UNSCHEDULED_TIME_OUT_MAX_HOUR,
)
from ..shifts.model import ShiftSchedule


def infer_time_out_date(
    schedule: Optional[ShiftSchedule],
    shift_date: date,
    time_in: Optional[time],
    time_out: Optional[time],
) -> date:
    """Guess the calendar date of a time-out entered without one.

    Morning time-outs after an evening time-in roll over to the next day:
    for overnight schedules when out is 00-14h and in is 14h or later, and
    without a schedule when out is 00-12h and in is 18h or later.
    """
    if time_out is None:
        return shift_date

    in_hour = time_in.hour if time_in else 0
    out_hour = time_out.hour

    if schedule is not None:
        next_day = (
            schedule.is_overnight
            and out_hour <= OVERNIGHT_TIME_OUT_MAX_HOUR
            and in_hour >= OVERNIGHT_TIME_IN_MIN_HOUR
        )
    else:
        next_day = out_hour <= UNSCHEDULED_TIME_OUT_MAX_HOUR and in_hour >= UNSCHEDULED_TIME_IN_MIN_HOUR

    return shift_date + timedelta(days=1) if next_day else shift_date
