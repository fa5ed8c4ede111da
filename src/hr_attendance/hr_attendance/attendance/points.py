from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import AttendanceStatus

# Attendance-point weight carried by each violation status.
POINT_VALUES: dict[AttendanceStatus, float] = {
    AttendanceStatus.WHOLE_DAY_ABSENCE: 1.00,
    AttendanceStatus.NCNS: 1.00,
    AttendanceStatus.HALF_DAY_ABSENCE: 0.50,
    AttendanceStatus.UNDERTIME_MORE_THAN_HOUR: 0.50,
    AttendanceStatus.UNDERTIME: 0.25,
    AttendanceStatus.TARDY: 0.25,
    AttendanceStatus.FAILED_BIO_IN: 0.25,
    AttendanceStatus.FAILED_BIO_OUT: 0.25,
}


def point_value(status: Optional[AttendanceStatus]) -> float:
    if status is None:
        return 0.0
    return POINT_VALUES.get(status, 0.0)


def total_points(statuses: Iterable[AttendanceStatus]) -> float:
    return sum(point_value(s) for s in statuses)
