from __future__ import annotations

from datetime import date, time

import pytest

from src.hr_attendance.hr_attendance.attendance.classifier import AttendanceStatusClassifier
from src.hr_attendance.hr_attendance.attendance.service import AttendanceSuggestionService
from src.hr_attendance.hr_attendance.attendance.thresholds import ClassifierThresholds
from src.hr_attendance.hr_attendance.core.enums import ShiftType, ThresholdProfile
from src.hr_attendance.hr_attendance.shifts.model import ShiftSchedule


@pytest.fixture
def shift_date() -> date:
    return date(2026, 2, 2)


@pytest.fixture
def morning_schedule() -> ShiftSchedule:
    return ShiftSchedule(
        shift_type=ShiftType.MORNING,
        scheduled_time_in=time(8, 0),
        scheduled_time_out=time(17, 0),
        grace_period_minutes=15,
    )


@pytest.fixture
def night_schedule() -> ShiftSchedule:
    return ShiftSchedule(
        shift_type=ShiftType.NIGHT,
        scheduled_time_in=time(22, 0),
        scheduled_time_out=time(7, 0),
        grace_period_minutes=15,
    )


@pytest.fixture
def utility_schedule() -> ShiftSchedule:
    return ShiftSchedule(
        shift_type=ShiftType.UTILITY_24H,
        scheduled_time_in=time(6, 0),
        scheduled_time_out=time(18, 0),
    )


@pytest.fixture
def classifier() -> AttendanceStatusClassifier:
    return AttendanceStatusClassifier(ClassifierThresholds.for_profile(ThresholdProfile.STRICT))


@pytest.fixture
def lenient_classifier() -> AttendanceStatusClassifier:
    return AttendanceStatusClassifier(ClassifierThresholds.for_profile(ThresholdProfile.LENIENT))


@pytest.fixture
def service(classifier) -> AttendanceSuggestionService:
    return AttendanceSuggestionService(classifier)


@pytest.fixture
def app():
    from src.hr_attendance.hr_attendance.main import create_app

    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
