from __future__ import annotations

from datetime import date, time, timedelta

from src.hr_attendance.hr_attendance.attendance.model import AttendanceObservation, RecordedTime
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus


def _at(day: date, hour: int, minute: int) -> RecordedTime:
    return RecordedTime(date=day, time=time(hour, minute))


def test_no_schedule_yields_empty_result_regardless_of_times(classifier, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 0),
        time_out=_at(shift_date, 17, 0),
    )

    result = classifier.classify(None, obs)

    assert result.is_empty
    assert result.status is None
    assert result.reason == "No schedule found"
    assert result.undertime_minutes == 0


def test_no_times_yields_empty_result(classifier, morning_schedule, shift_date):
    result = classifier.classify(morning_schedule, AttendanceObservation(shift_date=shift_date))

    assert result.is_empty
    assert result.reason == "No times provided"


def test_time_out_without_time_in_is_failed_bio_in(classifier, morning_schedule, night_schedule, shift_date):
    obs = AttendanceObservation(shift_date=shift_date, time_out=_at(shift_date, 12, 0))

    for schedule in (morning_schedule, night_schedule):
        result = classifier.classify(schedule, obs)
        assert result.status == AttendanceStatus.FAILED_BIO_IN
        assert result.secondary_status is None
        assert result.reason == "Missing time in record"
        assert result.is_partial


def test_same_input_gives_same_output(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 20),
        time_out=_at(shift_date, 15, 50),
    )

    assert classifier.classify(morning_schedule, obs) == classifier.classify(morning_schedule, obs)


def test_overnight_shift_within_grace_is_on_time(lenient_classifier, night_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 22, 5),
        time_out=_at(shift_date + timedelta(days=1), 7, 10),
    )

    result = lenient_classifier.classify(night_schedule, obs)

    assert result.status == AttendanceStatus.ON_TIME
    assert result.secondary_status is None
    assert result.undertime_minutes == 0


def test_overnight_shift_rolls_scheduled_out_to_next_day(classifier, night_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 22, 5),
        time_out=_at(shift_date + timedelta(days=1), 7, 10),
    )

    result = classifier.classify(night_schedule, obs)

    assert result.status == AttendanceStatus.TARDY
    assert result.secondary_status is None
    assert result.undertime_minutes == 0
    assert result.overtime_minutes == 0


def test_late_beyond_grace_without_time_out_is_half_day(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(shift_date=shift_date, time_in=_at(shift_date, 8, 16))

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.HALF_DAY_ABSENCE
    assert result.secondary_status == AttendanceStatus.FAILED_BIO_OUT
    assert result.tardy_minutes == 16
    assert "16 minutes late" in result.reason
    assert "15min grace period" in result.reason


def test_exactly_at_grace_is_tardy_not_half_day(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 15),
        time_out=_at(shift_date, 17, 0),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.TARDY


def test_tardy_only(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 5),
        time_out=_at(shift_date, 17, 0),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.TARDY
    assert result.secondary_status is None
    assert result.reason == "Arrived 5 minutes late"
    assert result.undertime_minutes == 0


def test_tardy_without_time_out(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(shift_date=shift_date, time_in=_at(shift_date, 8, 3))

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.TARDY
    assert result.secondary_status == AttendanceStatus.FAILED_BIO_OUT
    assert result.reason == "Arrived 3 minutes late, missing time out"


def test_on_time_without_time_out_is_failed_bio_out(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(shift_date=shift_date, time_in=_at(shift_date, 7, 50))

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.FAILED_BIO_OUT
    assert result.secondary_status is None
    assert result.reason == "Missing time out record"
    assert result.is_partial


def test_early_arrival_full_day_is_on_time(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 7, 30),
        time_out=_at(shift_date, 17, 5),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.ON_TIME
    assert result.reason == "Arrived on time"
    assert result.tardy_minutes == 0
    assert result.violations == ()
    assert result.points == 0


def test_undertime_boundary_at_sixty_minutes(classifier, morning_schedule, shift_date):
    left_60 = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 0),
        time_out=_at(shift_date, 16, 0),
    )
    left_61 = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 0),
        time_out=_at(shift_date, 15, 59),
    )

    r60 = classifier.classify(morning_schedule, left_60)
    r61 = classifier.classify(morning_schedule, left_61)

    assert r60.status == AttendanceStatus.UNDERTIME
    assert r60.undertime_minutes == 60
    assert r60.reason == "Left 60 minutes early"
    assert r61.status == AttendanceStatus.UNDERTIME_MORE_THAN_HOUR
    assert r61.undertime_minutes == 61


def test_tardy_and_undertime_combined(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 10),
        time_out=_at(shift_date, 16, 30),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.TARDY
    assert result.secondary_status == AttendanceStatus.UNDERTIME
    assert result.reason == "Arrived 10 minutes late AND left 30 minutes early"


def test_half_day_and_undertime_more_than_hour(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 20),
        time_out=_at(shift_date, 15, 50),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.HALF_DAY_ABSENCE
    assert result.secondary_status == AttendanceStatus.UNDERTIME_MORE_THAN_HOUR
    assert "20 minutes late" in result.reason
    assert "70 minutes early" in result.reason
    assert result.undertime_minutes == 70
    assert result.points == 1.0


def test_half_day_with_full_time_out(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 9, 0),
        time_out=_at(shift_date, 17, 0),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.HALF_DAY_ABSENCE
    assert result.secondary_status is None
    assert result.reason == "Arrived 60 minutes late (more than 15min grace period)"


def test_late_departure_reports_overtime_without_changing_status(classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 0),
        time_out=_at(shift_date, 18, 30),
    )

    result = classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.ON_TIME
    assert result.overtime_minutes == 90


def test_lenient_profile_ignores_small_deviations(lenient_classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 5),
        time_out=_at(shift_date, 16, 1),
    )

    result = lenient_classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.ON_TIME
    assert result.undertime_minutes == 0


def test_lenient_profile_flags_hour_of_undertime(lenient_classifier, morning_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 8, 0),
        time_out=_at(shift_date, 16, 0),
    )

    result = lenient_classifier.classify(morning_schedule, obs)

    assert result.status == AttendanceStatus.UNDERTIME
    assert result.undertime_minutes == 60


def test_utility_shift_judged_on_hours_worked(classifier, utility_schedule, shift_date):
    full = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 9, 0),
        time_out=_at(shift_date, 17, 0),
    )
    short = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 9, 0),
        time_out=_at(shift_date, 16, 0),
    )

    full_result = classifier.classify(utility_schedule, full)
    short_result = classifier.classify(utility_schedule, short)

    assert full_result.status == AttendanceStatus.ON_TIME
    assert full_result.tardy_minutes == 0
    assert short_result.status == AttendanceStatus.UNDERTIME
    assert short_result.undertime_minutes == 0
    assert short_result.warnings == ("24H UTILITY: Only 7.0 hours worked (minimum 8 hours expected).",)


def test_utility_shift_counts_whole_hours(classifier, utility_schedule, shift_date):
    obs = AttendanceObservation(
        shift_date=shift_date,
        time_in=_at(shift_date, 9, 0),
        time_out=_at(shift_date, 16, 59),
    )

    result = classifier.classify(utility_schedule, obs)

    assert result.status == AttendanceStatus.UNDERTIME
    assert result.reason == "24H utility shift: worked 7 hours"
    assert result.warnings == ("24H UTILITY: Only 7.0 hours worked (minimum 8 hours expected).",)


def test_utility_shift_without_time_out_keeps_arrival_status(classifier, utility_schedule, shift_date):
    late = AttendanceObservation(shift_date=shift_date, time_in=_at(shift_date, 9, 0))
    punctual = AttendanceObservation(shift_date=shift_date, time_in=_at(shift_date, 5, 55))

    late_result = classifier.classify(utility_schedule, late)
    punctual_result = classifier.classify(utility_schedule, punctual)

    assert late_result.status == AttendanceStatus.HALF_DAY_ABSENCE
    assert late_result.secondary_status == AttendanceStatus.FAILED_BIO_OUT
    assert late_result.tardy_minutes == 0
    assert late_result.undertime_minutes == 0
    assert late_result.is_partial
    assert punctual_result.status == AttendanceStatus.FAILED_BIO_OUT
    assert punctual_result.secondary_status is None
