from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def parse_time_of_day(value) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a time of day.

    Seconds are accepted (schedules are stored as HH:MM:SS) but dropped.
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)

    parts = str(value or "").strip().split(":")
    if len(parts) not in (2, 3):
        raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")
    try:
        hour, minute = int(parts[0]), int(parts[1])
        second = int(parts[2]) if len(parts) == 3 else 0
    except ValueError:
        raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        raise ValidationError(f"Invalid time: {value!r} (hour 0-23, minute and second 0-59)")
    return time(hour, minute)


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value).strip())


def parse_optional_time(value) -> Optional[time]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_time_of_day(value)


def combine(day: date, at: time) -> datetime:
    """Local wall-clock instant for a date and a time of day, minute precision."""
    return datetime.combine(day, at.replace(second=0, microsecond=0))


def minutes_between(start: datetime, end: datetime) -> float:
    """Signed minutes from start to end."""
    return (end - start).total_seconds() / 60


def format_instant(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%Y-%m-%d %H:%M") if value else None
