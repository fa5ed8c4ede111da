from __future__ import annotations

from ..core.exceptions import ValidationError


def require_int_range(value, field_name: str, *, min_value: int, max_value: int | None = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")

    if number < min_value or (max_value is not None and number > max_value):
        upper = f"-{max_value}" if max_value is not None else " or more"
        raise ValidationError(f"{field_name} must be {min_value}{upper}")
    return number
