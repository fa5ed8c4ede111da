from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import OVERTIME_THRESHOLD_MINUTES, UNDERTIME_HOUR_MINUTES
from ..core.enums import ThresholdProfile
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ClassifierThresholds:
    """Minute thresholds used by the status classifier.

    Two trigger sets exist in the attendance forms: `strict` flags any late
    minute and any early departure, `lenient` only flags 15+ minutes late and
    60+ minutes early. Both are selectable through configuration.
    """

    tardy_threshold_minutes: int
    undertime_threshold_minutes: int
    undertime_hour_minutes: int = UNDERTIME_HOUR_MINUTES
    overtime_threshold_minutes: int = OVERTIME_THRESHOLD_MINUTES

    def __post_init__(self):
        for name in (
            "tardy_threshold_minutes",
            "undertime_threshold_minutes",
            "undertime_hour_minutes",
            "overtime_threshold_minutes",
        ):
            if int(getattr(self, name)) < 0:
                raise ValidationError(f"{name} must not be negative")

    @classmethod
    def for_profile(
        cls,
        profile: ThresholdProfile | str,
        *,
        tardy_threshold_minutes: Optional[int] = None,
        undertime_threshold_minutes: Optional[int] = None,
    ) -> "ClassifierThresholds":
        try:
            profile = ThresholdProfile(profile)
        except ValueError:
            raise ValidationError(f"Unknown threshold profile: {profile!r}")

        base = PROFILES[profile]
        return cls(
            tardy_threshold_minutes=base.tardy_threshold_minutes
            if tardy_threshold_minutes is None
            else int(tardy_threshold_minutes),
            undertime_threshold_minutes=base.undertime_threshold_minutes
            if undertime_threshold_minutes is None
            else int(undertime_threshold_minutes),
        )


PROFILES: dict[ThresholdProfile, ClassifierThresholds] = {
    ThresholdProfile.STRICT: ClassifierThresholds(tardy_threshold_minutes=1, undertime_threshold_minutes=1),
    ThresholdProfile.LENIENT: ClassifierThresholds(tardy_threshold_minutes=15, undertime_threshold_minutes=60),
}
