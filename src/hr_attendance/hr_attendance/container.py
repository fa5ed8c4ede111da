from __future__ import annotations

from dataclasses import dataclass

from .attendance.classifier import AttendanceStatusClassifier
from .attendance.factory import ClassificationStrategyFactory
from .attendance.service import AttendanceSuggestionService
from .attendance.thresholds import ClassifierThresholds
from .common.validators import require_int_range
from .core.constants import DEFAULT_GRACE_PERIOD_MINUTES, MAX_GRACE_PERIOD_MINUTES


@dataclass(frozen=True)
class Container:
    thresholds: ClassifierThresholds
    classifier: AttendanceStatusClassifier
    suggestion_service: AttendanceSuggestionService


def _optional_int(value, name: str):
    if value is None or value == "":
        return None
    return require_int_range(value, name, min_value=0)


def build_container(*, settings) -> Container:
    """Wire classifier and services from a settings module (see config/)."""

    thresholds = ClassifierThresholds.for_profile(
        getattr(settings, "THRESHOLD_PROFILE", "strict"),
        tardy_threshold_minutes=_optional_int(getattr(settings, "TARDY_THRESHOLD_MINUTES", None), "TARDY_THRESHOLD_MINUTES"),
        undertime_threshold_minutes=_optional_int(getattr(settings, "UNDERTIME_THRESHOLD_MINUTES", None), "UNDERTIME_THRESHOLD_MINUTES"),
    )
    classifier = AttendanceStatusClassifier(thresholds, strategy_factory=ClassificationStrategyFactory())
    suggestion_service = AttendanceSuggestionService(
        classifier,
        default_grace_minutes=require_int_range(
            getattr(settings, "DEFAULT_GRACE_PERIOD_MINUTES", DEFAULT_GRACE_PERIOD_MINUTES),
            "DEFAULT_GRACE_PERIOD_MINUTES",
            min_value=0,
            max_value=MAX_GRACE_PERIOD_MINUTES,
        ),
    )

    return Container(
        thresholds=thresholds,
        classifier=classifier,
        suggestion_service=suggestion_service,
    )
