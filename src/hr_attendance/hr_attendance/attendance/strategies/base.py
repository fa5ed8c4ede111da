from __future__ import annotations

from abc import ABC, abstractmethod

from ...shifts.model import ShiftSchedule
from ..model import AttendanceObservation, ClassificationResult
from ..thresholds import ClassifierThresholds


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how a day with a recorded time-in is classified.

    Callers guarantee `observation.time_in` is present.
    """

    @abstractmethod
    def classify(
        self,
        *,
        schedule: ShiftSchedule,
        observation: AttendanceObservation,
        thresholds: ClassifierThresholds,
    ) -> ClassificationResult:
        raise NotImplementedError
