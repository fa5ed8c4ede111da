from __future__ import annotations

from dataclasses import dataclass

from ..shifts.model import ShiftSchedule
from .strategies.base import ClassificationStrategy
from .strategies.standard_strategy import StandardShiftStrategy
from .strategies.utility_strategy import UtilityShiftStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the schedule."""

    def for_schedule(self, schedule: ShiftSchedule) -> ClassificationStrategy:
        if schedule.is_utility:
            return UtilityShiftStrategy()
        return StandardShiftStrategy()
