from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import FORCED_OVERTIME_REGULAR_MINUTES
from .model import DayInput
from .settings import EmployeeSettings
from .strategies.base import HoursSplitStrategy
from .strategies.forced_overtime_strategy import ForcedOvertimeSplitStrategy
from .strategies.normal_strategy import NormalSplitStrategy
from .strategies.regular_only_strategy import RegularOnlySplitStrategy


@dataclass
class HoursSplitStrategyFactory:
    """Factory Pattern: choose how a day's hours are split based on its flags and settings."""

    prior_regular_minutes: int = FORCED_OVERTIME_REGULAR_MINUTES

    def for_day(self, *, day: DayInput, settings: EmployeeSettings) -> HoursSplitStrategy:
        if day.force_overtime:
            return ForcedOvertimeSplitStrategy(self.prior_regular_minutes)
        if settings.uses_overtime:
            return NormalSplitStrategy()
        return RegularOnlySplitStrategy()
