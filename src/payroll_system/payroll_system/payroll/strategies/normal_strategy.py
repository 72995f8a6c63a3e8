from __future__ import annotations

from ...common.numbers import round2
from ...core.constants import MINUTES_PER_HOUR, OVERTIME_TOLERANCE_MINUTES
from ..settings import EmployeeSettings
from .base import HoursSplit, HoursSplitStrategy, distribute_overtime


class NormalSplitStrategy(HoursSplitStrategy):
    """Regular time up to hours_per_shift, the excess goes through the overtime tiers."""

    def split(self, *, total_minutes: float, hours_worked: float, settings: EmployeeSettings) -> HoursSplit:
        tiers = settings.overtime_tiers()
        excess = max(hours_worked - settings.hours_per_shift, 0.0)

        if excess * MINUTES_PER_HOUR <= OVERTIME_TOLERANCE_MINUTES:
            return HoursSplit(regular_hours=hours_worked, tier_hours=tuple(0.0 for _ in tiers))

        regular = round2(min(hours_worked, settings.hours_per_shift))
        return HoursSplit(regular_hours=regular, tier_hours=distribute_overtime(excess, tiers))
