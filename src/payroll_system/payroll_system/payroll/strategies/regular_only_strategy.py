from __future__ import annotations

from ..settings import EmployeeSettings
from .base import HoursSplit, HoursSplitStrategy


class RegularOnlySplitStrategy(HoursSplitStrategy):
    """Employees without overtime: every worked hour is regular."""

    def split(self, *, total_minutes: float, hours_worked: float, settings: EmployeeSettings) -> HoursSplit:
        return HoursSplit(regular_hours=hours_worked, tier_hours=tuple(0.0 for _ in settings.overtime_tiers()))
