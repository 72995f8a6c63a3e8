from __future__ import annotations

from ...common.numbers import round2
from ...core.constants import FORCED_OVERTIME_REGULAR_MINUTES, MINUTES_PER_HOUR, OVERTIME_TOLERANCE_MINUTES
from ..settings import EmployeeSettings
from .base import HoursSplit, HoursSplitStrategy, distribute_overtime


class ForcedOvertimeSplitStrategy(HoursSplitStrategy):
    """Continuation of the previous night's shift.

    Precondition: the day starts at 00:00. Only ``prior_regular_minutes`` of it
    are regular, the rest is overtime.
    """

    def __init__(self, prior_regular_minutes: int = FORCED_OVERTIME_REGULAR_MINUTES):
        self._prior_regular_minutes = int(prior_regular_minutes)

    def split(self, *, total_minutes: float, hours_worked: float, settings: EmployeeSettings) -> HoursSplit:
        tiers = settings.overtime_tiers()
        regular_minutes = min(self._prior_regular_minutes, total_minutes)
        remaining_minutes = total_minutes - regular_minutes

        if remaining_minutes > OVERTIME_TOLERANCE_MINUTES and settings.uses_overtime:
            return HoursSplit(
                regular_hours=round2(regular_minutes / MINUTES_PER_HOUR),
                tier_hours=distribute_overtime(remaining_minutes / MINUTES_PER_HOUR, tiers),
            )

        return HoursSplit(regular_hours=hours_worked, tier_hours=tuple(0.0 for _ in tiers))
