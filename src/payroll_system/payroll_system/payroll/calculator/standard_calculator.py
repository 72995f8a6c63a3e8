from __future__ import annotations

from typing import Optional

from ...common.numbers import round2, to_int
from ...core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from ..factory import HoursSplitStrategyFactory
from ..model import DayInput, DayResult
from ..settings import EmployeeSettings
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (out - in) - break, split into regular and overtime tiers.

    - exit at or before entry means the shift ended the next day;
    - the break is only deducted from shifts of at least ``min_hours_for_break``;
    - a positive ``shift_rate`` replaces the hourly pay with a flat amount.
    """

    def __init__(self, *, strategy_factory: Optional[HoursSplitStrategyFactory] = None):
        self._factory = strategy_factory or HoursSplitStrategyFactory()

    def worked_minutes(self, day: DayInput, settings: EmployeeSettings) -> float:
        entry = to_int(day.entry_hour) * MINUTES_PER_HOUR + to_int(day.entry_minute)
        exit_ = to_int(day.exit_hour) * MINUTES_PER_HOUR + to_int(day.exit_minute)

        # TODO: entry == exit currently counts as a 24h shift; confirm with payroll before changing.
        if exit_ <= entry:
            exit_ += MINUTES_PER_DAY

        minutes: float = exit_ - entry

        break_hours = day.break_hours if day.break_hours is not None else settings.break_hours
        if minutes / MINUTES_PER_HOUR >= settings.min_hours_for_break and break_hours > 0:
            minutes -= break_hours * MINUTES_PER_HOUR
        return minutes

    def calculate_day(self, day: DayInput, settings: EmployeeSettings, *, shift_rate: Optional[float] = None) -> DayResult:
        if not day.is_working:
            return DayResult.empty()

        minutes = self.worked_minutes(day, settings)
        if minutes <= 0:
            return DayResult.empty()

        hours_worked = round2(minutes / MINUTES_PER_HOUR)
        strategy = self._factory.for_day(day=day, settings=settings)
        split = strategy.split(total_minutes=minutes, hours_worked=hours_worked, settings=settings)

        if shift_rate is not None and shift_rate > 0:
            daily_pay = float(shift_rate)
        else:
            rate = settings.base_hourly_rate
            pay = split.regular_hours * rate
            for tier, hours in zip(settings.overtime_tiers(), split.tier_hours):
                pay += hours * rate * tier.multiplier
            daily_pay = round2(pay)

        return DayResult(
            hours_worked=hours_worked,
            regular_hours=split.regular_hours,
            overtime_hours=split.tier(0),
            extra_hours=split.tier(1),
            daily_pay=daily_pay,
        )
