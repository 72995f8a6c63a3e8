from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from ..common.numbers import round2
from ..core.constants import FULL_SHIFT_HOURS
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DayResult, Week, WeekAggregates
from .settings import EmployeeSettings

logger = logging.getLogger(__name__)


class WeekAggregator:
    """Sums a week's day results and keeps them in line with the raw inputs."""

    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or StandardPayrollCalculator()

    @staticmethod
    def aggregate(days: Iterable[DayResult], weekly_tips: float = 0.0) -> WeekAggregates:
        total_hours = 0.0
        total_regular = 0.0
        total_overtime = 0.0
        total_extra = 0.0
        total_base_pay = 0.0
        total_shifts = 0

        for d in days:
            total_hours += d.hours_worked
            total_regular += d.regular_hours
            total_overtime += d.overtime_hours
            total_extra += d.extra_hours
            total_base_pay += d.daily_pay
            if d.hours_worked >= FULL_SHIFT_HOURS:
                total_shifts += 1

        return WeekAggregates(
            total_hours=round2(total_hours),
            total_regular_hours=round2(total_regular),
            total_overtime_hours=round2(total_overtime),
            total_extra_hours=round2(total_extra),
            total_base_pay=round2(total_base_pay),
            total_pay=round2(total_base_pay + (weekly_tips or 0.0)),
            total_shifts=total_shifts,
        )

    def recalculate(self, week: Week, settings: EmployeeSettings) -> Week:
        """Re-derive every day and the week totals from the raw inputs."""
        schedule = {}
        for day in week.ordered_days():
            result = self._calculator.calculate_day(day.input, settings, shift_rate=week.shift_rate)
            schedule[day.day] = replace(day, result=result)

        week = replace(week, schedule=schedule)
        return replace(week, aggregates=self.aggregate(week.day_results(), week.weekly_tips))

    def apply_shift_rate(self, week: Week, shift_rate: Optional[float], settings: EmployeeSettings) -> Week:
        # daily_pay depends on the flat rate, so every day is recomputed
        logger.debug("shift rate changed", extra={"week_id": week.week_id})
        return self.recalculate(replace(week, shift_rate=shift_rate), settings)

    def apply_tips(self, week: Week, weekly_tips: float) -> Week:
        week = replace(week, weekly_tips=weekly_tips)
        return replace(week, aggregates=self.aggregate(week.day_results(), weekly_tips))
