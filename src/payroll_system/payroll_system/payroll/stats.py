from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import month_label
from .model import AvailableMonth, EmployeeStats, MonthlyStats, Week
from .week import WeekAggregator


class EmployeeStatsAggregator:
    """Lifetime totals and averages of one employee."""

    def calculate(self, weeks: Sequence[Week]) -> EmployeeStats:
        total_weeks = len(weeks)
        total_hours = 0.0
        total_pay = 0.0
        total_shifts = 0

        for week in weeks:
            agg = WeekAggregator.aggregate(week.day_results(), week.weekly_tips)
            total_hours += agg.total_hours
            total_pay += agg.total_pay
            total_shifts += agg.total_shifts

        return EmployeeStats(
            total_weeks=total_weeks,
            total_shifts=total_shifts,
            total_hours=total_hours,
            total_pay=total_pay,
            avg_hours_per_week=total_hours / total_weeks if total_weeks > 0 else 0.0,
            avg_hours_per_shift=total_hours / total_shifts if total_shifts > 0 else 0.0,
        )


class MonthlyStatsAggregator:
    """Totals of the weeks starting in one calendar month (``month`` is 1-12)."""

    def calculate(self, weeks: Sequence[Week], year: int, month: int) -> Optional[MonthlyStats]:
        in_month = [w for w in weeks if w.start_date.year == year and w.start_date.month == month]
        if not in_month:
            return None

        totals = {
            "total_hours": 0.0,
            "regular_hours": 0.0,
            "overtime_hours": 0.0,
            "extra_hours": 0.0,
            "total_tips": 0.0,
            "total_base_pay": 0.0,
            "total_pay": 0.0,
        }
        for week in in_month:
            agg = WeekAggregator.aggregate(week.day_results(), week.weekly_tips)
            totals["total_hours"] += agg.total_hours
            totals["regular_hours"] += agg.total_regular_hours
            totals["overtime_hours"] += agg.total_overtime_hours
            totals["extra_hours"] += agg.total_extra_hours
            totals["total_tips"] += week.weekly_tips or 0.0
            totals["total_base_pay"] += agg.total_base_pay
            totals["total_pay"] += agg.total_pay

        count = len(in_month)
        return MonthlyStats(
            year=year,
            month=month,
            week_count=count,
            weeks=tuple(in_month),
            avg_hours_per_week=totals["total_hours"] / count,
            avg_pay_per_week=totals["total_pay"] / count,
            **totals,
        )


class AvailableMonthsFinder:
    def find(self, weeks: Sequence[Week]) -> list[AvailableMonth]:
        keys = {(w.start_date.year, w.start_date.month) for w in weeks}
        return [
            AvailableMonth(year=year, month=month, label=month_label(year, month))
            for year, month in sorted(keys, reverse=True)
        ]
