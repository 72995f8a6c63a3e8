from datetime import date, timedelta

import pytest

from src.payroll_system.payroll_system.common.datetime_utils import week_id_for
from src.payroll_system.payroll_system.core.enums import WeekDay
from src.payroll_system.payroll_system.payroll.model import AvailableMonth, DayInput, DaySchedule, Week
from src.payroll_system.payroll_system.payroll.settings import EmployeeSettings
from src.payroll_system.payroll_system.payroll.stats import (
    AvailableMonthsFinder,
    EmployeeStatsAggregator,
    MonthlyStatsAggregator,
)
from src.payroll_system.payroll_system.payroll.week import WeekAggregator

SETTINGS = EmployeeSettings(base_hourly_rate=450)


def _week(start: date, *, working_days: int, exit_hour: int = 18, tips: float = 0.0) -> Week:
    schedule = {}
    for i, d in enumerate(WeekDay.ordered()):
        day = DayInput(9, 0, exit_hour, 0, is_working=i < working_days)
        schedule[d] = DaySchedule(day=d, input=day, work_date=start + timedelta(days=i))
    week = Week(
        week_id=week_id_for(start),
        start_date=start,
        end_date=start + timedelta(days=6),
        schedule=schedule,
        weekly_tips=tips,
    )
    return WeekAggregator().recalculate(week, SETTINGS)


def test_employee_stats_over_weeks():
    weeks = [
        _week(date(2025, 3, 3), working_days=5, tips=100),  # 40h, 18000
        _week(date(2025, 3, 10), working_days=3, exit_hour=20, tips=0),  # 30h, 14850
    ]

    stats = EmployeeStatsAggregator().calculate(weeks)

    assert stats.total_weeks == 2
    assert stats.total_shifts == 8
    assert stats.total_hours == 70
    assert stats.total_pay == 18100 + 14850
    assert stats.avg_hours_per_week == 35
    assert stats.avg_hours_per_shift == pytest.approx(8.75)


def test_employee_stats_without_weeks_is_zero():
    stats = EmployeeStatsAggregator().calculate([])

    assert stats.total_weeks == 0
    assert stats.avg_hours_per_week == 0
    assert stats.avg_hours_per_shift == 0


def test_employee_stats_without_full_shifts_has_zero_average_per_shift():
    stats = EmployeeStatsAggregator().calculate([_week(date(2025, 3, 3), working_days=2, exit_hour=13)])

    assert stats.total_shifts == 0
    assert stats.total_hours == 8
    assert stats.avg_hours_per_shift == 0


def test_monthly_stats_returns_none_for_empty_month():
    weeks = [_week(date(2025, 3, 3), working_days=5)]

    assert MonthlyStatsAggregator().calculate(weeks, 2025, 4) is None
    assert MonthlyStatsAggregator().calculate([], 2025, 3) is None


def test_monthly_stats_uses_week_start_date():
    weeks = [
        _week(date(2025, 3, 24), working_days=5, tips=200),
        _week(date(2025, 3, 31), working_days=4, exit_hour=20),  # ends in April, still March
        _week(date(2025, 4, 7), working_days=5),
    ]

    stats = MonthlyStatsAggregator().calculate(weeks, 2025, 3)

    assert stats is not None
    assert stats.week_count == 2
    assert [w.week_id for w in stats.weeks] == [weeks[0].week_id, weeks[1].week_id]
    assert stats.total_hours == 80
    assert stats.regular_hours == 72
    assert stats.overtime_hours == 8
    assert stats.extra_hours == 0
    assert stats.total_tips == 200
    assert stats.total_base_pay == 18000 + 19800
    assert stats.total_pay == 18200 + 19800
    assert stats.avg_hours_per_week == 40
    assert stats.avg_pay_per_week == (18200 + 19800) / 2


def test_available_months_most_recent_first():
    weeks = [
        _week(date(2024, 12, 30), working_days=1),
        _week(date(2025, 3, 3), working_days=1),
        _week(date(2025, 3, 10), working_days=1),
        _week(date(2025, 1, 6), working_days=1),
    ]

    months = AvailableMonthsFinder().find(weeks)

    assert months == [
        AvailableMonth(year=2025, month=3, label="March 2025"),
        AvailableMonth(year=2025, month=1, label="January 2025"),
        AvailableMonth(year=2024, month=12, label="December 2024"),
    ]


def test_available_months_of_no_weeks_is_empty():
    assert AvailableMonthsFinder().find([]) == []
