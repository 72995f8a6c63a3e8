from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import WeekDay
from .settings import EmployeeSettings


@dataclass(frozen=True)
class DayInput:
    """Raw clock data of one weekday, as recorded (24-hour clock components)."""

    entry_hour: int = 0
    entry_minute: int = 0
    exit_hour: int = 0
    exit_minute: int = 0
    is_working: bool = False
    force_overtime: bool = False
    break_hours: Optional[float] = None


@dataclass(frozen=True)
class DayResult:
    hours_worked: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    extra_hours: float = 0.0
    daily_pay: float = 0.0

    @classmethod
    def empty(cls) -> "DayResult":
        return cls()


@dataclass(frozen=True)
class DaySchedule:
    """Raw input of a weekday plus the result derived from it."""

    day: WeekDay
    input: DayInput = field(default_factory=DayInput)
    result: DayResult = field(default_factory=DayResult)
    work_date: Optional[date] = None


@dataclass(frozen=True)
class WeekAggregates:
    total_hours: float = 0.0
    total_regular_hours: float = 0.0
    total_overtime_hours: float = 0.0
    total_extra_hours: float = 0.0
    total_base_pay: float = 0.0
    total_pay: float = 0.0
    total_shifts: int = 0


@dataclass(frozen=True)
class Week:
    """Domain entity: one payroll week, owned by a single employee."""

    week_id: str
    start_date: date
    end_date: date
    schedule: dict[WeekDay, DaySchedule]
    weekly_tips: float = 0.0
    shift_rate: Optional[float] = None
    aggregates: WeekAggregates = field(default_factory=WeekAggregates)

    def day(self, day: WeekDay) -> DaySchedule:
        return self.schedule.get(day) or DaySchedule(day=day)

    def ordered_days(self) -> list[DaySchedule]:
        return [self.day(d) for d in WeekDay.ordered()]

    def day_results(self) -> list[DayResult]:
        return [d.result for d in self.ordered_days()]


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str
    settings: EmployeeSettings
    weeks: tuple[Week, ...] = ()


@dataclass(frozen=True)
class EmployeeStats:
    total_weeks: int = 0
    total_shifts: int = 0
    total_hours: float = 0.0
    total_pay: float = 0.0
    avg_hours_per_week: float = 0.0
    avg_hours_per_shift: float = 0.0


@dataclass(frozen=True)
class MonthlyStats:
    year: int
    month: int
    week_count: int
    weeks: tuple[Week, ...]
    total_hours: float
    regular_hours: float
    overtime_hours: float
    extra_hours: float
    total_tips: float
    total_base_pay: float
    total_pay: float
    avg_hours_per_week: float
    avg_pay_per_week: float


@dataclass(frozen=True)
class AvailableMonth:
    year: int
    month: int
    label: str
