from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date, week_end_for, week_id_for
from ..common.validators import (
    optional_non_negative,
    require_bool,
    require_int_in_range,
    require_non_empty,
    require_non_negative,
)
from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import Currency, WeekDay
from ..core.exceptions import NotFoundError, ValidationError
from .model import AvailableMonth, DaySchedule, Employee, EmployeeStats, MonthlyStats, Week
from .repository import PayrollRepository
from .settings import EmployeeSettings
from .stats import AvailableMonthsFinder, EmployeeStatsAggregator, MonthlyStatsAggregator
from .week import WeekAggregator

logger = logging.getLogger(__name__)

UNSET: Any = object()

_RATE_FIELDS = (
    "base_hourly_rate",
    "overtime_tier1_rate",
    "overtime_tier2_rate",
    "overtime_tier1_hours",
    "hours_per_shift",
    "break_hours",
    "min_hours_for_break",
)
_FLAG_FIELDS = ("uses_overtime", "uses_tips")


class PayrollService:
    """Use cases of the payroll module.

    Validates what comes from the outside, then lets the calculators re-derive
    every computed field from the raw inputs.
    """

    def __init__(
        self,
        payroll: PayrollRepository,
        *,
        week_aggregator: Optional[WeekAggregator] = None,
        employee_stats: Optional[EmployeeStatsAggregator] = None,
        monthly_stats: Optional[MonthlyStatsAggregator] = None,
        months_finder: Optional[AvailableMonthsFinder] = None,
        default_currency: str = DEFAULT_CURRENCY,
    ):
        self._payroll = payroll
        self._weeks = week_aggregator or WeekAggregator()
        self._employee_stats = employee_stats or EmployeeStatsAggregator()
        self._monthly_stats = monthly_stats or MonthlyStatsAggregator()
        self._months = months_finder or AvailableMonthsFinder()
        self._default_currency = default_currency

    # -- employees ---------------------------------------------------------

    def list_employees(self) -> Sequence[Employee]:
        return self._payroll.list_employees()

    def get_employee(self, employee_id: str) -> Employee:
        emp = self._payroll.get_employee(employee_id)
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def create_employee(self, *, name: str, settings: Optional[Mapping[str, Any]] = None) -> Employee:
        name = require_non_empty(name, "Name")
        emp = Employee(
            employee_id=uuid.uuid4().hex[:12],
            name=name,
            settings=EmployeeSettings.from_record(
                {"currency": self._default_currency, **self._validate_settings(settings or {})}
            ),
        )
        self._payroll.save_employee(emp)
        logger.info("employee created", extra={"employee_id": emp.employee_id})
        return emp

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        settings: Optional[Mapping[str, Any]] = None,
    ) -> Employee:
        with self._payroll.lock(employee_id):
            emp = self.get_employee(employee_id)
            if name is not None:
                emp = replace(emp, name=require_non_empty(name, "Name"))

            if settings:
                merged = {**emp.settings.to_dict(), **self._validate_settings(settings)}
                new_settings = EmployeeSettings.from_record(merged)
                if new_settings != emp.settings:
                    weeks = tuple(self._weeks.recalculate(w, new_settings) for w in emp.weeks)
                    emp = replace(emp, settings=new_settings, weeks=weeks)
                    logger.info("settings changed, %d weeks recalculated", len(weeks), extra={"employee_id": employee_id})

            self._save(emp)
            return emp

    def delete_employee(self, employee_id: str) -> None:
        with self._payroll.lock(employee_id):
            if not self._payroll.delete_employee(employee_id):
                raise NotFoundError("Employee not found")
        logger.info("employee deleted", extra={"employee_id": employee_id})

    # -- weeks -------------------------------------------------------------

    def get_week(self, employee_id: str, week_id: str) -> Week:
        return self._find_week(self.get_employee(employee_id), week_id)

    def create_week(self, employee_id: str, *, start_date: date | str, weekly_tips: Any = 0) -> Week:
        if isinstance(start_date, str):
            try:
                start_date = parse_iso_date(start_date)
            except ValueError:
                raise ValidationError("Invalid date format (YYYY-MM-DD)")
        tips = require_non_negative(weekly_tips or 0, "Weekly tips")

        with self._payroll.lock(employee_id):
            emp = self.get_employee(employee_id)
            week_id = week_id_for(start_date)
            if any(w.week_id == week_id for w in emp.weeks):
                raise ValidationError(f"Week {week_id} already exists for this employee")

            schedule = {
                day: DaySchedule(day=day, work_date=start_date + timedelta(days=i))
                for i, day in enumerate(WeekDay.ordered())
            }
            week = Week(
                week_id=week_id,
                start_date=start_date,
                end_date=week_end_for(start_date),
                schedule=schedule,
                weekly_tips=tips,
            )
            week = self._weeks.recalculate(week, emp.settings)

            self._save(replace(emp, weeks=emp.weeks + (week,)))
            logger.info("week created", extra={"employee_id": employee_id, "week_id": week_id})
            return week

    def update_schedule(self, employee_id: str, week_id: str, schedule: Mapping[str, Mapping[str, Any]]) -> Week:
        """Merge partial day inputs into the stored ones and recompute the week."""
        changes = {self._parse_day_key(k): self._validate_day_patch(v or {}) for k, v in schedule.items()}

        with self._payroll.lock(employee_id):
            emp = self.get_employee(employee_id)
            week = self._find_week(emp, week_id)

            days = dict(week.schedule)
            for day, patch in changes.items():
                current = week.day(day)
                days[day] = replace(current, input=replace(current.input, **patch))

            week = self._weeks.recalculate(replace(week, schedule=days), emp.settings)
            self._store_week(emp, week)
            logger.debug(
                "schedule updated",
                extra={"employee_id": employee_id, "week_id": week_id, "days": len(changes)},
            )
            return week

    def update_week(self, employee_id: str, week_id: str, *, weekly_tips: Any = UNSET, shift_rate: Any = UNSET) -> Week:
        if weekly_tips is not UNSET:
            weekly_tips = require_non_negative(weekly_tips, "Weekly tips")
        if shift_rate is not UNSET:
            shift_rate = optional_non_negative(shift_rate, "Shift rate")

        with self._payroll.lock(employee_id):
            emp = self.get_employee(employee_id)
            week = self._find_week(emp, week_id)

            if weekly_tips is not UNSET:
                week = self._weeks.apply_tips(week, weekly_tips)
            if shift_rate is not UNSET:
                week = self._weeks.apply_shift_rate(week, shift_rate, emp.settings)

            self._store_week(emp, week)
            return week

    def delete_week(self, employee_id: str, week_id: str) -> None:
        with self._payroll.lock(employee_id):
            emp = self.get_employee(employee_id)
            self._find_week(emp, week_id)
            weeks = tuple(w for w in emp.weeks if w.week_id != week_id)
            self._save(replace(emp, weeks=weeks))

    # -- reporting ---------------------------------------------------------

    def employee_stats(self, employee_id: str) -> EmployeeStats:
        return self._employee_stats.calculate(self.get_employee(employee_id).weeks)

    def monthly_stats(self, employee_id: str, *, year: int, month: int) -> Optional[MonthlyStats]:
        year = require_int_in_range(year, "Year", 1, 9999)
        month = require_int_in_range(month, "Month", 1, 12)
        return self._monthly_stats.calculate(self.get_employee(employee_id).weeks, year, month)

    def available_months(self, employee_id: str) -> list[AvailableMonth]:
        return self._months.find(self.get_employee(employee_id).weeks)

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _find_week(emp: Employee, week_id: str) -> Week:
        for w in emp.weeks:
            if w.week_id == week_id:
                return w
        raise NotFoundError("Week not found")

    def _save(self, emp: Employee) -> None:
        # the employee may have been deleted while this writer waited on its lock
        if not self._payroll.get_employee(emp.employee_id):
            raise NotFoundError("Employee not found")
        self._payroll.save_employee(emp)

    def _store_week(self, emp: Employee, week: Week) -> None:
        weeks = tuple(week if w.week_id == week.week_id else w for w in emp.weeks)
        self._save(replace(emp, weeks=weeks))

    @staticmethod
    def _parse_day_key(key: str) -> WeekDay:
        try:
            return WeekDay(str(key).lower())
        except ValueError:
            raise ValidationError(f"Unknown weekday: {key}")

    @staticmethod
    def _validate_day_patch(patch: Mapping[str, Any]) -> dict:
        out: dict[str, Any] = {}
        for field_name, high in (("entry_hour", 23), ("exit_hour", 23), ("entry_minute", 59), ("exit_minute", 59)):
            if patch.get(field_name) is not None:
                out[field_name] = require_int_in_range(patch[field_name], field_name, 0, high)
        for flag in ("is_working", "force_overtime"):
            if patch.get(flag) is not None:
                out[flag] = require_bool(patch[flag], flag)
        if "break_hours" in patch:
            out["break_hours"] = optional_non_negative(patch["break_hours"], "break_hours")
        return out

    @staticmethod
    def _validate_settings(settings: Mapping[str, Any]) -> dict:
        out: dict[str, Any] = {}
        for field_name in _RATE_FIELDS:
            if settings.get(field_name) is not None:
                out[field_name] = require_non_negative(settings[field_name], field_name)
        for flag in _FLAG_FIELDS:
            if settings.get(flag) is not None:
                out[flag] = require_bool(settings[flag], flag)
        if settings.get("currency") is not None:
            try:
                out["currency"] = Currency(str(settings["currency"]).upper()).value
            except ValueError:
                raise ValidationError("Unsupported currency")
        return out
