from __future__ import annotations

from enum import Enum


class WeekDay(str, Enum):
    """Weekday keys used to store a week's schedule (Monday first)."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def ordered(cls) -> list["WeekDay"]:
        return list(cls)


class Currency(str, Enum):
    """Currencies an employee can be paid in."""

    MXN = "MXN"
    USD = "USD"
    EUR = "EUR"
