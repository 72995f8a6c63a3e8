from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import (
    DEFAULT_BREAK_HOURS,
    DEFAULT_CURRENCY,
    DEFAULT_HOURS_PER_SHIFT,
    DEFAULT_MIN_HOURS_FOR_BREAK,
    DEFAULT_OVERTIME_TIER1_HOURS,
    DEFAULT_OVERTIME_TIER1_RATE,
    DEFAULT_OVERTIME_TIER2_RATE,
)
from ..core.enums import Currency


@dataclass(frozen=True)
class OvertimeTier:
    """One overtime band: up to ``capacity_hours`` paid at ``multiplier`` x base rate.

    ``capacity_hours=None`` means the band absorbs everything left over.
    """

    capacity_hours: Optional[float]
    multiplier: float


@dataclass(frozen=True)
class EmployeeSettings:
    """Pay rules of one employee.

    Passed explicitly into every calculation; never read from global state.
    """

    base_hourly_rate: float
    uses_overtime: bool = True
    overtime_tier1_rate: float = DEFAULT_OVERTIME_TIER1_RATE
    overtime_tier2_rate: float = DEFAULT_OVERTIME_TIER2_RATE
    overtime_tier1_hours: float = DEFAULT_OVERTIME_TIER1_HOURS
    hours_per_shift: float = DEFAULT_HOURS_PER_SHIFT
    break_hours: float = DEFAULT_BREAK_HOURS
    min_hours_for_break: float = DEFAULT_MIN_HOURS_FOR_BREAK
    currency: Currency = Currency(DEFAULT_CURRENCY)
    uses_tips: bool = True

    def overtime_tiers(self) -> list[OvertimeTier]:
        return [
            OvertimeTier(capacity_hours=self.overtime_tier1_hours, multiplier=self.overtime_tier1_rate),
            OvertimeTier(capacity_hours=None, multiplier=self.overtime_tier2_rate),
        ]

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "EmployeeSettings":
        """Build settings from a stored record, filling nulls with the defaults."""

        def _float(key: str, default: float) -> float:
            value = record.get(key)
            if value is None or value == "":
                return float(default)
            try:
                return float(value)
            except (TypeError, ValueError):
                return float(default)

        return cls(
            base_hourly_rate=_float("base_hourly_rate", 0),
            uses_overtime=bool(record.get("uses_overtime", True)),
            overtime_tier1_rate=_float("overtime_tier1_rate", DEFAULT_OVERTIME_TIER1_RATE),
            overtime_tier2_rate=_float("overtime_tier2_rate", DEFAULT_OVERTIME_TIER2_RATE),
            overtime_tier1_hours=_float("overtime_tier1_hours", DEFAULT_OVERTIME_TIER1_HOURS),
            hours_per_shift=_float("hours_per_shift", DEFAULT_HOURS_PER_SHIFT),
            break_hours=_float("break_hours", DEFAULT_BREAK_HOURS),
            min_hours_for_break=_float("min_hours_for_break", DEFAULT_MIN_HOURS_FOR_BREAK),
            currency=Currency(record.get("currency") or DEFAULT_CURRENCY),
            uses_tips=bool(record.get("uses_tips", True)),
        )

    def to_dict(self) -> dict:
        return {
            "base_hourly_rate": self.base_hourly_rate,
            "uses_overtime": self.uses_overtime,
            "overtime_tier1_rate": self.overtime_tier1_rate,
            "overtime_tier2_rate": self.overtime_tier2_rate,
            "overtime_tier1_hours": self.overtime_tier1_hours,
            "hours_per_shift": self.hours_per_shift,
            "break_hours": self.break_hours,
            "min_hours_for_break": self.min_hours_for_break,
            "currency": self.currency.value,
            "uses_tips": self.uses_tips,
        }
