from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ...common.numbers import round2
from ..settings import EmployeeSettings, OvertimeTier


@dataclass(frozen=True)
class HoursSplit:
    """Worked hours broken down into regular time and one entry per overtime tier."""

    regular_hours: float
    tier_hours: tuple[float, ...] = ()

    def tier(self, index: int) -> float:
        return self.tier_hours[index] if index < len(self.tier_hours) else 0.0


def distribute_overtime(hours: float, tiers: Sequence[OvertimeTier]) -> tuple[float, ...]:
    """Fill the tiers in order; an unbounded tier takes whatever is left."""
    remaining = max(hours, 0.0)
    out = []
    for tier in tiers:
        if tier.capacity_hours is None:
            taken = remaining
        else:
            taken = min(remaining, max(tier.capacity_hours, 0.0))
        out.append(round2(taken))
        remaining = max(remaining - taken, 0.0)
    return tuple(out)


class HoursSplitStrategy(ABC):
    """Strategy Pattern: encapsulate how worked time is split into pay bands."""

    @abstractmethod
    def split(self, *, total_minutes: float, hours_worked: float, settings: EmployeeSettings) -> HoursSplit:
        raise NotImplementedError
