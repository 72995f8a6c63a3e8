from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import DayInput, DayResult
from ..settings import EmployeeSettings


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate_day(self, day: DayInput, settings: EmployeeSettings, *, shift_rate: Optional[float] = None) -> DayResult:
        raise NotImplementedError
