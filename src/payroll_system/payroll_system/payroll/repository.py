from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Optional, Protocol, Sequence

from .model import Employee


class PayrollRepository(Protocol):
    def get_employee(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_employee(self, employee: Employee) -> None:
        """Create or replace an employee together with all of its weeks."""

        raise NotImplementedError

    def delete_employee(self, employee_id: str) -> bool:
        raise NotImplementedError

    def lock(self, employee_id: str) -> AbstractContextManager:
        """Serialize read-modify-write cycles on one employee's weeks."""

        raise NotImplementedError
