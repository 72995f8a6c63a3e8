from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional, Sequence

from .model import Employee


class InMemoryPayrollRepository:
    """Process-local store.

    Note: Weeks are kept sorted by start date so readers get them in order.
    """

    def __init__(self):
        self._employees: dict[str, Employee] = {}
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def list_employees(self) -> Sequence[Employee]:
        items = list(self._employees.values())
        items.sort(key=lambda e: e.name.lower())
        return items

    def save_employee(self, employee: Employee) -> None:
        weeks = tuple(sorted(employee.weeks, key=lambda w: w.start_date))
        self._employees[employee.employee_id] = replace(employee, weeks=weeks)

    def delete_employee(self, employee_id: str) -> bool:
        with self._guard:
            self._locks.pop(employee_id, None)
            return self._employees.pop(employee_id, None) is not None

    @contextmanager
    def lock(self, employee_id: str) -> Iterator[None]:
        # Unknown ids get no lock; the caller finds nothing to modify anyway.
        with self._guard:
            if employee_id in self._employees:
                lock = self._locks.setdefault(employee_id, threading.RLock())
            else:
                lock = None
        if lock is None:
            yield
            return
        with lock:
            yield
