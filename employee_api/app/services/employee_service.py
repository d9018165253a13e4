"""
Service layer for employee records.

``EmployeeStore`` keeps every employee in a dictionary keyed by
identifier and assigns identifiers from a counter that only ever grows.
All access goes through a reader/writer lock: ``get``, ``list`` and
``count`` share it, while ``create``, ``update``, ``delete`` and
``clear`` hold it exclusively.  Identifier assignment and insertion
happen under the same exclusive hold, so an identifier is never issued
without a matching record and concurrent creates never collide.

Missing records are reported by returning ``None`` (or ``False`` for
``delete``); translating that into an HTTP status is the API layer's
job.  Stored records are frozen pydantic models, so they can be
returned to callers without copying.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from employee_api.app.core.rwlock import ReadWriteLock
from employee_api.app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from employee_api.app.services.pagination import paginate


logger = logging.getLogger(__name__)


class EmployeeStore:
    """Thread-safe in-memory store of employees."""

    def __init__(self) -> None:
        self._employees: Dict[int, Employee] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    def create(self, data: EmployeeCreate) -> Employee:
        """Assign the next identifier to ``data``, store it and return the record."""
        with self._lock.write_locked():
            self._last_id += 1
            employee = Employee(id=self._last_id, **data.model_dump())
            self._employees[employee.id] = employee
        logger.info("Created employee %s", employee.id)
        return employee

    def get(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None`` if absent."""
        with self._lock.read_locked():
            return self._employees.get(employee_id)

    def update(self, employee_id: int, data: EmployeeUpdate) -> Optional[Employee]:
        """Replace the employee stored under ``employee_id``.

        Every field is taken from ``data``; the identifier is always
        ``employee_id``.  Returns the new record, or ``None`` without
        touching the store if no such employee exists.
        """
        with self._lock.write_locked():
            if employee_id not in self._employees:
                return None
            employee = Employee(id=employee_id, **data.model_dump())
            self._employees[employee_id] = employee
        logger.info("Updated employee %s", employee_id)
        return employee

    def delete(self, employee_id: int) -> bool:
        """Remove an employee.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with self._lock.write_locked():
            removed = self._employees.pop(employee_id, None)
        if removed is None:
            return False
        logger.info("Deleted employee %s", employee_id)
        return True

    def list(self) -> List[Employee]:
        """Return a snapshot of all employees ordered by identifier."""
        with self._lock.read_locked():
            return [self._employees[key] for key in sorted(self._employees)]

    def list_page(self, page: int, page_size: int) -> List[Employee]:
        """Return one page of the identifier-ordered snapshot."""
        return paginate(self.list(), page, page_size)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._employees)

    def clear(self) -> None:
        """Drop every record and restart identifiers from 1."""
        with self._lock.write_locked():
            self._employees.clear()
            self._last_id = 0
