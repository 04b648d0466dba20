"""InMemoryEmployeeRepository — dict-backed record arena for tests and demos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...primitives.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from ...domain.employee import Department, Employee

logger = logging.getLogger("hr_core.persistence")


class InMemoryEmployeeRepository:
    """In-memory implementation of ``IEmployeePersistence``.

    Employees and departments are kept in plain dicts keyed by identity;
    relations between them are identities too, so lookups such as
    :meth:`subordinates_of` are answered by scanning the arena.
    """

    def __init__(self) -> None:
        self._employees: dict[int, Employee] = {}
        self._departments: dict[int, Department] = {}
        self.save_count = 0

    # ── Employees ────────────────────────────────────────────────

    async def add(self, employee: Employee) -> int:
        self._employees[employee.id] = employee
        return employee.id

    async def save(self, employee: Employee) -> None:
        self._employees[employee.id] = employee
        self.save_count += 1
        logger.debug("Saved employee %s", employee.id)

    async def get(self, employee_id: int) -> Employee | None:
        return self._employees.get(employee_id)

    async def require(self, employee_id: int) -> Employee:
        """Return the employee or raise ``EntityNotFoundError``."""
        employee = self._employees.get(employee_id)
        if employee is None:
            raise EntityNotFoundError("Employee", employee_id)
        return employee

    async def delete(self, employee_id: int) -> int:
        self._employees.pop(employee_id, None)
        return employee_id

    async def list_all(self) -> list[Employee]:
        return list(self._employees.values())

    async def subordinates_of(self, supervisor_id: int) -> list[Employee]:
        return [
            employee
            for employee in self._employees.values()
            if employee.supervisor_id == supervisor_id
        ]

    # ── Departments ──────────────────────────────────────────────

    async def add_department(self, department: Department) -> int:
        self._departments[department.id] = department
        return department.id

    async def get_department(self, department_id: int) -> Department | None:
        return self._departments.get(department_id)

    async def members_of(self, department_id: int) -> list[Employee]:
        department = self._departments.get(department_id)
        if department is None:
            raise EntityNotFoundError("Department", department_id)
        return [
            self._employees[member_id]
            for member_id in sorted(department.member_ids)
            if member_id in self._employees
        ]

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._employees.clear()
        self._departments.clear()
        self.save_count = 0

    def __len__(self) -> int:
        return len(self._employees)
