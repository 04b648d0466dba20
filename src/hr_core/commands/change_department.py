"""ChangeDepartmentCommand — moves an employee into or out of a department."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..domain.events import EmployeeEventType
from .base import HRCommand

if TYPE_CHECKING:
    from ..domain.employee import Department, Employee
    from ..events.publisher import EmployeeEventPublisher
    from ..ports.persistence import IEmployeePersistence


class DepartmentChange(str, Enum):
    JOIN = "join"
    LEAVE = "leave"


class ChangeDepartmentCommand(HRCommand):
    """Adds ``employee`` to ``department`` or removes them from it.

    Both sides of the membership are updated.  Events carry the employee's
    department ids, sorted, before and after the change.  ``undo`` restores
    both membership sets exactly as captured at execute time.
    """

    def __init__(
        self,
        employee: Employee,
        department: Department,
        change: DepartmentChange,
        repository: IEmployeePersistence,
        publisher: EmployeeEventPublisher,
    ) -> None:
        super().__init__(employee, repository, publisher)
        self._department = department
        self._change = DepartmentChange(change)
        self._previous_department_ids: set[int] = set()
        self._previous_member_ids: set[int] = set()

    @property
    def department(self) -> Department:
        return self._department

    @property
    def change(self) -> DepartmentChange:
        return self._change

    async def execute(self) -> None:
        self._ensure_pending()

        employee = self._employee
        self._previous_department_ids = set(employee.department_ids)
        self._previous_member_ids = set(self._department.member_ids)

        if self._change is DepartmentChange.JOIN:
            employee.join_department(self._department)
        else:
            employee.leave_department(self._department)

        await self._save_memberships(
            self._previous_department_ids, self._previous_member_ids
        )
        self._mark_executed()
        self._publish(
            EmployeeEventType.DEPARTMENT_CHANGED,
            f"Employee {'joined' if self._change is DepartmentChange.JOIN else 'left'} "
            f"{self._department.name} via command",
            sorted(self._previous_department_ids),
            sorted(employee.department_ids),
        )

    async def undo(self) -> None:
        self._ensure_executed()

        employee = self._employee
        changed_department_ids = set(employee.department_ids)
        changed_member_ids = set(self._department.member_ids)

        employee.department_ids = set(self._previous_department_ids)
        self._department.member_ids = set(self._previous_member_ids)

        await self._save_memberships(changed_department_ids, changed_member_ids)
        self._mark_pending()
        self._publish(
            EmployeeEventType.DEPARTMENT_CHANGED,
            "Department change undone",
            sorted(changed_department_ids),
            sorted(employee.department_ids),
        )

    async def _save_memberships(
        self, restore_department_ids: set[int], restore_member_ids: set[int]
    ) -> None:
        try:
            await self._save_or_rollback(department_ids=restore_department_ids)
        except BaseException:
            self._department.member_ids = restore_member_ids
            raise

    def describe(self) -> str:
        verb = "Add" if self._change is DepartmentChange.JOIN else "Remove"
        preposition = "to" if self._change is DepartmentChange.JOIN else "from"
        return (
            f"{verb} {self._employee.full_name} {preposition} "
            f"department {self._department.name}"
        )
