"""PromoteEmployeeCommand — new job title plus an optional raise."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from ..domain.events import EmployeeEventType
from .base import HRCommand

if TYPE_CHECKING:
    from ..domain.employee import Employee
    from ..events.publisher import EmployeeEventPublisher
    from ..ports.persistence import IEmployeePersistence


class PromoteEmployeeCommand(HRCommand):
    """Changes an employee's job title and optionally raises their salary.

    The raise is applied only when ``salary_increase`` is strictly
    positive; zero, negative or missing increases leave the salary as is.
    ``undo`` restores both the title and the salary captured at execute
    time, whether or not a raise was applied.
    """

    def __init__(
        self,
        employee: Employee,
        new_job_title: str,
        salary_increase: Decimal | None = None,
        *,
        repository: IEmployeePersistence,
        publisher: EmployeeEventPublisher,
    ) -> None:
        if not new_job_title or not new_job_title.strip():
            raise ValueError("new_job_title must not be empty")
        super().__init__(employee, repository, publisher)
        self._new_job_title = new_job_title
        self._salary_increase = salary_increase
        self._previous_job_title: str | None = None
        self._previous_salary: Decimal = employee.salary

    @property
    def new_job_title(self) -> str:
        return self._new_job_title

    @property
    def salary_increase(self) -> Decimal | None:
        return self._salary_increase

    async def execute(self) -> None:
        self._ensure_pending()

        employee = self._employee
        self._previous_job_title = employee.job_title
        self._previous_salary = employee.salary

        employee.job_title = self._new_job_title
        if self._salary_increase is not None and self._salary_increase > 0:
            employee.salary = employee.salary + self._salary_increase

        await self._save_or_rollback(
            job_title=self._previous_job_title,
            salary=self._previous_salary,
        )
        self._mark_executed()
        self._publish(
            EmployeeEventType.PROMOTED,
            "Employee promoted via command",
            self._previous_job_title,
            self._new_job_title,
        )

    async def undo(self) -> None:
        self._ensure_executed()

        employee = self._employee
        promoted_title = employee.job_title
        promoted_salary = employee.salary

        employee.job_title = self._previous_job_title
        employee.salary = self._previous_salary

        await self._save_or_rollback(job_title=promoted_title, salary=promoted_salary)
        self._mark_pending()
        self._publish(
            EmployeeEventType.PROMOTED,
            "Employee promotion undone",
            self._new_job_title,
            self._previous_job_title,
        )

    def describe(self) -> str:
        previous = (
            self._previous_job_title if self.executed else self._employee.job_title
        )
        return (
            f"Promote {self._employee.full_name} "
            f"from {previous} to {self._new_job_title}"
        )
