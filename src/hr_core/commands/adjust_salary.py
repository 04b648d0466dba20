"""AdjustSalaryCommand — applies a salary strategy reversibly."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.events import EmployeeEventType
from .base import HRCommand

if TYPE_CHECKING:
    from decimal import Decimal

    from ..domain.employee import Employee
    from ..domain.salary import SalaryAdjustmentStrategy
    from ..events.publisher import EmployeeEventPublisher
    from ..ports.persistence import IEmployeePersistence


class AdjustSalaryCommand(HRCommand):
    """Sets the salary to whatever ``strategy`` computes at execute time."""

    def __init__(
        self,
        employee: Employee,
        strategy: SalaryAdjustmentStrategy,
        repository: IEmployeePersistence,
        publisher: EmployeeEventPublisher,
    ) -> None:
        super().__init__(employee, repository, publisher)
        self._strategy = strategy
        self._previous_salary: Decimal = employee.salary
        self._new_salary: Decimal | None = None

    @property
    def new_salary(self) -> Decimal | None:
        """Salary applied by the last execute, ``None`` before that."""
        return self._new_salary

    async def execute(self) -> None:
        self._ensure_pending()

        employee = self._employee
        self._previous_salary = employee.salary
        self._new_salary = self._strategy.adjust_salary(employee)
        employee.salary = self._new_salary

        await self._save_or_rollback(salary=self._previous_salary)
        self._mark_executed()
        self._publish(
            EmployeeEventType.SALARY_ADJUSTED,
            "Salary adjusted via strategy",
            self._previous_salary,
            self._new_salary,
        )

    async def undo(self) -> None:
        self._ensure_executed()

        employee = self._employee
        adjusted_salary = employee.salary
        employee.salary = self._previous_salary

        await self._save_or_rollback(salary=adjusted_salary)
        self._mark_pending()
        self._publish(
            EmployeeEventType.SALARY_ADJUSTED,
            "Salary adjustment undone",
            self._new_salary,
            self._previous_salary,
        )

    def describe(self) -> str:
        return f"Adjust salary of {self._employee.full_name} using {self._strategy!r}"
