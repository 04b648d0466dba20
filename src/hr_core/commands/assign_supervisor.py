"""AssignSupervisorCommand — reassigns an employee's supervisor."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from ..domain.events import EmployeeEventType
from ..primitives.exceptions import InvalidSelfReferenceError
from .base import HRCommand

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.employee import Employee
    from ..events.publisher import EmployeeEventPublisher
    from ..ports.persistence import IEmployeePersistence


class AssignSupervisorCommand(HRCommand):
    """Makes ``new_supervisor`` the supervisor of ``employee`` as of today.

    Events carry supervisor identities as old/new values.  ``undo`` puts
    back the previous supervisor and start date verbatim, clearing both
    when the employee had no supervisor before.
    """

    def __init__(
        self,
        employee: Employee,
        new_supervisor: Employee,
        repository: IEmployeePersistence,
        publisher: EmployeeEventPublisher,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(employee, repository, publisher)
        self._new_supervisor = new_supervisor
        self._clock = clock
        self._previous_supervisor_id: int | None = None
        self._previous_supervisor_since: date | None = None

    @property
    def new_supervisor(self) -> Employee:
        return self._new_supervisor

    async def execute(self) -> None:
        self._ensure_pending()

        employee = self._employee
        if employee.id == self._new_supervisor.id:
            raise InvalidSelfReferenceError(employee.id)

        self._previous_supervisor_id = employee.supervisor_id
        self._previous_supervisor_since = employee.supervisor_since

        employee.assign_supervisor(self._new_supervisor.id, since=self._clock())

        await self._save_or_rollback(
            supervisor_id=self._previous_supervisor_id,
            supervisor_since=self._previous_supervisor_since,
        )
        self._mark_executed()
        self._publish(
            EmployeeEventType.SUPERVISOR_ASSIGNED,
            "Supervisor assigned via command",
            self._previous_supervisor_id,
            self._new_supervisor.id,
        )

    async def undo(self) -> None:
        self._ensure_executed()

        employee = self._employee
        assigned_id = employee.supervisor_id
        assigned_since = employee.supervisor_since

        if self._previous_supervisor_id is not None:
            employee.assign_supervisor(
                self._previous_supervisor_id, since=self._previous_supervisor_since
            )
        else:
            employee.clear_supervisor()

        await self._save_or_rollback(
            supervisor_id=assigned_id, supervisor_since=assigned_since
        )
        self._mark_pending()
        self._publish(
            EmployeeEventType.SUPERVISOR_ASSIGNED,
            "Supervisor assignment undone",
            self._new_supervisor.id,
            self._previous_supervisor_id,
        )

    def describe(self) -> str:
        return (
            f"Assign {self._new_supervisor.full_name} as supervisor "
            f"of {self._employee.full_name}"
        )
