"""Shared state handling for reversible employee commands."""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..domain.events import EmployeeEvent, EmployeeEventType
from ..primitives.exceptions import AlreadyExecutedError, NotExecutedError

if TYPE_CHECKING:
    from ..domain.employee import Employee
    from ..events.publisher import EmployeeEventPublisher
    from ..ports.persistence import IEmployeePersistence

logger = logging.getLogger("hr_core.commands")


class CommandState(str, Enum):
    """Execution state of a single command instance."""

    PENDING = "pending"
    EXECUTED = "executed"


class HRCommand(ABC):
    """Base for commands that mutate one employee and can be reversed.

    A command is bound to its target record, the persistence port and the
    publisher at construction.  The state needed to reverse it is captured
    when ``execute`` runs, not before.

    Lifecycle::

        PENDING --execute()--> EXECUTED --undo()--> PENDING

    An undone command may be executed again; it captures a fresh snapshot
    each time.  If the persistence port raises, or the call is cancelled
    while saving, the in-memory record is put back the way it was before
    the call and the state does not change.

    The state flips as soon as the save succeeds, before the event is
    published.  A publication failure therefore still reaches the caller,
    but the command already reports the state the persisted record is in.
    """

    def __init__(
        self,
        employee: Employee,
        repository: IEmployeePersistence,
        publisher: EmployeeEventPublisher,
    ) -> None:
        self.command_id = str(uuid.uuid4())
        self._employee = employee
        self._repository = repository
        self._publisher = publisher
        self._state = CommandState.PENDING

    @property
    def employee(self) -> Employee:
        return self._employee

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    def executed(self) -> bool:
        return self._state is CommandState.EXECUTED

    def can_undo(self) -> bool:
        return self.executed

    @abstractmethod
    async def execute(self) -> None: ...

    @abstractmethod
    async def undo(self) -> None: ...

    @abstractmethod
    def describe(self) -> str: ...

    # ── Helpers for subclasses ───────────────────────────────────

    def _ensure_pending(self) -> None:
        if self.executed:
            raise AlreadyExecutedError(self.describe())

    def _ensure_executed(self) -> None:
        if not self.executed:
            raise NotExecutedError(self.describe())

    def _mark_executed(self) -> None:
        self._state = CommandState.EXECUTED

    def _mark_pending(self) -> None:
        self._state = CommandState.PENDING

    async def _save_or_rollback(self, **restore: Any) -> None:
        """Persist the record; on failure reset *restore* fields and re-raise.

        Cancellation counts as failure.
        """
        try:
            await self._repository.save(self._employee)
        except BaseException:
            for name, value in restore.items():
                setattr(self._employee, name, value)
            logger.warning(
                "Persisting employee %s failed; in-memory changes reverted",
                self._employee.id,
            )
            raise

    def _publish(
        self,
        event_type: EmployeeEventType,
        details: str,
        old_value: Any,
        new_value: Any,
    ) -> None:
        self._publisher.publish(
            EmployeeEvent.for_employee(
                self._employee,
                event_type,
                details,
                old_value=old_value,
                new_value=new_value,
            )
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.command_id}, state={self._state.value})"
