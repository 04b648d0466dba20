"""IEmployeePersistence — write-back port used by commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.employee import Employee


@runtime_checkable
class IEmployeePersistence(Protocol):
    """
    Port for persisting the current state of an employee record.

    Commands call ``save`` after every mutation, passing the very object
    they hold a reference to.  The core never queries through this port.
    Implementations either complete or raise; whatever they raise reaches
    the caller of the command unchanged.
    """

    async def save(self, employee: Employee) -> None: ...
