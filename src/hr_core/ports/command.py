"""IHRCommand — protocol for reversible operations on employee records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IHRCommand(Protocol):
    """
    Port for a single reversible operation.

    ``execute`` and ``undo`` complete synchronously from the caller's point
    of view: awaiting them returns once the record has been mutated,
    persisted and the resulting event handed to the publisher.
    """

    async def execute(self) -> None:
        """Apply the operation forward."""
        ...

    async def undo(self) -> None:
        """Reverse the effect of the last successful ``execute``."""
        ...

    def can_undo(self) -> bool:
        """Return True if ``undo`` is currently allowed."""
        ...

    def describe(self) -> str:
        """Human-readable description used in logs and history listings."""
        ...
