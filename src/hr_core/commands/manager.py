"""HRCommandManager — executes commands and keeps the undo history."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ..correlation import correlation_scope
from ..primitives.exceptions import EmptyHistoryError, NotUndoableError

if TYPE_CHECKING:
    from ..ports.command import IHRCommand

logger = logging.getLogger("hr_core.commands")


class HRCommandManager:
    """Runs commands one at a time and undoes them in reverse order.

    The history is a last-in-first-out stack of successfully executed
    commands.  Every operation that touches it, including the execute or
    undo it surrounds, runs under a single ``asyncio.Lock``; concurrent
    callers are served one after another and a command on the stack is
    never mutated while its own undo is running.

    Create one manager per application and pass it to whoever needs it::

        manager = HRCommandManager()
        await manager.execute_command(
            PromoteEmployeeCommand(
                employee,
                "Senior Developer",
                Decimal("10000"),
                repository=repository,
                publisher=publisher,
            )
        )
        if manager.can_undo():
            await manager.undo_last()
    """

    def __init__(self) -> None:
        self._history: list[IHRCommand] = []
        self._lock = asyncio.Lock()

    async def execute_command(self, command: IHRCommand) -> None:
        """Execute *command* and push it on the history if it succeeds.

        Errors raised by the command propagate unchanged and leave the
        history untouched.
        """
        async with self._lock:
            with correlation_scope():
                try:
                    await command.execute()
                except Exception:
                    logger.exception("Failed to execute command: %s", command.describe())
                    raise
            self._history.append(command)
            logger.info("Executed command: %s", command.describe())

    async def undo_last(self) -> None:
        """Undo the most recent command.

        The command leaves the history only after its ``undo`` succeeds; on
        failure it stays on top so the caller can inspect it or retry.

        Raises:
            EmptyHistoryError: If there is nothing to undo.
            NotUndoableError: If the most recent command refuses undo.
        """
        async with self._lock:
            if not self._history:
                raise EmptyHistoryError()

            command = self._history[-1]
            if not command.can_undo():
                raise NotUndoableError(command.describe())

            with correlation_scope():
                try:
                    await command.undo()
                except Exception:
                    logger.exception("Failed to undo command: %s", command.describe())
                    raise
            self._history.pop()
            logger.info("Undid command: %s", command.describe())

    def can_undo(self) -> bool:
        return bool(self._history) and self._history[-1].can_undo()

    def history_size(self) -> int:
        return len(self._history)

    def history(self) -> list[str]:
        """Descriptions of the commands in the history, most recent first."""
        return [command.describe() for command in reversed(self._history)]

    async def clear_history(self) -> None:
        """Drop every history entry without undoing anything."""
        async with self._lock:
            self._history.clear()
            logger.info("Command history cleared")
