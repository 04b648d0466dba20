"""Domain and infrastructure exceptions for hr-core."""

from __future__ import annotations


class HRCoreError(Exception):
    """Root exception for the entire hr-core package."""


class DomainError(HRCoreError):
    """Base class for all domain-related errors."""


class InvalidSelfReferenceError(DomainError, ValueError):
    """Raised when a record would reference itself as its own supervisor."""

    def __init__(self, entity_id: object) -> None:
        self.entity_id = entity_id
        super().__init__(f"Employee {entity_id!r} cannot be their own supervisor")


class NotFoundError(DomainError):
    """Raised when a record or resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


# ── Command lifecycle ────────────────────────────────────────────────


class CommandStateError(HRCoreError):
    """Base class for execute/undo called in the wrong command state."""

    def __init__(self, description: str, message: str) -> None:
        self.description = description
        super().__init__(f"{message}: {description}")


class AlreadyExecutedError(CommandStateError):
    """Raised when ``execute()`` is called on an executed command."""

    def __init__(self, description: str) -> None:
        super().__init__(description, "Command already executed")


class NotExecutedError(CommandStateError):
    """Raised when ``undo()`` is called on a command that is not executed."""

    def __init__(self, description: str) -> None:
        super().__init__(description, "Cannot undo command that wasn't executed")


class CommandHistoryError(HRCoreError):
    """Base class for command manager history errors."""


class EmptyHistoryError(CommandHistoryError):
    """Raised when an undo is requested with nothing in the history."""

    def __init__(self) -> None:
        super().__init__("No commands to undo")


class NotUndoableError(CommandHistoryError):
    """Raised when the most recent command refuses to be undone."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Last command cannot be undone: {description}")


# ── Infrastructure ───────────────────────────────────────────────────


class InfrastructureError(HRCoreError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for errors raised by persistence adapters.

    Commands never wrap or translate these; whatever the port raises
    reaches the caller unchanged.
    """


class EventPublicationError(InfrastructureError):
    """Raised when an event cannot be scheduled for delivery."""
