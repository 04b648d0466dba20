"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    AlreadyExecutedError,
    CommandHistoryError,
    CommandStateError,
    DomainError,
    EmptyHistoryError,
    EntityNotFoundError,
    EventPublicationError,
    HRCoreError,
    InfrastructureError,
    InvalidSelfReferenceError,
    NotExecutedError,
    NotFoundError,
    NotUndoableError,
    PersistenceError,
)

__all__ = [
    "AlreadyExecutedError",
    "CommandHistoryError",
    "CommandStateError",
    "DomainError",
    "EmptyHistoryError",
    "EntityNotFoundError",
    "EventPublicationError",
    "HRCoreError",
    "InfrastructureError",
    "InvalidSelfReferenceError",
    "NotExecutedError",
    "NotFoundError",
    "NotUndoableError",
    "PersistenceError",
]
