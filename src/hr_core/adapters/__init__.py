"""Adapters implementing the core ports."""

from __future__ import annotations

from .memory import InMemoryEmployeeRepository, InMemoryNotificationSender

__all__ = ["InMemoryEmployeeRepository", "InMemoryNotificationSender"]
