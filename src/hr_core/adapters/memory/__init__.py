"""Memory adapters for testing and development."""

from __future__ import annotations

from .notifications import InMemoryNotificationSender
from .repository import InMemoryEmployeeRepository

__all__ = ["InMemoryEmployeeRepository", "InMemoryNotificationSender"]
