"""Event publication and the built-in observers."""

from __future__ import annotations

from .observers import AuditLogObserver, NotificationObserver
from .publisher import EmployeeEventPublisher

__all__ = [
    "AuditLogObserver",
    "EmployeeEventPublisher",
    "NotificationObserver",
]
