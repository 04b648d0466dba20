"""Ports: protocols the core depends on or exposes."""

from __future__ import annotations

from .command import IHRCommand
from .notification import INotificationSender, Notification, NotificationChannel
from .observer import IEmployeeEventObserver
from .persistence import IEmployeePersistence

__all__ = [
    "IEmployeeEventObserver",
    "IEmployeePersistence",
    "IHRCommand",
    "INotificationSender",
    "Notification",
    "NotificationChannel",
]
