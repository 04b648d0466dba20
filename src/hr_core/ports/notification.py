"""Outbound notification port used by ``NotificationObserver``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class NotificationChannel(Enum):
    """Supported notification channels."""

    EMAIL = "email"
    SMS = "sms"


@dataclass(frozen=True)
class Notification:
    """Immutable outbound message rendered from an employee event."""

    employee_id: int
    channel: NotificationChannel
    subject: str
    body: str
    event_id: str | None = None


@runtime_checkable
class INotificationSender(Protocol):
    """
    Port for delivering notifications (email gateway, SMS provider, ...).

    Senders may raise; the observer calling them contains the failure.
    """

    async def send(self, notification: Notification) -> None:
        """Send a single notification."""
        ...
