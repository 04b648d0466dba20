"""Built-in observers: audit log and outbound notifications."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from ..config import NotificationConfig
from ..ports.notification import Notification

if TYPE_CHECKING:
    from ..domain.events import EmployeeEvent, EmployeeEventType
    from ..ports.notification import INotificationSender

_audit_log = logging.getLogger("hr_core.audit")
_notification_log = logging.getLogger("hr_core.notifications")


class AuditLogObserver:
    """Records every event as one JSON log line.

    Entries go to the ``hr_core.audit`` logger unless another logger is
    supplied.  Rendering problems are logged at debug level and dropped;
    this observer never raises.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _audit_log

    def is_interested_in(self, event_type: EmployeeEventType) -> bool:  # noqa: ARG002
        return True

    async def on_event(self, event: EmployeeEvent) -> None:
        try:
            entry = {
                "event_type": event.event_type.name,
                "employee_id": event.employee_id,
                "employee_name": event.employee_name,
                "details": event.details,
                "old_value": event.old_value,
                "new_value": event.new_value,
                "occurred_at": event.occurred_at.isoformat(),
                "event_id": event.event_id,
                "correlation_id": event.correlation_id,
            }
            self._log.info("AUDIT: %s", json.dumps(entry, default=str))
        except Exception:  # noqa: BLE001
            _audit_log.debug("Failed to emit audit entry", exc_info=True)


class NotificationObserver:
    """Sends an outbound notification for hires, promotions and terminations.

    With no sender configured the notification is only logged, which is the
    expected setup for development.  Sender failures are logged per channel
    and never propagate.
    """

    def __init__(
        self,
        sender: INotificationSender | None = None,
        config: NotificationConfig | None = None,
    ) -> None:
        self._sender = sender
        self._config = config or NotificationConfig()

    def is_interested_in(self, event_type: EmployeeEventType) -> bool:
        return event_type in self._config.event_types

    async def on_event(self, event: EmployeeEvent) -> None:
        try:
            _notification_log.info(
                "NOTIFICATION: %s event for employee %s - %s",
                event.event_type.name,
                event.employee_name,
                event.details,
            )
            notifications = self._render(event)
        except Exception:  # noqa: BLE001
            _notification_log.exception(
                "Failed to render notification for event %s", event.event_id
            )
            return
        await self._send_notifications(event, notifications)

    def _render(self, event: EmployeeEvent) -> list[Notification]:
        subject = f"{event.event_type.name.title()}: {event.employee_name}"
        body = _render_body(event)
        return [
            Notification(
                employee_id=event.employee_id,
                channel=channel,
                subject=subject,
                body=body,
                event_id=event.event_id,
            )
            for channel in self._config.channels
        ]

    async def _send_notifications(
        self, event: EmployeeEvent, notifications: list[Notification]
    ) -> None:
        for notification in notifications:
            channel = notification.channel
            if self._sender is None:
                _notification_log.info(
                    "Sending notification %s for event: %s",
                    channel.value,
                    event.event_type.name,
                )
                continue
            try:
                await self._sender.send(notification)
            except Exception:  # noqa: BLE001
                _notification_log.exception(
                    "Failed to send %s notification for event %s",
                    channel.value,
                    event.event_id,
                )


def _render_body(event: EmployeeEvent) -> str:
    body = event.details
    if event.old_value is not None or event.new_value is not None:
        body += f" ({event.old_value} -> {event.new_value})"
    return body
