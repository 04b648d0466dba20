"""In-memory notification sender for test assertions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...ports.notification import Notification, NotificationChannel

logger = logging.getLogger("hr_core.notifications")


class InMemoryNotificationSender:
    """
    Test double (Fake) that stores notifications in a list for assertions.
    """

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    async def send(self, notification: Notification) -> None:
        self.sent.append(notification)
        logger.debug(
            "Captured %s notification for employee %s",
            notification.channel.value,
            notification.employee_id,
        )

    def assert_sent(
        self,
        employee_id: int,
        channel: NotificationChannel,
        count: int = 1,
    ) -> None:
        """Helper for test assertions."""
        matches = [
            n for n in self.sent if n.employee_id == employee_id and n.channel == channel
        ]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} notifications to employee {employee_id} via "
                f"{channel.value}, but found {len(matches)}."
            )

    def clear(self) -> None:
        self.sent.clear()
