"""bootstrap_hr_core — one-call wiring for the publisher, observers and manager."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .commands.manager import HRCommandManager
from .config import HRCoreConfig
from .events.observers import AuditLogObserver, NotificationObserver
from .events.publisher import EmployeeEventPublisher

if TYPE_CHECKING:
    from .ports.notification import INotificationSender
    from .ports.observer import IEmployeeEventObserver

logger = logging.getLogger("hr_core.bootstrap")


class HRCoreBootstrapResult:
    """Container returned by :func:`bootstrap_hr_core`.

    Attributes:
        publisher: The event publisher with the built-in observers registered.
        manager: A fresh command manager.
    """

    def __init__(
        self,
        publisher: EmployeeEventPublisher,
        manager: HRCommandManager,
    ) -> None:
        self.publisher = publisher
        self.manager = manager


def bootstrap_hr_core(
    config: HRCoreConfig | None = None,
    *,
    sender: INotificationSender | None = None,
    extra_observers: list[IEmployeeEventObserver] | None = None,
) -> HRCoreBootstrapResult:
    """Create and connect the core components.

    1. Creates the :class:`EmployeeEventPublisher` from ``config.publisher``.
    2. Registers :class:`AuditLogObserver` and :class:`NotificationObserver`
       (each can be switched off in the config), then ``extra_observers``
       in the given order.
    3. Creates the :class:`HRCommandManager`.

    Example::

        core = bootstrap_hr_core(sender=email_gateway)
        command = PromoteEmployeeCommand(
            employee, "Team Lead", repository=repository, publisher=core.publisher
        )
        await core.manager.execute_command(command)
    """
    config = config or HRCoreConfig()

    publisher = EmployeeEventPublisher(config.publisher)
    if config.enable_audit_log:
        publisher.register(AuditLogObserver())
    if config.enable_notifications:
        publisher.register(NotificationObserver(sender, config.notifications))
    for observer in extra_observers or []:
        publisher.register(observer)

    manager = HRCommandManager()
    logger.info(
        "hr-core bootstrapped with %d observer(s)", len(publisher.observers)
    )
    return HRCoreBootstrapResult(publisher=publisher, manager=manager)
