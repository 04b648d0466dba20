"""Configuration for the publisher, observers and bootstrap wiring."""

from __future__ import annotations

from dataclasses import dataclass, field

from .domain.events import EmployeeEventType
from .ports.notification import NotificationChannel

DEFAULT_NOTIFICATION_EVENTS: frozenset[EmployeeEventType] = frozenset(
    {
        EmployeeEventType.HIRED,
        EmployeeEventType.PROMOTED,
        EmployeeEventType.TERMINATED,
    }
)


@dataclass(frozen=True, slots=True)
class PublisherConfig:
    """Configuration for :class:`EmployeeEventPublisher`.

    Attributes:
        max_concurrency: Upper bound on deliveries running at the same time
            for one observer.  ``None`` (the default) means unbounded.
            Deliveries over the bound are still scheduled immediately and
            wait for a free slot inside their own task; deliveries to other
            observers never wait on them.
    """

    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")


@dataclass(frozen=True, slots=True)
class NotificationConfig:
    """Configuration for :class:`NotificationObserver`.

    Attributes:
        event_types: Event categories that trigger a notification.
        channels: Channels each notification is sent through, in order.
    """

    event_types: frozenset[EmployeeEventType] = DEFAULT_NOTIFICATION_EVENTS
    channels: tuple[NotificationChannel, ...] = (
        NotificationChannel.EMAIL,
        NotificationChannel.SMS,
    )


@dataclass(frozen=True, slots=True)
class HRCoreConfig:
    """Top-level configuration consumed by :func:`bootstrap_hr_core`."""

    publisher: PublisherConfig = field(default_factory=PublisherConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    enable_audit_log: bool = True
    enable_notifications: bool = True
