"""EmployeeEventPublisher — non-blocking fan-out of employee events."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

from ..config import PublisherConfig
from ..primitives.exceptions import EventPublicationError

if TYPE_CHECKING:
    from ..domain.events import EmployeeEvent
    from ..ports.observer import IEmployeeEventObserver

logger = logging.getLogger("hr_core.events")


class EmployeeEventPublisher:
    """Process-wide channel that hands events to interested observers.

    ``publish`` is synchronous and returns as soon as one task per
    interested observer has been *scheduled*; it never waits for delivery.
    A failing, slow or hung observer cannot affect the publisher, the
    command that published, or any other observer.  When
    ``PublisherConfig.max_concurrency`` is set, the bound applies to each
    observer separately.

    The publisher keeps strong references to in-flight delivery tasks so
    they are not garbage collected mid-flight.  Call :meth:`drain` to wait
    for them, e.g. on shutdown or in tests.

    Usage::

        publisher = EmployeeEventPublisher()
        publisher.register(AuditLogObserver())
        publisher.register(NotificationObserver())

        publisher.publish(event)   # returns immediately
        await publisher.drain()    # optional: wait for deliveries
    """

    def __init__(self, config: PublisherConfig | None = None) -> None:
        self._config = config or PublisherConfig()
        self._observers: list[IEmployeeEventObserver] = []
        self._tasks: set[asyncio.Task[None]] = set()
        self._limits: dict[int, asyncio.Semaphore] = {}
        self._delivered = 0
        self._failed = 0

    # ── Registration ─────────────────────────────────────────────

    def register(self, observer: IEmployeeEventObserver) -> None:
        """Append an observer.  No de-duplication; there is no removal."""
        self._observers.append(observer)
        logger.debug("Registered observer %s", type(observer).__name__)

    # ── Publishing ───────────────────────────────────────────────

    def publish(self, event: EmployeeEvent) -> None:
        """Schedule delivery of *event* to every interested observer.

        Raises:
            EventPublicationError: If there is no running event loop.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as err:
            raise EventPublicationError(
                f"Cannot publish {event.event_type.name} event: no running event loop"
            ) from err

        scheduled = 0
        for observer in list(self._observers):
            if not self._is_interested(observer, event):
                continue
            task = loop.create_task(
                self._deliver(observer, event),
                name=f"employee-event-{event.event_id}-{type(observer).__name__}",
            )
            self._tasks.add(task)
            task.add_done_callback(self._on_delivery_done)
            scheduled += 1

        logger.debug(
            "Published %s event %s for employee %s to %d observer(s)",
            event.event_type.name,
            event.event_id,
            event.employee_id,
            scheduled,
        )

    def _is_interested(
        self, observer: IEmployeeEventObserver, event: EmployeeEvent
    ) -> bool:
        try:
            return bool(observer.is_interested_in(event.event_type))
        except Exception:  # noqa: BLE001
            self._failed += 1
            logger.exception(
                "Observer %s failed to report interest in %s",
                type(observer).__name__,
                event.event_type.name,
            )
            return False

    async def _deliver(
        self, observer: IEmployeeEventObserver, event: EmployeeEvent
    ) -> None:
        """Run one observer within the concurrency limit, containing failures."""
        async with self._limit_for(observer):
            try:
                result = observer.on_event(event)
                if isawaitable(result):
                    await result
            except Exception:  # noqa: BLE001
                self._failed += 1
                logger.exception(
                    "Error executing observer %s for event %s (%s)",
                    type(observer).__name__,
                    event.event_id,
                    event.event_type.name,
                )
            else:
                self._delivered += 1

    def _limit_for(
        self, observer: IEmployeeEventObserver
    ) -> contextlib.AbstractAsyncContextManager[Any]:
        limit = self._config.max_concurrency
        if limit is None:
            return contextlib.nullcontext()
        semaphore = self._limits.get(id(observer))
        if semaphore is None:
            semaphore = self._limits[id(observer)] = asyncio.Semaphore(limit)
        return semaphore

    def _on_delivery_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.debug("Delivery task %s was cancelled", task.get_name())

    # ── Lifecycle ────────────────────────────────────────────────

    async def drain(self) -> None:
        """Wait until every scheduled delivery has finished.

        Deliveries scheduled while draining are awaited as well.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ── Introspection ────────────────────────────────────────────

    @property
    def observers(self) -> list[IEmployeeEventObserver]:
        """Registered observers in registration order (copy)."""
        return list(self._observers)

    @property
    def pending_count(self) -> int:
        """Number of deliveries scheduled but not yet finished."""
        return len(self._tasks)

    @property
    def delivered_count(self) -> int:
        return self._delivered

    @property
    def failed_count(self) -> int:
        return self._failed
