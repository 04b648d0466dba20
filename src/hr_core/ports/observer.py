"""IEmployeeEventObserver — listener protocol for the event publisher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from ..domain.events import EmployeeEvent, EmployeeEventType


@runtime_checkable
class IEmployeeEventObserver(Protocol):
    """
    Protocol for objects notified about employee events.

    ``is_interested_in`` is asked once per published event, synchronously,
    inside ``publish``.  ``on_event`` runs later in its own task and may be
    a coroutine or a plain function.
    """

    def is_interested_in(self, event_type: EmployeeEventType) -> bool:
        """Return True if this observer wants events of *event_type*."""
        ...

    def on_event(self, event: EmployeeEvent) -> Awaitable[None] | None:
        """React to a published event."""
        ...
