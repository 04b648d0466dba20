from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from hr_core.adapters.memory import InMemoryEmployeeRepository
from hr_core.correlation import set_correlation_id
from hr_core.domain.employee import Employee
from hr_core.domain.events import EmployeeEvent, EmployeeEventType
from hr_core.events.publisher import EmployeeEventPublisher
from hr_core.primitives.exceptions import PersistenceError

# ── Test doubles ─────────────────────────────────────────────────────


class RecordingObserver:
    """Observer that keeps every event it receives."""

    def __init__(self, interested_in: set[EmployeeEventType] | None = None) -> None:
        self.events: list[EmployeeEvent] = []
        self._interested_in = interested_in

    def is_interested_in(self, event_type: EmployeeEventType) -> bool:
        return self._interested_in is None or event_type in self._interested_in

    async def on_event(self, event: EmployeeEvent) -> None:
        self.events.append(event)


class SpyPublisher(EmployeeEventPublisher):
    """Publisher that also records every ``publish`` call in order."""

    def __init__(self) -> None:
        super().__init__()
        self.published: list[EmployeeEvent] = []

    def publish(self, event: EmployeeEvent) -> None:
        self.published.append(event)
        super().publish(event)


class FailingRepository(InMemoryEmployeeRepository):
    """Repository whose n-th ``save`` call raises ``PersistenceError``."""

    def __init__(self, fail_on_call: int = 1) -> None:
        super().__init__()
        self.calls = 0
        self._fail_on_call = fail_on_call

    async def save(self, employee: Employee) -> None:
        self.calls += 1
        if self.calls == self._fail_on_call:
            raise PersistenceError("database unavailable")
        await super().save(employee)


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> None:
    set_correlation_id(None)


@pytest.fixture
def employee() -> Employee:
    return Employee(
        id=1,
        first_name="John",
        last_name="Doe",
        email="john.doe@company.com",
        job_title="Developer",
        salary=Decimal("50000"),
        hire_date=date.today(),
    )


@pytest.fixture
def supervisor() -> Employee:
    return Employee(
        id=2,
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@company.com",
        job_title="Team Lead",
        salary=Decimal("70000"),
    )


@pytest.fixture
def repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def publisher() -> SpyPublisher:
    return SpyPublisher()


@pytest.fixture
def recorder(publisher: SpyPublisher) -> RecordingObserver:
    """A catch-all observer already registered on ``publisher``."""
    observer = RecordingObserver()
    publisher.register(observer)
    return observer


@pytest.fixture
def failing_repository_factory() -> type[FailingRepository]:
    return FailingRepository
