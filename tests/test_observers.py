"""Tests for AuditLogObserver and NotificationObserver."""

from __future__ import annotations

import json
import logging

import pytest

from hr_core.adapters.memory import InMemoryNotificationSender
from hr_core.config import NotificationConfig
from hr_core.domain.events import EmployeeEvent, EmployeeEventType
from hr_core.events.observers import AuditLogObserver, NotificationObserver
from hr_core.ports.notification import Notification, NotificationChannel


class BrokenSender:
    def __init__(self) -> None:
        self.attempts = 0

    async def send(self, notification: Notification) -> None:
        self.attempts += 1
        raise ConnectionError("smtp down")


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


def make_event(event_type: EmployeeEventType = EmployeeEventType.PROMOTED) -> EmployeeEvent:
    return EmployeeEvent(
        employee_id=7,
        employee_name="John Doe",
        event_type=event_type,
        details="Employee promoted via command",
        old_value="Developer",
        new_value="Senior Developer",
    )


class TestAuditLogObserver:
    def test_interested_in_everything(self) -> None:
        observer = AuditLogObserver()

        assert all(observer.is_interested_in(t) for t in EmployeeEventType)

    @pytest.mark.asyncio
    async def test_writes_one_json_entry(self, caplog: pytest.LogCaptureFixture) -> None:
        event = make_event()

        with caplog.at_level(logging.INFO, logger="hr_core.audit"):
            await AuditLogObserver().on_event(event)

        records = [r for r in caplog.records if r.name == "hr_core.audit"]
        assert len(records) == 1
        message = records[0].getMessage()
        assert message.startswith("AUDIT: ")
        entry = json.loads(message.removeprefix("AUDIT: "))
        assert entry["event_type"] == "PROMOTED"
        assert entry["employee_id"] == 7
        assert entry["old_value"] == "Developer"
        assert entry["new_value"] == "Senior Developer"
        assert entry["event_id"] == event.event_id

    @pytest.mark.asyncio
    async def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        custom = logging.getLogger("tests.audit")

        with caplog.at_level(logging.INFO, logger="tests.audit"):
            await AuditLogObserver(logger=custom).on_event(make_event())

        assert [r.name for r in caplog.records] == ["tests.audit"]


class TestNotificationObserver:
    @pytest.mark.parametrize(
        ("event_type", "expected"),
        [
            (EmployeeEventType.HIRED, True),
            (EmployeeEventType.PROMOTED, True),
            (EmployeeEventType.TERMINATED, True),
            (EmployeeEventType.SALARY_ADJUSTED, False),
            (EmployeeEventType.DEPARTMENT_CHANGED, False),
            (EmployeeEventType.SUPERVISOR_ASSIGNED, False),
        ],
    )
    def test_default_interest(self, event_type, expected) -> None:
        assert NotificationObserver().is_interested_in(event_type) is expected

    def test_configured_interest(self) -> None:
        config = NotificationConfig(
            event_types=frozenset({EmployeeEventType.SALARY_ADJUSTED})
        )
        observer = NotificationObserver(config=config)

        assert observer.is_interested_in(EmployeeEventType.SALARY_ADJUSTED)
        assert not observer.is_interested_in(EmployeeEventType.HIRED)

    @pytest.mark.asyncio
    async def test_sends_email_and_sms(self) -> None:
        sender = InMemoryNotificationSender()
        event = make_event()

        await NotificationObserver(sender).on_event(event)

        sender.assert_sent(7, NotificationChannel.EMAIL)
        sender.assert_sent(7, NotificationChannel.SMS)
        email = sender.sent[0]
        assert email.subject == "Promoted: John Doe"
        assert email.body == "Employee promoted via command (Developer -> Senior Developer)"
        assert email.event_id == event.event_id

    @pytest.mark.asyncio
    async def test_configured_channels(self) -> None:
        sender = InMemoryNotificationSender()
        config = NotificationConfig(channels=(NotificationChannel.SMS,))

        await NotificationObserver(sender, config).on_event(make_event())

        sender.assert_sent(7, NotificationChannel.SMS)
        sender.assert_sent(7, NotificationChannel.EMAIL, count=0)

    @pytest.mark.asyncio
    async def test_sender_failure_is_contained(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        sender = BrokenSender()

        with caplog.at_level(logging.ERROR, logger="hr_core.notifications"):
            await NotificationObserver(sender).on_event(make_event())

        assert sender.attempts == 2
        assert sum("Failed to send" in r.getMessage() for r in caplog.records) == 2

    @pytest.mark.asyncio
    async def test_rendering_failure_is_contained(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        sender = InMemoryNotificationSender()
        event = make_event().model_copy(update={"new_value": Unprintable()})

        with caplog.at_level(logging.ERROR, logger="hr_core.notifications"):
            await NotificationObserver(sender).on_event(event)

        assert sender.sent == []
        assert any("Failed to render notification" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_without_sender_only_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="hr_core.notifications"):
            await NotificationObserver().on_event(make_event(EmployeeEventType.HIRED))

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("NOTIFICATION: HIRED event for employee John Doe") for m in messages)
        assert "Sending notification email for event: HIRED" in messages
        assert "Sending notification sms for event: HIRED" in messages


def test_in_memory_sender_assert_sent_reports_mismatch() -> None:
    sender = InMemoryNotificationSender()

    with pytest.raises(AssertionError, match="found 0"):
        sender.assert_sent(1, NotificationChannel.EMAIL)
