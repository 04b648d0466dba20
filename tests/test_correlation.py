"""Tests for correlation ID propagation."""

from __future__ import annotations

import pytest

from hr_core.correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from hr_core.domain.events import EmployeeEvent, EmployeeEventType


def test_no_correlation_id_by_default() -> None:
    assert get_correlation_id() is None


def test_generated_ids_are_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


def test_scope_generates_and_restores() -> None:
    with correlation_scope() as cid:
        assert cid
        assert get_correlation_id() == cid

    assert get_correlation_id() is None


def test_scope_reuses_active_id() -> None:
    set_correlation_id("outer")

    with correlation_scope() as cid:
        assert cid == "outer"

    assert get_correlation_id() == "outer"


def test_explicit_id_wins_and_outer_is_restored() -> None:
    set_correlation_id("outer")

    with correlation_scope("inner") as cid:
        assert cid == "inner"
        assert get_correlation_id() == "inner"

    assert get_correlation_id() == "outer"


@pytest.mark.asyncio
async def test_observers_see_publishing_correlation_id(employee, publisher, recorder) -> None:
    with correlation_scope("req-1"):
        publisher.publish(
            EmployeeEvent.for_employee(employee, EmployeeEventType.HIRED, "Hired")
        )
    await publisher.drain()

    assert recorder.events[0].correlation_id == "req-1"
