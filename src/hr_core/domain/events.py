"""EmployeeEvent — immutable notification of a completed state change."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from ..correlation import get_correlation_id

if TYPE_CHECKING:
    from .employee import Employee


class EmployeeEventType(str, Enum):
    """Category of an employee state change."""

    HIRED = "hired"
    PROMOTED = "promoted"
    SALARY_ADJUSTED = "salary_adjusted"
    DEPARTMENT_CHANGED = "department_changed"
    SUPERVISOR_ASSIGNED = "supervisor_assigned"
    TERMINATED = "terminated"


class EmployeeEvent(BaseModel):
    """An immutable record of one change to one employee.

    ``old_value`` and ``new_value`` are untyped on purpose: a promotion
    carries job titles, a supervisor assignment carries supervisor ids and
    a salary adjustment carries decimals.

    Build events with :meth:`for_employee` so the record reference and the
    display name are taken from the same object::

        event = EmployeeEvent.for_employee(
            employee,
            EmployeeEventType.PROMOTED,
            "Employee promoted via command",
            old_value="Developer",
            new_value="Senior Developer",
        )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: str | None = Field(default_factory=get_correlation_id)
    employee_id: int
    employee_name: str
    event_type: EmployeeEventType
    details: str = ""
    old_value: Any = None
    new_value: Any = None

    @classmethod
    def for_employee(
        cls,
        employee: Employee,
        event_type: EmployeeEventType,
        details: str,
        *,
        old_value: Any = None,
        new_value: Any = None,
    ) -> EmployeeEvent:
        return cls(
            employee_id=employee.id,
            employee_name=employee.full_name,
            event_type=event_type,
            details=details,
            old_value=old_value,
            new_value=new_value,
        )

    def __str__(self) -> str:
        return (
            f"EmployeeEvent{{employee={self.employee_name}, "
            f"event_type={self.event_type.name}, timestamp={self.occurred_at}, "
            f"details='{self.details}'}}"
        )
