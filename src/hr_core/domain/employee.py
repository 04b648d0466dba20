"""Employee and Department records — the mutable entities commands adjust."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ..primitives.exceptions import InvalidSelfReferenceError


class Department(BaseModel):
    """A group employees can belong to.

    Memberships are kept as employee identities rather than embedded
    objects, so the record graph stays acyclic.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    description: str | None = None
    location: str | None = None
    head_id: int | None = None
    member_ids: set[int] = Field(default_factory=set)


class Employee(BaseModel):
    """A staff member.

    The supervisor relation is stored as the supervisor's identity plus the
    date it took effect.  Subordinates are not stored on the record; ask the
    repository for them (see ``InMemoryEmployeeRepository.subordinates_of``).

    Usage::

        employee = Employee(
            id=1,
            first_name="John",
            last_name="Doe",
            email="john.doe@company.com",
            job_title="Developer",
            salary=Decimal("50000"),
        )
        employee.assign_supervisor(2, since=date.today())
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int
    first_name: str
    last_name: str
    email: str
    job_title: str | None = None
    salary: Decimal = Decimal("0")
    hire_date: date | None = None
    phone: str | None = None
    office_location: str | None = None
    supervisor_id: int | None = None
    supervisor_since: date | None = None
    department_ids: set[int] = Field(default_factory=set)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    # ── Supervisor relation ──────────────────────────────────────

    def assign_supervisor(self, supervisor_id: int, since: date | None) -> None:
        """Point this record at a new supervisor."""
        if supervisor_id == self.id:
            raise InvalidSelfReferenceError(self.id)
        self.supervisor_id = supervisor_id
        self.supervisor_since = since

    def clear_supervisor(self) -> None:
        """Remove the supervisor relation together with its start date."""
        self.supervisor_id = None
        self.supervisor_since = None

    # ── Department memberships ───────────────────────────────────

    def join_department(self, department: Department) -> None:
        """Add a membership on both sides of the relation."""
        self.department_ids.add(department.id)
        department.member_ids.add(self.id)

    def leave_department(self, department: Department) -> None:
        self.department_ids.discard(department.id)
        department.member_ids.discard(self.id)
