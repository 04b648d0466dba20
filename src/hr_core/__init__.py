"""hr-core — reversible employee commands with asynchronous event fan-out.

In-process only: commands mutate records held by the caller, persist them
through a single ``save`` port and publish immutable events to observers.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryEmployeeRepository, InMemoryNotificationSender
from .bootstrap import HRCoreBootstrapResult, bootstrap_hr_core

# ── Commands ────────────────────────────────────────────────────
from .commands import (
    AdjustSalaryCommand,
    AssignSupervisorCommand,
    ChangeDepartmentCommand,
    CommandState,
    DepartmentChange,
    HRCommand,
    HRCommandManager,
    PromoteEmployeeCommand,
)
from .config import HRCoreConfig, NotificationConfig, PublisherConfig
from .correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    AnnualRaiseStrategy,
    Department,
    Employee,
    EmployeeEvent,
    EmployeeEventType,
    PromotionBonusStrategy,
    SalaryAdjustmentStrategy,
    create_salary_strategy,
)

# ── Events ──────────────────────────────────────────────────────
from .events import AuditLogObserver, EmployeeEventPublisher, NotificationObserver

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    IEmployeeEventObserver,
    IEmployeePersistence,
    IHRCommand,
    INotificationSender,
    Notification,
    NotificationChannel,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    AlreadyExecutedError,
    CommandHistoryError,
    CommandStateError,
    DomainError,
    EmptyHistoryError,
    EntityNotFoundError,
    EventPublicationError,
    HRCoreError,
    InfrastructureError,
    InvalidSelfReferenceError,
    NotExecutedError,
    NotFoundError,
    NotUndoableError,
    PersistenceError,
)

__all__: list[str] = [
    # Domain
    "AnnualRaiseStrategy",
    "Department",
    "Employee",
    "EmployeeEvent",
    "EmployeeEventType",
    "PromotionBonusStrategy",
    "SalaryAdjustmentStrategy",
    "create_salary_strategy",
    # Commands
    "AdjustSalaryCommand",
    "AssignSupervisorCommand",
    "ChangeDepartmentCommand",
    "CommandState",
    "DepartmentChange",
    "HRCommand",
    "HRCommandManager",
    "PromoteEmployeeCommand",
    # Events
    "AuditLogObserver",
    "EmployeeEventPublisher",
    "NotificationObserver",
    # Ports
    "IEmployeeEventObserver",
    "IEmployeePersistence",
    "IHRCommand",
    "INotificationSender",
    "Notification",
    "NotificationChannel",
    # Config & wiring
    "HRCoreBootstrapResult",
    "HRCoreConfig",
    "NotificationConfig",
    "PublisherConfig",
    "bootstrap_hr_core",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    # Primitives
    "AlreadyExecutedError",
    "CommandHistoryError",
    "CommandStateError",
    "DomainError",
    "EmptyHistoryError",
    "EntityNotFoundError",
    "EventPublicationError",
    "HRCoreError",
    "InfrastructureError",
    "InvalidSelfReferenceError",
    "NotExecutedError",
    "NotFoundError",
    "NotUndoableError",
    "PersistenceError",
    # Adapters
    "InMemoryEmployeeRepository",
    "InMemoryNotificationSender",
]
