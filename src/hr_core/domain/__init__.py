"""Domain layer: records, events, salary strategies."""

from __future__ import annotations

# Absolute imports: import-graph tools resolve ``.events`` in a package
# ``__init__`` against the parent package, i.e. ``hr_core.events``.
from hr_core.domain.employee import Department, Employee
from hr_core.domain.events import EmployeeEvent, EmployeeEventType
from hr_core.domain.salary import (
    AnnualRaiseStrategy,
    PromotionBonusStrategy,
    SalaryAdjustmentStrategy,
    create_salary_strategy,
)

__all__ = [
    "AnnualRaiseStrategy",
    "Department",
    "Employee",
    "EmployeeEvent",
    "EmployeeEventType",
    "PromotionBonusStrategy",
    "SalaryAdjustmentStrategy",
    "create_salary_strategy",
]
