"""Reversible commands and the manager that runs them."""

from __future__ import annotations

from .adjust_salary import AdjustSalaryCommand
from .assign_supervisor import AssignSupervisorCommand
from .base import CommandState, HRCommand
from .change_department import ChangeDepartmentCommand, DepartmentChange
from .manager import HRCommandManager
from .promote import PromoteEmployeeCommand

__all__ = [
    "AdjustSalaryCommand",
    "AssignSupervisorCommand",
    "ChangeDepartmentCommand",
    "CommandState",
    "DepartmentChange",
    "HRCommand",
    "HRCommandManager",
    "PromoteEmployeeCommand",
]
