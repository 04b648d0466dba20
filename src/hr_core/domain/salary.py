"""Salary adjustment strategies."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .employee import Employee


@runtime_checkable
class SalaryAdjustmentStrategy(Protocol):
    """Computes a new salary for an employee without mutating the record."""

    def adjust_salary(self, employee: Employee) -> Decimal: ...


class AnnualRaiseStrategy:
    """Raises the salary by a fractional rate (``0.05`` is five percent)."""

    def __init__(self, annual_rate: Decimal) -> None:
        self.annual_rate = Decimal(annual_rate)

    def adjust_salary(self, employee: Employee) -> Decimal:
        return employee.salary * (Decimal(1) + self.annual_rate)

    def __repr__(self) -> str:
        return f"AnnualRaiseStrategy(annual_rate={self.annual_rate})"


class PromotionBonusStrategy:
    """Adds a fixed bonus amount to the salary."""

    def __init__(self, bonus_amount: Decimal) -> None:
        self.bonus_amount = Decimal(bonus_amount)

    def adjust_salary(self, employee: Employee) -> Decimal:
        return employee.salary + self.bonus_amount

    def __repr__(self) -> str:
        return f"PromotionBonusStrategy(bonus_amount={self.bonus_amount})"


_STRATEGIES: dict[str, type[AnnualRaiseStrategy] | type[PromotionBonusStrategy]] = {
    "annual_raise": AnnualRaiseStrategy,
    "promotion_bonus": PromotionBonusStrategy,
}


def create_salary_strategy(strategy_type: str, amount: Decimal) -> SalaryAdjustmentStrategy:
    """Build a strategy by name (``annual_raise`` or ``promotion_bonus``).

    Raises:
        ValueError: If the strategy type is unknown.
    """
    strategy_cls = _STRATEGIES.get(strategy_type.lower())
    if strategy_cls is None:
        raise ValueError(f"Unknown strategy type: {strategy_type}")
    return strategy_cls(amount)
