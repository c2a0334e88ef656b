"""Domain type definitions for kakeibo.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in whole currency units (e.g. yen)
- Month: Month in YYYY-MM format
- ExpenseName: Name of an expense category
"""

from dataclasses import dataclass, field
from typing import NewType

# Money amounts are whole units; budget projections are rounded back to whole units
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Any string is a valid expense category key
ExpenseName = NewType("ExpenseName", str)


@dataclass(frozen=True)
class Income:
    """Income for a month: salary plus the carry-over inherited at assignment time."""

    salary: Money
    carry_over: Money

    @property
    def total(self) -> Money:
        return Money(self.salary + self.carry_over)


@dataclass(frozen=True)
class ExpenseItem:
    """Cumulative amount spent on a named expense within a month."""

    name: ExpenseName
    amount: Money


@dataclass(frozen=True)
class BudgetLine:
    """Projected budget for a named expense, derived from the previous month."""

    name: ExpenseName
    amount: Money


@dataclass(frozen=True)
class LedgerStore:
    """Immutable root of all ledger state.

    Every mutation produces a new LedgerStore; the maps inside are never
    modified after construction.
    """

    month_expenses: dict[Month, tuple[ExpenseItem, ...]] = field(default_factory=dict)
    month_incomes: dict[Month, Income] = field(default_factory=dict)
    month_budgets: dict[Month, tuple[BudgetLine, ...]] = field(default_factory=dict)
    carry_over_amounts: dict[Month, Money] = field(default_factory=dict)
