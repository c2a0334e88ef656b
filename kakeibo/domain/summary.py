"""Pure functions for month summaries.

The summary is the derived view a surface re-reads after every change:
totals, carry-over, and the expense and budget tables.
"""

from dataclasses import dataclass

from kakeibo.domain.ledger import (
    get_budgets,
    get_carry_over,
    get_expenses,
    get_income,
    get_total_budget,
    get_total_expenses,
)
from kakeibo.domain.models import BudgetLine, ExpenseItem, LedgerStore, Money, Month


@dataclass(frozen=True)
class MonthSummary:
    """Immutable summary of one month."""

    month: Month
    has_income: bool
    salary: Money
    inherited: Money
    total_income: Money
    total_expenses: Money
    total_budget: Money
    carry_over: Money
    expenses: tuple[ExpenseItem, ...]
    budgets: tuple[BudgetLine, ...]

    @property
    def remaining(self) -> Money:
        """Income still available for new expenses."""
        return Money(self.total_income - self.total_expenses)


def summarize_month(store: LedgerStore, month: Month) -> MonthSummary:
    """Build the summary for a month.

    Args:
        store: Current ledger state.
        month: Month in YYYY-MM format.

    Returns:
        MonthSummary with zero defaults for anything not yet recorded.
    """
    income = get_income(store, month)
    salary = income.salary if income is not None else Money(0)
    inherited = income.carry_over if income is not None else Money(0)

    return MonthSummary(
        month=month,
        has_income=income is not None,
        salary=salary,
        inherited=inherited,
        total_income=Money(salary + inherited),
        total_expenses=get_total_expenses(store, month),
        total_budget=get_total_budget(store, month),
        carry_over=get_carry_over(store, month),
        expenses=get_expenses(store, month),
        budgets=get_budgets(store, month),
    )
