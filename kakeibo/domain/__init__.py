"""Domain models and types for kakeibo.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from kakeibo.domain.errors import InvalidMonthKeyError, LedgerError
from kakeibo.domain.models import BudgetLine, ExpenseItem, ExpenseName, Income, LedgerStore, Money, Month

__all__ = [
    "BudgetLine",
    "ExpenseItem",
    "ExpenseName",
    "Income",
    "InvalidMonthKeyError",
    "LedgerError",
    "LedgerStore",
    "Money",
    "Month",
]
