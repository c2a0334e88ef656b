"""Ledger engine: owns the single ledger store and persists every change.

Each operation computes the next LedgerStore with the pure functions in
kakeibo.domain.ledger and then commits it in one assignment, so readers never
see expenses updated without the matching carry-over.
"""

import logging
from typing import Protocol

from kakeibo.domain import ledger
from kakeibo.domain.errors import LedgerError
from kakeibo.domain.models import BudgetLine, ExpenseItem, ExpenseName, Income, LedgerStore, Money, Month
from kakeibo.domain.summary import MonthSummary, summarize_month

logger = logging.getLogger(__name__)


class LedgerRepository(Protocol):
    """Persistence collaborator for the whole ledger."""

    def load(self) -> LedgerStore | None: ...

    def save(self, store: LedgerStore) -> bool: ...


class LedgerEngine:
    """Single owner of ledger state.

    Rejected mutations return a LedgerError and leave the state untouched;
    successful ones return None. Save failures are logged by the repository
    and do not affect the in-memory state.
    """

    def __init__(self, repository: LedgerRepository | None = None, store: LedgerStore | None = None) -> None:
        self._repository = repository
        self._store = store if store is not None else LedgerStore()

    @classmethod
    def open(cls, repository: LedgerRepository) -> "LedgerEngine":
        """Create an engine seeded from the repository (empty if nothing is stored)."""
        store = repository.load()
        if store is None:
            logger.info("Starting with an empty ledger")
        return cls(repository, store)

    @property
    def store(self) -> LedgerStore:
        return self._store

    def _commit(self, store: LedgerStore) -> None:
        self._store = store
        if self._repository is not None:
            self._repository.save(store)

    def _apply(self, action: str, month: Month, result: tuple[LedgerStore, LedgerError | None]) -> LedgerError | None:
        store, error = result
        if error is not None:
            logger.info("Rejected %s for %s: %s", action, month, error.value)
            return error
        self._commit(store)
        return None

    # Income

    def set_income(self, month: Month, income: Income) -> None:
        """Overwrite a month's income; its carry_over is used as given."""
        self._commit(ledger.set_income(self._store, month, income))

    def set_salary(self, month: Month, salary: Money) -> Income:
        """Set a month's salary, inheriting the previous month's carry-over."""
        store = ledger.set_salary(self._store, month, salary)
        self._commit(store)
        return store.month_incomes[month]

    def get_income(self, month: Month) -> Income | None:
        return ledger.get_income(self._store, month)

    # Expenses

    def add_expense(self, month: Month, name: ExpenseName, amount: Money) -> LedgerError | None:
        return self._apply("expense", month, ledger.add_expense(self._store, month, name, amount))

    def reduce_expense(self, month: Month, name: ExpenseName, amount: Money) -> LedgerError | None:
        return self._apply("reduction", month, ledger.reduce_expense(self._store, month, name, amount))

    def get_expenses(self, month: Month) -> tuple[ExpenseItem, ...]:
        return ledger.get_expenses(self._store, month)

    def get_total_expenses(self, month: Month) -> Money:
        return ledger.get_total_expenses(self._store, month)

    # Budgets

    def calculate_budget(self, month: Month) -> tuple[BudgetLine, ...]:
        """Project a month's budget from the previous month's expenses."""
        self._commit(ledger.calculate_budget(self._store, month))
        return ledger.get_budgets(self._store, month)

    def get_budgets(self, month: Month) -> tuple[BudgetLine, ...]:
        return ledger.get_budgets(self._store, month)

    def get_total_budget(self, month: Month) -> Money:
        return ledger.get_total_budget(self._store, month)

    # Carry-over

    def recompute_carry_over(self, month: Month) -> Money:
        self._commit(ledger.recompute_carry_over(self._store, month))
        return ledger.get_carry_over(self._store, month)

    def get_carry_over(self, month: Month) -> Money:
        return ledger.get_carry_over(self._store, month)

    # Reset

    def clear_ledger(self, month: Month) -> None:
        """Clear a month's expenses and budgets, keeping its carry-over."""
        self._commit(ledger.clear_ledger(self._store, month))
        logger.info("Cleared ledger for %s", month)

    def clear_all(self) -> None:
        """Drop all ledger history."""
        self._commit(ledger.clear_all())
        logger.info("Cleared all ledger data")

    def summary(self, month: Month) -> MonthSummary:
        return summarize_month(self._store, month)
