"""Pure functions for the household ledger.

This module contains the functional core for ledger operations:
- No I/O operations (no files, no console)
- No side effects: every mutation returns a new LedgerStore
- Carry-over is recomputed in the same transition as the change that affects it
- Easy to test

Rejected mutations return the original store together with a LedgerError.
"""

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from kakeibo.dates import parse_month, previous_month
from kakeibo.domain.errors import LedgerError
from kakeibo.domain.models import BudgetLine, ExpenseItem, ExpenseName, Income, LedgerStore, Money, Month

# Next month's budget is last month's spending plus 5%
BUDGET_GROWTH_RATE = Decimal("1.05")


def get_income(store: LedgerStore, month: Month) -> Income | None:
    """Get the income record for a month, or None if it was never set."""
    parse_month(month)
    return store.month_incomes.get(month)


def get_total_income(store: LedgerStore, month: Month) -> Money:
    """Salary plus inherited carry-over, 0 when no income is set."""
    income = get_income(store, month)
    return income.total if income is not None else Money(0)


def get_expenses(store: LedgerStore, month: Month) -> tuple[ExpenseItem, ...]:
    """Expense items for a month, in order of first accrual."""
    parse_month(month)
    return store.month_expenses.get(month, ())


def get_total_expenses(store: LedgerStore, month: Month) -> Money:
    return Money(sum(item.amount for item in get_expenses(store, month)))


def get_budgets(store: LedgerStore, month: Month) -> tuple[BudgetLine, ...]:
    parse_month(month)
    return store.month_budgets.get(month, ())


def get_total_budget(store: LedgerStore, month: Month) -> Money:
    return Money(sum(line.amount for line in get_budgets(store, month)))


def get_carry_over(store: LedgerStore, month: Month) -> Money:
    """Surplus (or deficit) computed for a month, 0 if never computed."""
    parse_month(month)
    return store.carry_over_amounts.get(month, Money(0))


def compute_carry_over(
    income: Income | None,
    expenses: tuple[ExpenseItem, ...],
) -> Money:
    """Calculate a month's surplus or deficit.

    Args:
        income: Income record for the month, or None.
        expenses: Expense items for the month.

    Returns:
        Total income minus total expenses (negative for a deficit).
    """
    total_income = income.total if income is not None else 0
    total_expenses = sum(item.amount for item in expenses)
    return Money(total_income - total_expenses)


def recompute_carry_over(store: LedgerStore, month: Month) -> LedgerStore:
    """Store a freshly computed carry-over for a month.

    Idempotent: applying it twice gives the same store as applying it once.
    """
    parse_month(month)
    carry_over = compute_carry_over(store.month_incomes.get(month), store.month_expenses.get(month, ()))
    return replace(store, carry_over_amounts={**store.carry_over_amounts, month: carry_over})


def _commit(
    store: LedgerStore,
    month: Month,
    *,
    income: Income | None = None,
    expenses: tuple[ExpenseItem, ...] | None = None,
) -> LedgerStore:
    """Build the next store with new income/expenses and the matching carry-over."""
    month_incomes = store.month_incomes
    if income is not None:
        month_incomes = {**month_incomes, month: income}

    month_expenses = store.month_expenses
    if expenses is not None:
        month_expenses = {**month_expenses, month: expenses}

    carry_over = compute_carry_over(month_incomes.get(month), month_expenses.get(month, ()))

    return replace(
        store,
        month_incomes=month_incomes,
        month_expenses=month_expenses,
        carry_over_amounts={**store.carry_over_amounts, month: carry_over},
    )


def set_income(store: LedgerStore, month: Month, income: Income) -> LedgerStore:
    """Overwrite a month's income and recompute its carry-over.

    The carry_over field is taken as given. Callers normally pass
    get_carry_over(store, previous_month(month)), but a different value is
    accepted so that an inherited amount can be corrected by hand.

    Args:
        store: Current ledger state.
        month: Month in YYYY-MM format.
        income: New income record (replaces any existing one).

    Returns:
        New ledger state.
    """
    parse_month(month)
    return _commit(store, month, income=income)


def set_salary(store: LedgerStore, month: Month, salary: Money) -> LedgerStore:
    """Set a month's salary, inheriting the previous month's carry-over."""
    inherited = get_carry_over(store, previous_month(month))
    return set_income(store, month, Income(salary=salary, carry_over=inherited))


def add_expense(
    store: LedgerStore,
    month: Month,
    name: ExpenseName,
    amount: Money,
) -> tuple[LedgerStore, LedgerError | None]:
    """Accrue an amount onto a named expense.

    Args:
        store: Current ledger state.
        month: Month in YYYY-MM format.
        name: Expense name; merged into an existing item of the same name.
        amount: Amount to add (must be positive).

    Returns:
        Tuple of (new_store, error). On error the original store is returned.
    """
    parse_month(month)

    if amount <= 0:
        return store, LedgerError.NON_POSITIVE_AMOUNT

    total_income = get_total_income(store, month)
    total_expenses = get_total_expenses(store, month)
    if total_expenses + amount > total_income:
        return store, LedgerError.EXCEEDS_INCOME

    current = get_expenses(store, month)
    if any(item.name == name for item in current):
        updated = tuple(
            ExpenseItem(name=item.name, amount=Money(item.amount + amount)) if item.name == name else item
            for item in current
        )
    else:
        updated = (*current, ExpenseItem(name=name, amount=amount))

    return _commit(store, month, expenses=updated), None


def reduce_expense(
    store: LedgerStore,
    month: Month,
    name: ExpenseName,
    amount: Money,
) -> tuple[LedgerStore, LedgerError | None]:
    """Reduce a named expense by an amount.

    Args:
        store: Current ledger state.
        month: Month in YYYY-MM format.
        name: Existing expense name.
        amount: Amount to subtract (must be positive).

    Returns:
        Tuple of (new_store, error). On error the original store is returned.
    """
    parse_month(month)

    if amount <= 0:
        return store, LedgerError.NON_POSITIVE_AMOUNT

    current = get_expenses(store, month)
    target = next((item for item in current if item.name == name), None)
    if target is None:
        return store, LedgerError.ITEM_NOT_FOUND

    new_amount = target.amount - amount
    if new_amount < 0:
        return store, LedgerError.NEGATIVE_RESULT

    updated = tuple(
        ExpenseItem(name=item.name, amount=Money(new_amount)) if item.name == name else item for item in current
    )
    return _commit(store, month, expenses=updated), None


def project_budget(expenses: tuple[ExpenseItem, ...]) -> tuple[BudgetLine, ...]:
    """Derive budget lines from a month's actual spending.

    Each line is the expense amount grown by BUDGET_GROWTH_RATE, rounded half
    up to whole units.
    """
    return tuple(
        BudgetLine(
            name=item.name,
            amount=Money(int((Decimal(item.amount) * BUDGET_GROWTH_RATE).quantize(Decimal(1), ROUND_HALF_UP))),
        )
        for item in expenses
    )


def calculate_budget(store: LedgerStore, month: Month) -> LedgerStore:
    """Replace a month's budget with a projection of the previous month's expenses.

    An empty previous month yields an empty budget. The projection is a
    snapshot; later changes to the previous month do not update it.
    """
    previous = previous_month(month)
    budgets = project_budget(get_expenses(store, previous))
    return replace(store, month_budgets={**store.month_budgets, month: budgets})


def clear_ledger(store: LedgerStore, month: Month) -> LedgerStore:
    """Clear one month while keeping its carry-over.

    Expenses and budgets are emptied and income becomes a zero salary that
    carries the month's last computed carry-over, so the chain into the
    following month is preserved. Other months are untouched.
    """
    carry_over = get_carry_over(store, month)
    return replace(
        store,
        month_expenses={**store.month_expenses, month: ()},
        month_budgets={**store.month_budgets, month: ()},
        month_incomes={**store.month_incomes, month: Income(salary=Money(0), carry_over=carry_over)},
        carry_over_amounts={**store.carry_over_amounts, month: carry_over},
    )


def clear_all() -> LedgerStore:
    """An empty ledger: all history dropped."""
    return LedgerStore()
