"""Conversion between LedgerStore and its JSON document.

The document uses the same camelCase layout as the ledger's saved data:

    {
      "monthExpenses": {"2025-01": [{"name": "食費", "amount": 50000}]},
      "monthIncomes": {"2025-01": {"salary": 300000, "carryOver": 0}},
      "monthBudgets": {"2025-02": [{"name": "食費", "amount": 52500}]},
      "carryOverAmounts": {"2025-01": 250000}
    }
"""

import math
from typing import Any

from kakeibo.dates import parse_month
from kakeibo.domain.ledger import compute_carry_over
from kakeibo.domain.models import BudgetLine, ExpenseItem, ExpenseName, Income, LedgerStore, Money, Month


def store_to_document(store: LedgerStore) -> dict[str, Any]:
    """Serialize a ledger to a JSON-compatible dictionary."""
    return {
        "monthExpenses": {
            month: [{"name": item.name, "amount": item.amount} for item in items]
            for month, items in store.month_expenses.items()
        },
        "monthIncomes": {
            month: {"salary": income.salary, "carryOver": income.carry_over}
            for month, income in store.month_incomes.items()
        },
        "monthBudgets": {
            month: [{"name": line.name, "amount": line.amount} for line in lines]
            for month, lines in store.month_budgets.items()
        },
        "carryOverAmounts": dict(store.carry_over_amounts),
    }


def parse_money(value: Any) -> Money:
    """Convert a stored number to Money.

    Integral floats such as 52500.0 are accepted; fractional or non-finite
    values are not.

    Raises:
        ValueError: If the value is not a finite whole number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return Money(value)
    if not math.isfinite(value) or not value.is_integer():
        raise ValueError(f"Expected a whole amount, got {value!r}")
    return Money(int(value))


def _section(document: dict[str, Any], key: str) -> dict[Month, Any]:
    section = document.get(key, {})
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' must be an object")
    for month in section:
        parse_month(month)
    return section


def _items(entries: Any) -> list[tuple[ExpenseName, Money]]:
    if not isinstance(entries, list):
        raise ValueError("Line items must be a list")
    items = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ValueError(f"Invalid line item: {entry!r}")
        amount = parse_money(entry.get("amount"))
        if amount < 0:
            raise ValueError(f"Negative line item: {entry!r}")
        items.append((ExpenseName(entry["name"]), amount))
    return items


def store_from_document(document: Any) -> LedgerStore:
    """Deserialize a ledger from its JSON document.

    Missing sections are treated as empty. Stored carry-over amounts are
    recomputed from the loaded income and expenses rather than trusted.

    Raises:
        ValueError: If the document does not have the expected shape
            (InvalidMonthKeyError for malformed month keys).
    """
    if not isinstance(document, dict):
        raise ValueError("Ledger document must be an object")

    month_incomes: dict[Month, Income] = {}
    for month, entry in _section(document, "monthIncomes").items():
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid income for {month}: {entry!r}")
        month_incomes[month] = Income(
            salary=parse_money(entry.get("salary", 0)),
            carry_over=parse_money(entry.get("carryOver", 0)),
        )

    month_expenses = {
        month: tuple(ExpenseItem(name=name, amount=amount) for name, amount in _items(entries))
        for month, entries in _section(document, "monthExpenses").items()
    }

    stored_carry_overs = {
        month: parse_money(value) for month, value in _section(document, "carryOverAmounts").items()
    }
    carry_over_amounts = {
        month: compute_carry_over(month_incomes.get(month), month_expenses.get(month, ()))
        for month in {*stored_carry_overs, *month_incomes, *month_expenses}
    }

    return LedgerStore(
        month_expenses=month_expenses,
        month_incomes=month_incomes,
        month_budgets={
            month: tuple(BudgetLine(name=name, amount=amount) for name, amount in _items(entries))
            for month, entries in _section(document, "monthBudgets").items()
        },
        carry_over_amounts=carry_over_amounts,
    )
