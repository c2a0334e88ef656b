"""Expense commands for accruing and reducing expense items."""

from kakeibo.commands.common import (
    console,
    format_money,
    format_signed,
    open_engine,
    report_rejection,
    require_income,
    resolve_month,
)
from kakeibo.config import get_categories, load_config
from kakeibo.domain.models import ExpenseName, Money, Month
from kakeibo.engine import LedgerEngine


def _show_item(engine: LedgerEngine, target_month: Month, name: ExpenseName) -> None:
    item = next((i for i in engine.get_expenses(target_month) if i.name == name), None)
    if item is not None:
        console.print(f"  {item.name}: {format_money(item.amount)}")
    console.print(f"  Total expenses: {format_money(engine.get_total_expenses(target_month))}")
    console.print(f"  Carry-over:     {format_signed(engine.get_carry_over(target_month))}\n")


def add_expense_command(name: str, amount: int, month: str | None = None) -> None:
    """Add an amount to an expense item, creating the item if needed."""
    target_month = resolve_month(month)
    engine = open_engine()
    require_income(engine, target_month)

    error = engine.add_expense(target_month, ExpenseName(name), Money(amount))
    if error is not None:
        report_rejection(error, target_month, engine)

    console.print(f"[green]✓ Added {format_money(amount)} to {name}[/green]")
    if name not in get_categories(load_config()):
        console.print("[dim]Note: not one of the configured categories[/dim]")
    _show_item(engine, target_month, ExpenseName(name))


def reduce_expense_command(name: str, amount: int, month: str | None = None) -> None:
    """Subtract an amount from an existing expense item."""
    target_month = resolve_month(month)
    engine = open_engine()
    require_income(engine, target_month)

    error = engine.reduce_expense(target_month, ExpenseName(name), Money(amount))
    if error is not None:
        report_rejection(error, target_month, engine)

    console.print(f"[green]✓ Reduced {name} by {format_money(amount)}[/green]")
    _show_item(engine, target_month, ExpenseName(name))
