"""CLI entry point for kakeibo."""

import typer

from kakeibo.commands.admin import categories_command, clear_command, init_command
from kakeibo.commands.budget import budget_command
from kakeibo.commands.common import setup_logging
from kakeibo.commands.expense import add_expense_command, reduce_expense_command
from kakeibo.commands.income import income_command
from kakeibo.commands.status import status_command

MONTH_HELP = "Month (YYYY-MM, default: current month)"

app = typer.Typer(
    name="kakeibo",
    help="kakeibo - A monthly household budget ledger",
    add_completion=False,
)

expense_app = typer.Typer(help="Record and correct your expenses.")
app.add_typer(expense_app, name="expense")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """kakeibo - A monthly household budget ledger."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize kakeibo configuration."""
    init_command(force)


@app.command()
def income(
    salary: int = typer.Argument(..., help="Salary for the month"),
    carry_over: int = typer.Option(
        None, "--carry-over", help="Carried-in amount (default: previous month's carry-over)"
    ),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Set your income for a month."""
    income_command(salary, carry_over, month)


@expense_app.command(name="add")
def expense_add(
    name: str = typer.Argument(..., help="Expense item name (see 'kakeibo categories')"),
    amount: int = typer.Argument(..., help="Amount to add"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Add an amount to an expense item."""
    add_expense_command(name, amount, month)


@expense_app.command(name="reduce")
def expense_reduce(
    name: str = typer.Argument(..., help="Existing expense item name"),
    amount: int = typer.Argument(..., help="Amount to subtract"),
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Correct an expense item by reducing it."""
    reduce_expense_command(name, amount, month)


@app.command()
def budget(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Project your budget from last month's expenses."""
    budget_command(month)


@app.command()
def status(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
) -> None:
    """Show your income, expenses, budget, and carry-over."""
    status_command(month)


@app.command()
def clear(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
    all: bool = typer.Option(False, "--all", "-a", help="Clear every month"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Clear a month's expenses and budget, or everything."""
    clear_command(month, all, yes)


@app.command()
def categories(
    add: str = typer.Option(None, "--add", help="Add a category to the list"),
) -> None:
    """List your expense categories."""
    categories_command(add)


if __name__ == "__main__":
    app()
