"""Status command for showing a month's income, expenses, and budget."""

from rich.table import Table

from kakeibo.commands.common import console, format_money, format_signed, open_engine, resolve_month
from kakeibo.dates import month_label
from kakeibo.domain.summary import MonthSummary


def render_summary(summary: MonthSummary) -> None:
    """Print a month summary with expense and budget tables."""
    console.print(f"[bold cyan]{month_label(summary.month)}[/bold cyan]\n")

    if not summary.has_income:
        console.print("[yellow]No income set for this month[/yellow]")
        console.print("[dim]Use 'kakeibo income <salary>' to set it[/dim]\n")

    console.print(f"[bold]Salary:[/bold]         {format_money(summary.salary)}")
    console.print(f"[bold]Carried in:[/bold]     {format_signed(summary.inherited)}")
    console.print(f"[bold]Total income:[/bold]   {format_money(summary.total_income)}")
    console.print(f"[bold]Total expenses:[/bold] {format_money(summary.total_expenses)}")
    console.print(f"[bold]Total budget:[/bold]   {format_money(summary.total_budget)}")
    console.print(f"[bold]Carry-over:[/bold]     {format_signed(summary.carry_over)}")

    if summary.expenses:
        budgeted = {line.name: line.amount for line in summary.budgets}

        table = Table(title="Expenses", show_header=True, header_style="bold")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Item", style="white")
        table.add_column("Spent", justify="right")
        table.add_column("Budget", justify="right", style="dim")

        for idx, item in enumerate(summary.expenses, 1):
            budget = budgeted.get(item.name)
            if budget is not None and item.amount > budget:
                spent_display = f"[red]{format_money(item.amount)}[/red]"
            else:
                spent_display = format_money(item.amount)
            budget_display = format_money(budget) if budget is not None else "-"
            table.add_row(str(idx), item.name, spent_display, budget_display)

        console.print()
        console.print(table)
    else:
        console.print("\n[dim]No expenses recorded[/dim]")

    unspent = [line for line in summary.budgets if line.name not in {item.name for item in summary.expenses}]
    if unspent:
        table = Table(title="Budgeted, not yet spent", show_header=True, header_style="bold")
        table.add_column("Item", style="white")
        table.add_column("Budget", justify="right")
        for line in unspent:
            table.add_row(line.name, format_money(line.amount))
        console.print()
        console.print(table)


def status_command(month: str | None = None) -> None:
    """Show the month's income, expenses, budget, and carry-over."""
    target_month = resolve_month(month)
    engine = open_engine()
    render_summary(engine.summary(target_month))
