"""Budget command for projecting a month's budget from last month's spending."""

from rich.table import Table

from kakeibo.commands.common import console, format_money, open_engine, require_income, resolve_month
from kakeibo.dates import month_label, previous_month


def budget_command(month: str | None = None) -> None:
    """Project the month's budget as last month's expenses plus 5%."""
    target_month = resolve_month(month)
    engine = open_engine()
    require_income(engine, target_month)

    source_month = previous_month(target_month)
    budgets = engine.calculate_budget(target_month)

    if not budgets:
        console.print(f"[yellow]No expenses recorded for {month_label(source_month)}[/yellow]")
        console.print(f"[dim]Budget for {month_label(target_month)} is empty[/dim]")
        return

    console.print(f"[bold cyan]{month_label(target_month)} Budget[/bold cyan]")
    console.print(f"[dim]Based on {month_label(source_month)} expenses + 5%[/dim]\n")

    spent = {item.name: item.amount for item in engine.get_expenses(source_month)}

    table = Table(show_header=True, header_style="bold")
    table.add_column("Item", style="white")
    table.add_column("Last month", justify="right", style="dim")
    table.add_column("Budget", justify="right")

    for line in budgets:
        table.add_row(line.name, format_money(spent.get(line.name, 0)), format_money(line.amount))

    console.print(table)
    console.print(f"\n[bold]Total budget:[/bold] {format_money(engine.get_total_budget(target_month))}")
