"""Income command for setting a month's salary."""

import sys

from kakeibo.commands.common import console, format_money, format_signed, open_engine, resolve_month
from kakeibo.dates import month_label, next_month
from kakeibo.domain.models import Income, Money


def income_command(salary: int, carry_over: int | None = None, month: str | None = None) -> None:
    """Set a month's income.

    Without carry_over, the previous month's carry-over is inherited.
    With it, the given value is used as-is.
    """
    target_month = resolve_month(month)

    if salary < 0:
        console.print("[red]Salary must not be negative[/red]")
        sys.exit(1)

    engine = open_engine()

    if carry_over is None:
        income = engine.set_salary(target_month, Money(salary))
    else:
        income = Income(salary=Money(salary), carry_over=Money(carry_over))
        engine.set_income(target_month, income)

    console.print(f"[green]✓ Income set for {month_label(target_month)}[/green]")
    console.print(f"  Salary:     {format_money(income.salary)}")
    console.print(f"  Carried in: {format_signed(income.carry_over)}")
    console.print(f"  Total:      {format_money(income.total)}")
    carry_over = format_money(engine.get_carry_over(target_month))
    console.print(f"[dim]Carries into {month_label(next_month(target_month))}: {carry_over}[/dim]")
