"""Admin commands for init, clearing data, and the category catalog."""

import sys
from pathlib import Path

import typer
from rich.table import Table

from kakeibo.commands.common import console, format_money, open_engine, resolve_month
from kakeibo.config import add_category, create_default_config, get_categories, get_config_path, load_config
from kakeibo.dates import month_label


def init_command(force: bool = False) -> None:
    """Create the config file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'kakeibo init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    data_path = Path(load_config(config_path)["data_path"]).expanduser()
    console.print(f"[green]✓[/green] Config file created (permissions: 600): {config_path}")
    console.print(f"[dim]Ledger data: {data_path}[/dim]")


def clear_command(month: str | None = None, all: bool = False, yes: bool = False) -> None:
    """Clear one month (keeping its carry-over) or all data."""
    engine = open_engine()

    if all:
        if not yes and not typer.confirm("Delete ALL ledger data? This cannot be undone"):
            console.print("[dim]Cancelled[/dim]")
            return
        engine.clear_all()
        console.print("[green]✓ All ledger data cleared[/green]")
        return

    target_month = resolve_month(month)
    label = month_label(target_month)
    if not yes and not typer.confirm(f"Clear expenses and budget for {label}?"):
        console.print("[dim]Cancelled[/dim]")
        return

    engine.clear_ledger(target_month)
    console.print(f"[green]✓ Cleared {label}[/green]")
    console.print(f"[dim]Carry-over kept: {format_money(engine.get_carry_over(target_month))}[/dim]")


def categories_command(add: str | None = None) -> None:
    """List the expense categories, optionally adding one."""
    if add is not None:
        name = add.strip()
        if not name:
            console.print("[red]Category name must not be empty[/red]")
            sys.exit(1)
        if add_category(name):
            console.print(f"[green]✓ Added category: {name}[/green]\n")
        else:
            console.print(f"[yellow]Category already exists: {name}[/yellow]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="magenta")
    for idx, category in enumerate(get_categories(load_config()), 1):
        table.add_row(str(idx), category)
    console.print(table)
    console.print("[dim]Any other name is also accepted for expenses[/dim]")
