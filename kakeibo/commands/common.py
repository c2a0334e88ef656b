"""Helpers shared by the CLI commands."""

import logging
import sys
import tomllib
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from kakeibo.config import load_config
from kakeibo.dates import current_month, parse_month
from kakeibo.domain.errors import InvalidMonthKeyError, LedgerError
from kakeibo.domain.models import Money, Month
from kakeibo.engine import LedgerEngine
from kakeibo.store.json_store import JsonLedgerRepository

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Send kakeibo log records to stderr through rich."""
    package_logger = logging.getLogger("kakeibo")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def format_money(amount: int) -> str:
    """Format whole units, e.g. 250000 -> "¥250,000", -500 -> "-¥500"."""
    if amount < 0:
        return f"-¥{abs(amount):,}"
    return f"¥{amount:,}"


def format_signed(amount: int) -> str:
    """Format a carry-over, green for surplus and red for deficit."""
    if amount < 0:
        return f"[red]{format_money(amount)}[/red]"
    return f"[green]{format_money(amount)}[/green]"


def resolve_month(month: str | None) -> Month:
    """Validate a --month option, defaulting to the current month.

    Exits with status 1 on a malformed month key.
    """
    if month is None:
        return current_month()
    try:
        parse_month(month)
    except InvalidMonthKeyError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    return Month(month)


def open_engine(config_path: Path | None = None) -> LedgerEngine:
    """Load config and open the ledger engine on the configured data file."""
    try:
        config = load_config(config_path)
    except (OSError, tomllib.TOMLDecodeError) as e:
        console.print(f"[red]Failed to read config: {e}[/red]", style="bold")
        sys.exit(1)

    repository = JsonLedgerRepository(Path(config["data_path"]).expanduser(), config["storage_key"])
    return LedgerEngine.open(repository)


def require_income(engine: LedgerEngine, month: Month) -> None:
    """Exit unless the month has an income record with a salary or carry-over.

    A cleared month with nothing carried in counts as having no income.
    """
    income = engine.get_income(month)
    if income is None or (income.salary == 0 and income.carry_over == 0):
        console.print(f"[yellow]No income set for {month}[/yellow]")
        console.print("[dim]Use 'kakeibo income <salary>' first[/dim]")
        sys.exit(1)


def report_rejection(error: LedgerError, month: Month, engine: LedgerEngine) -> None:
    """Explain why a mutation was rejected and exit with status 1."""
    console.print(f"[red]{error.value}[/red]")
    if error is LedgerError.EXCEEDS_INCOME:
        income = engine.get_income(month)
        total_income = income.total if income is not None else Money(0)
        remaining = total_income - engine.get_total_expenses(month)
        console.print(f"[dim]Remaining this month: {format_money(remaining)}[/dim]")
    sys.exit(1)
