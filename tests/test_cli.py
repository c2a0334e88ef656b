"""Tests for the kakeibo command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from kakeibo.cli import app
from kakeibo.store.json_store import STORAGE_KEY

runner = CliRunner()


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path / "data" / "kakeibo" / "ledger.json"


def saved(data_path: Path) -> dict:
    return json.loads(data_path.read_text(encoding="utf-8"))[STORAGE_KEY]


def invoke(*args: str, input: str | None = None):
    return runner.invoke(app, list(args), input=input)


class TestIncomeAndExpenses:
    """Tests for income and expense commands."""

    def test_income_then_expense(self, data_path: Path) -> None:
        """Should record income and expense and persist the carry-over."""
        result = invoke("income", "300000", "--month", "2025-01")
        assert result.exit_code == 0, result.stdout
        assert "¥300,000" in result.stdout

        result = invoke("expense", "add", "食費", "50000", "--month", "2025-01")
        assert result.exit_code == 0, result.stdout
        assert "¥50,000" in result.stdout

        document = saved(data_path)
        assert document["monthExpenses"]["2025-01"] == [{"name": "食費", "amount": 50000}]
        assert document["carryOverAmounts"]["2025-01"] == 250000

    def test_income_inherits_previous_carry_over(self, data_path: Path) -> None:
        """Should carry the previous month's surplus into the new month."""
        invoke("income", "300000", "--month", "2025-01")
        invoke("expense", "add", "食費", "50000", "--month", "2025-01")

        result = invoke("income", "0", "--month", "2025-02")
        assert result.exit_code == 0, result.stdout

        assert saved(data_path)["monthIncomes"]["2025-02"] == {"salary": 0, "carryOver": 250000}
        assert "Carries into March 2025" in result.stdout

    def test_income_with_explicit_carry_over(self, data_path: Path) -> None:
        """Should use the given carry-over as-is."""
        result = invoke("income", "1000", "--carry-over", "500", "--month", "2025-03")
        assert result.exit_code == 0, result.stdout

        assert saved(data_path)["monthIncomes"]["2025-03"] == {"salary": 1000, "carryOver": 500}

    def test_expense_exceeding_income_fails(self, data_path: Path) -> None:
        """Should exit 1 and leave the ledger unchanged."""
        invoke("income", "300000", "--month", "2025-01")
        invoke("expense", "add", "食費", "50000", "--month", "2025-01")

        result = invoke("expense", "add", "食費", "260000", "--month", "2025-01")

        assert result.exit_code == 1
        assert "exceed" in result.stdout
        assert saved(data_path)["carryOverAmounts"]["2025-01"] == 250000

    def test_expense_requires_income(self, data_path: Path) -> None:
        """Should refuse expenses before income is set."""
        result = invoke("expense", "add", "食費", "100", "--month", "2025-01")

        assert result.exit_code == 1
        assert "No income set" in result.stdout

    def test_reduce_expense(self, data_path: Path) -> None:
        """Should reduce an item and reject an over-reduction."""
        invoke("income", "300000", "--month", "2025-01")
        invoke("expense", "add", "食費", "50000", "--month", "2025-01")

        result = invoke("expense", "reduce", "食費", "60000", "--month", "2025-01")
        assert result.exit_code == 1
        assert "negative" in result.stdout

        result = invoke("expense", "reduce", "食費", "10000", "--month", "2025-01")
        assert result.exit_code == 0, result.stdout
        assert saved(data_path)["monthExpenses"]["2025-01"] == [{"name": "食費", "amount": 40000}]

    def test_reduce_unknown_item(self, data_path: Path) -> None:
        """Should report a missing item."""
        invoke("income", "300000", "--month", "2025-01")

        result = invoke("expense", "reduce", "家賃", "100", "--month", "2025-01")

        assert result.exit_code == 1
        assert "No expense with that name" in result.stdout

    def test_income_shows_following_month(self, data_path: Path) -> None:
        """Should name the month the carry-over feeds into, across the year boundary."""
        result = invoke("income", "1000", "--month", "2025-12")

        assert result.exit_code == 0, result.stdout
        assert "Carries into January 2026" in result.stdout

    def test_cleared_month_with_nothing_carried_needs_income(self, data_path: Path) -> None:
        """Should ask for income again after clearing a month that carried nothing."""
        invoke("income", "1000", "--month", "2025-01")
        invoke("expense", "add", "食費", "1000", "--month", "2025-01")
        invoke("clear", "--month", "2025-01", "--yes")

        result = invoke("expense", "add", "食費", "1", "--month", "2025-01")

        assert result.exit_code == 1
        assert "No income set" in result.stdout
        assert "exceed" not in result.stdout

    def test_invalid_month(self, data_path: Path) -> None:
        """Should reject a malformed month key."""
        result = invoke("income", "1000", "--month", "2025-13")

        assert result.exit_code == 1
        assert "Invalid month key" in result.stdout
        assert not data_path.exists()


class TestBudgetAndStatus:
    """Tests for budget and status commands."""

    def test_budget_projects_previous_month(self, data_path: Path) -> None:
        """Should project last month's expenses plus 5%."""
        invoke("income", "300000", "--month", "2025-01")
        invoke("expense", "add", "食費", "50000", "--month", "2025-01")
        invoke("income", "0", "--month", "2025-02")

        result = invoke("budget", "--month", "2025-02")

        assert result.exit_code == 0, result.stdout
        assert "¥52,500" in result.stdout
        assert saved(data_path)["monthBudgets"]["2025-02"] == [{"name": "食費", "amount": 52500}]

    def test_budget_with_empty_previous_month(self, data_path: Path) -> None:
        """Should report an empty budget without failing."""
        invoke("income", "1000", "--month", "2025-02")

        result = invoke("budget", "--month", "2025-02")

        assert result.exit_code == 0, result.stdout
        assert "No expenses recorded" in result.stdout

    def test_status(self, data_path: Path) -> None:
        """Should show totals and the expense table."""
        invoke("income", "300000", "--month", "2025-01")
        invoke("expense", "add", "食費", "50000", "--month", "2025-01")

        result = invoke("status", "--month", "2025-01")

        assert result.exit_code == 0, result.stdout
        assert "January 2025" in result.stdout
        assert "¥250,000" in result.stdout
        assert "食費" in result.stdout

    def test_status_for_empty_month(self, data_path: Path) -> None:
        """Should show zero defaults for an untouched month."""
        result = invoke("status", "--month", "2030-06")

        assert result.exit_code == 0, result.stdout
        assert "No income set" in result.stdout


class TestAdmin:
    """Tests for init, clear, and categories commands."""

    def test_init_and_force(self, data_path: Path) -> None:
        """Should create config once and require --force to overwrite."""
        assert invoke("init").exit_code == 0

        result = invoke("init")
        assert result.exit_code == 1
        assert "--force" in result.stdout

        assert invoke("init", "--force").exit_code == 0

    def test_clear_month_keeps_carry_over(self, data_path: Path) -> None:
        """Should clear the month after confirmation and keep its carry-over."""
        invoke("income", "300000", "--month", "2025-01")
        invoke("expense", "add", "食費", "50000", "--month", "2025-01")

        result = invoke("clear", "--month", "2025-01", input="y\n")

        assert result.exit_code == 0, result.stdout
        document = saved(data_path)
        assert document["monthExpenses"]["2025-01"] == []
        assert document["monthIncomes"]["2025-01"] == {"salary": 0, "carryOver": 250000}
        assert document["carryOverAmounts"]["2025-01"] == 250000

    def test_clear_cancelled(self, data_path: Path) -> None:
        """Should leave data alone when not confirmed."""
        invoke("income", "300000", "--month", "2025-01")

        result = invoke("clear", "--month", "2025-01", input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.stdout
        assert saved(data_path)["monthIncomes"]["2025-01"] == {"salary": 300000, "carryOver": 0}

    def test_clear_all(self, data_path: Path) -> None:
        """Should drop every month."""
        invoke("income", "300000", "--month", "2025-01")

        result = invoke("clear", "--all", "--yes")

        assert result.exit_code == 0, result.stdout
        assert saved(data_path) == {
            "monthExpenses": {},
            "monthIncomes": {},
            "monthBudgets": {},
            "carryOverAmounts": {},
        }

    def test_categories(self, data_path: Path) -> None:
        """Should list and extend the category catalog."""
        result = invoke("categories", "--add", "ペット")

        assert result.exit_code == 0, result.stdout
        assert "家賃" in result.stdout
        assert "ペット" in result.stdout
