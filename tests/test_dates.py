"""Tests for kakeibo.dates pure functions."""

from datetime import date

import pytest

from kakeibo.dates import current_month, month_label, next_month, parse_month, previous_month
from kakeibo.domain.errors import InvalidMonthKeyError


class TestPreviousMonth:
    """Tests for previous_month."""

    def test_mid_year(self) -> None:
        """Should step back one month within a year."""
        assert previous_month("2025-06") == "2025-05"

    def test_january_crosses_year(self) -> None:
        """Should wrap January to December of the previous year."""
        assert previous_month("2025-01") == "2024-12"

    def test_keeps_zero_padding(self) -> None:
        """Should keep the YYYY-MM shape."""
        assert previous_month("2025-10") == "2025-09"
        assert previous_month("0100-01") == "0099-12"

    def test_all_months_of_year(self) -> None:
        """Should step back correctly from every month."""
        expected = ["2024-12"] + [f"2025-{m:02d}" for m in range(1, 12)]

        for month_num in range(1, 13):
            assert previous_month(f"2025-{month_num:02d}") == expected[month_num - 1]

    @pytest.mark.parametrize("key", ["invalid", "2025/01", "202501", "2025-1", "25-01", "2025-ab", "", "2025-01-01"])
    def test_malformed_key_raises(self, key: str) -> None:
        """Should reject keys that are not zero-padded YYYY-MM."""
        with pytest.raises(InvalidMonthKeyError):
            previous_month(key)

    @pytest.mark.parametrize("key", ["2025-00", "2025-13"])
    def test_out_of_range_month_raises(self, key: str) -> None:
        """Should reject month numbers outside 01-12."""
        with pytest.raises(InvalidMonthKeyError):
            previous_month(key)

    def test_invalid_key_is_a_valueerror(self) -> None:
        """Should be catchable as ValueError."""
        with pytest.raises(ValueError):
            previous_month("invalid")


class TestNextMonth:
    """Tests for next_month."""

    def test_december_crosses_year(self) -> None:
        """Should wrap December to January of the next year."""
        assert next_month("2024-12") == "2025-01"

    def test_inverse_of_previous_month(self) -> None:
        """Should undo previous_month."""
        for month_num in range(1, 13):
            key = f"2025-{month_num:02d}"
            assert next_month(previous_month(key)) == key


class TestParseMonth:
    """Tests for parse_month."""

    def test_parses_year_and_month(self) -> None:
        """Should return integer year and month."""
        assert parse_month("2025-03") == (2025, 3)

    def test_rejects_non_string(self) -> None:
        """Should reject non-string keys."""
        with pytest.raises(InvalidMonthKeyError):
            parse_month(202501)  # type: ignore[arg-type]


class TestMonthLabel:
    """Tests for month_label and current_month."""

    def test_label(self) -> None:
        """Should format a readable month name."""
        assert month_label("2025-01") == "January 2025"
        assert month_label("2025-12") == "December 2025"

    def test_current_month_from_date(self) -> None:
        """Should build the month key for a given date."""
        assert current_month(date(2025, 3, 31)) == "2025-03"
