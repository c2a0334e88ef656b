"""Date utilities for kakeibo.

Pure functions for month key arithmetic and formatting.
"""

import calendar
import re
from datetime import date

from kakeibo.domain.errors import InvalidMonthKeyError
from kakeibo.domain.models import Month

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_month(key: str) -> tuple[int, int]:
    """Split a month key into year and month numbers.

    Args:
        key: Month in YYYY-MM format.

    Returns:
        Tuple of (year, month).

    Raises:
        InvalidMonthKeyError: If the key is not a zero-padded YYYY-MM string
            with a month between 01 and 12.
    """
    if not isinstance(key, str):
        raise InvalidMonthKeyError(key)

    match = MONTH_KEY_PATTERN.match(key)
    if match is None:
        raise InvalidMonthKeyError(key)

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidMonthKeyError(key)

    return year, month


def format_month(year: int, month: int) -> Month:
    """Build a zero-padded month key."""
    return Month(f"{year:04d}-{month:02d}")


def previous_month(key: str) -> Month:
    """Get the month key chronologically before the given one.

    Args:
        key: Month in YYYY-MM format.

    Returns:
        Previous month, e.g. "2025-01" -> "2024-12".

    Raises:
        InvalidMonthKeyError: If the key is malformed or has no predecessor.
    """
    year, month = parse_month(key)
    if month == 1:
        if year == 0:
            raise InvalidMonthKeyError(key)
        return format_month(year - 1, 12)
    return format_month(year, month - 1)


def next_month(key: str) -> Month:
    """Get the month key chronologically after the given one."""
    year, month = parse_month(key)
    if month == 12:
        if year == 9999:
            raise InvalidMonthKeyError(key)
        return format_month(year + 1, 1)
    return format_month(year, month + 1)


def month_label(key: str) -> str:
    """Human-readable month, e.g. "January 2025"."""
    year, month = parse_month(key)
    return f"{calendar.month_name[month]} {year}"


def current_month(today: date | None = None) -> Month:
    """Month key for today (or the given date)."""
    if today is None:
        today = date.today()
    return format_month(today.year, today.month)
