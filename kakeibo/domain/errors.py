"""Error taxonomy for ledger operations."""

from enum import Enum


class LedgerError(Enum):
    """Recoverable reasons a ledger mutation was rejected.

    A rejected mutation always leaves the store unchanged.
    """

    EXCEEDS_INCOME = "Expense would exceed the month's income"
    ITEM_NOT_FOUND = "No expense with that name for this month"
    NEGATIVE_RESULT = "Reduction would make the expense negative"
    NON_POSITIVE_AMOUNT = "Amount must be positive"


class InvalidMonthKeyError(ValueError):
    """Raised when a month key is not in YYYY-MM format."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Invalid month key: {key!r} (expected YYYY-MM)")
        self.key = key
