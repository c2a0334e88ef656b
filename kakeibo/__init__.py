"""kakeibo - a monthly household budget ledger."""

__version__ = "0.1.0"
