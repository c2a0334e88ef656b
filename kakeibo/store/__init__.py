"""Persistence layer - loads and saves the whole ledger as one JSON document."""

from kakeibo.store.codec import store_from_document, store_to_document
from kakeibo.store.json_store import STORAGE_KEY, JsonLedgerRepository, get_data_path

__all__ = [
    "STORAGE_KEY",
    "JsonLedgerRepository",
    "get_data_path",
    "store_from_document",
    "store_to_document",
]
