"""File-backed key-value persistence for the ledger.

The data file is a JSON object mapping storage keys to ledger documents. The
ledger lives under a single fixed key and is written whole on every change.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from kakeibo.domain.models import LedgerStore
from kakeibo.store.codec import store_from_document, store_to_document

logger = logging.getLogger(__name__)

STORAGE_KEY = "household_ledger_data"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_data_path() -> Path:
    """Get the default ledger data file path (XDG compliant)."""
    return get_xdg_data_home() / "kakeibo" / "ledger.json"


def _read_entries(data_path: Path) -> dict[str, Any]:
    with open(data_path, encoding="utf-8") as f:
        entries = json.load(f)
    if not isinstance(entries, dict):
        raise ValueError("Data file must contain a JSON object")
    return entries


class JsonLedgerRepository:
    """Loads and saves a LedgerStore under one key of a JSON data file."""

    def __init__(self, data_path: Path | None = None, key: str = STORAGE_KEY) -> None:
        self.data_path = data_path if data_path is not None else get_data_path()
        self.key = key

    def load(self) -> LedgerStore | None:
        """Load the ledger.

        Returns:
            The stored ledger, or None when the file or key is missing or the
            stored document is unreadable.
        """
        if not self.data_path.exists():
            logger.debug("No ledger data at %s", self.data_path)
            return None

        try:
            document = _read_entries(self.data_path).get(self.key)
            if document is None:
                return None
            return store_from_document(document)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable ledger data in %s: %s", self.data_path, e)
            return None

    def save(self, store: LedgerStore) -> bool:
        """Write the ledger under the storage key.

        Other keys in the data file are kept. The file is replaced atomically.

        Returns:
            True if the ledger was written, False if saving failed.
        """
        try:
            entries: dict[str, Any] = {}
            if self.data_path.exists():
                try:
                    entries = _read_entries(self.data_path)
                except ValueError as e:
                    logger.warning("Overwriting unreadable data file %s: %s", self.data_path, e)

            entries[self.key] = store_to_document(store)

            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_path.parent, prefix=".ledger-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(entries, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.data_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError) as e:
            logger.error("Failed to save ledger to %s: %s", self.data_path, e)
            return False

        logger.debug("Saved ledger to %s", self.data_path)
        return True
