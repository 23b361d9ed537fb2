"""
JSON file persistence for the wealth ledger.

The whole ledger is one JSON array stored under a single key, the same
shape a browser keeps in local storage. The file holds an object mapping
storage keys to arrays so several ledgers can share it.

Concurrent writers are not coordinated: the last save wins.
"""

from __future__ import annotations

import os

from loguru import logger

from ..core.utils.file_io import read_json, write_json
from .ledger import LedgerAction, LedgerEntry, entries_from_records, entries_to_records, reduce_ledger

DEFAULT_STORAGE_KEY = "hanvitt-wealth-tracker"


class LedgerFileStore:
    """Load and save ledger entries in a JSON file.

    Args:
        path: JSON file holding ``{storage_key: [entry, ...]}``.
        storage_key: Which ledger inside the file this store owns.
    """

    def __init__(self, path: str, storage_key: str = DEFAULT_STORAGE_KEY):
        self.path = os.path.expanduser(path)
        self.storage_key = storage_key

    def _read_document(self) -> dict:
        document = read_json(self.path, default={})
        if not isinstance(document, dict):
            logger.warning(f"Ledger file {self.path} is not a JSON object; ignoring its contents")
            return {}
        return document

    def load(self) -> tuple[LedgerEntry, ...]:
        """Return the stored entries, or an empty ledger if nothing usable is stored."""
        return entries_from_records(self._read_document().get(self.storage_key))

    def save(self, entries: tuple[LedgerEntry, ...]) -> None:
        document = self._read_document()
        document[self.storage_key] = entries_to_records(entries)
        write_json(self.path, document)
        logger.info(f"Saved {len(entries)} ledger entries to {self.path}")

    def apply(self, action: LedgerAction) -> tuple[LedgerEntry, ...]:
        """Load, reduce and save one user action."""
        entries = reduce_ledger(self.load(), action)
        self.save(entries)
        return entries
