"""Tests for JSON file persistence of the ledger."""

import json
import os

from hanvitt.financial.ledger import AddEntry, ClearAll, DeleteEntry, create_entry
from hanvitt.financial.ledger_store import LedgerFileStore


class TestLedgerFileStore:
    def test_missing_file_is_empty(self, tmp_dir):
        store = LedgerFileStore(os.path.join(tmp_dir, "ledger.json"))
        assert store.load() == ()

    def test_save_and_load(self, tmp_dir):
        store = LedgerFileStore(os.path.join(tmp_dir, "nested", "ledger.json"))
        entry = create_entry("income", "salary", 50_000, entry_date="2024-05-01")
        store.save((entry,))
        assert store.load() == (entry,)

    def test_file_shape(self, tmp_dir):
        path = os.path.join(tmp_dir, "ledger.json")
        store = LedgerFileStore(path, storage_key="my-ledger")
        store.save((create_entry("expense", "food", 10, entry_date="2024-05-01"),))
        with open(path) as f:
            document = json.load(f)
        assert list(document) == ["my-ledger"]
        assert document["my-ledger"][0]["category"] == "food"

    def test_other_keys_preserved(self, tmp_dir):
        path = os.path.join(tmp_dir, "ledger.json")
        with open(path, "w") as f:
            json.dump({"someone-else": [1, 2, 3]}, f)
        LedgerFileStore(path).save(())
        with open(path) as f:
            document = json.load(f)
        assert document["someone-else"] == [1, 2, 3]

    def test_apply_cycle(self, tmp_dir):
        store = LedgerFileStore(os.path.join(tmp_dir, "ledger.json"))
        entry = create_entry("expense", "rent", 20_000)
        assert store.apply(AddEntry(entry)) == (entry,)
        assert store.load() == (entry,)
        assert store.apply(DeleteEntry(entry.id)) == ()
        store.apply(AddEntry(entry))
        store.apply(ClearAll())
        assert store.load() == ()

    def test_corrupt_file_loads_empty(self, tmp_dir):
        path = os.path.join(tmp_dir, "ledger.json")
        with open(path, "w") as f:
            f.write("{not json")
        assert LedgerFileStore(path).load() == ()

    def test_non_object_document_loads_empty(self, tmp_dir):
        path = os.path.join(tmp_dir, "ledger.json")
        with open(path, "w") as f:
            json.dump([1, 2], f)
        assert LedgerFileStore(path).load() == ()
