"""Financial planning toolkit: calculators, shared value types and the wealth ledger."""

from .ledger import (
    AddEntry,
    ClearAll,
    DeleteEntry,
    EntryType,
    LedgerEntry,
    LedgerSummary,
    create_entry,
    reduce_ledger,
    summarize,
)
from .models import BreakdownItem, CityTier, CoverVerdict, TriState, assess_cover

__all__ = [
    "AddEntry",
    "BreakdownItem",
    "CityTier",
    "ClearAll",
    "CoverVerdict",
    "DeleteEntry",
    "EntryType",
    "LedgerEntry",
    "LedgerSummary",
    "TriState",
    "assess_cover",
    "create_entry",
    "reduce_ledger",
    "summarize",
]
