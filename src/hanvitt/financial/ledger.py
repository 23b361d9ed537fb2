"""
Wealth ledger: an ordered list of income and expense entries.

The ledger holds no state of its own. ``reduce_ledger`` takes the prior
entries and an action and returns the new entries; persisting the result
is the caller's job (see ``ledger_store``). Aggregates are recomputed from
the entries on demand.

Newest entries sit at the front of the list.
"""

from __future__ import annotations

import math
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from loguru import logger

from .calculators.formatting import round_half_away

DEFAULT_TREND_MONTHS = 6


class EntryType(Enum):
    INCOME = "income"
    EXPENSE = "expense"


INCOME_CATEGORIES = ("salary", "freelance", "investment", "rental", "other_income")
EXPENSE_CATEGORIES = (
    "food",
    "transport",
    "utilities",
    "rent",
    "shopping",
    "healthcare",
    "education",
    "entertainment",
    "insurance",
    "other_expense",
)

CATEGORIES = {
    EntryType.INCOME: INCOME_CATEGORIES,
    EntryType.EXPENSE: EXPENSE_CATEGORIES,
}


@dataclass(frozen=True)
class LedgerEntry:
    """A single income or expense. Entries are never edited, only added or removed.

    Attributes:
        id: Unique identifier.
        type: Income or expense.
        category: One of the categories allowed for ``type``.
        amount: Positive amount in rupees.
        description: Free text; defaults to the category key.
        date: Calendar date as ``YYYY-MM-DD``.
    """

    id: str
    type: EntryType
    category: str
    amount: float
    description: str
    date: str

    def __post_init__(self):
        if not isinstance(self.type, EntryType):
            object.__setattr__(self, "type", EntryType(self.type))
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise ValueError(f"Ledger entry amount must be a positive number, got {self.amount}")
        if self.category not in CATEGORIES[self.type]:
            raise ValueError(f"Unknown {self.type.value} category: {self.category!r}")
        try:
            datetime.strptime(self.date, "%Y-%m-%d")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Ledger entry date must be YYYY-MM-DD, got {self.date!r}") from e
        if not self.description:
            object.__setattr__(self, "description", self.category)

    @property
    def month(self) -> str:
        """``YYYY-MM`` bucket for the monthly trend."""
        return self.date[:7]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "category": self.category,
            "amount": self.amount,
            "description": self.description,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LedgerEntry:
        return cls(
            id=str(data["id"]),
            type=EntryType(data["type"]),
            category=data["category"],
            amount=float(data["amount"]),
            description=data.get("description", ""),
            date=data["date"],
        )


def create_entry(
    entry_type: EntryType | str,
    category: str,
    amount: float,
    description: str = "",
    entry_date: date | str | None = None,
) -> LedgerEntry:
    """Build a new entry with a fresh id, dated today unless told otherwise.

    Raises:
        ValueError: Non-positive amount, unknown category, or malformed date.
    """
    if entry_date is None:
        entry_date = date.today()
    if isinstance(entry_date, date):
        entry_date = entry_date.isoformat()
    return LedgerEntry(
        id=uuid.uuid4().hex,
        type=EntryType(entry_type),
        category=category,
        amount=amount,
        description=description,
        date=entry_date,
    )


# === Actions ===


@dataclass(frozen=True)
class AddEntry:
    entry: LedgerEntry


@dataclass(frozen=True)
class DeleteEntry:
    entry_id: str


@dataclass(frozen=True)
class ClearAll:
    """Empty the ledger. Asking the user to confirm happens before dispatch."""


LedgerAction = AddEntry | DeleteEntry | ClearAll


def reduce_ledger(entries: tuple[LedgerEntry, ...], action: LedgerAction) -> tuple[LedgerEntry, ...]:
    """Apply one action to the prior entries and return the new entries.

    Deleting an unknown id is a no-op.
    """
    if isinstance(action, AddEntry):
        return (action.entry, *entries)
    if isinstance(action, DeleteEntry):
        return tuple(e for e in entries if e.id != action.entry_id)
    if isinstance(action, ClearAll):
        return ()
    raise TypeError(f"Unsupported ledger action: {type(action).__name__}")


# === Aggregates ===


@dataclass(frozen=True)
class MonthlyTotals:
    month: str  # YYYY-MM
    income: float
    expense: float


@dataclass
class LedgerSummary:
    total_income: float
    total_expenses: float
    category_totals: dict[str, float] = field(default_factory=dict)
    monthly_trend: list[MonthlyTotals] = field(default_factory=list)

    @property
    def net_savings(self) -> float:
        return self.total_income - self.total_expenses

    @property
    def savings_rate(self) -> int:
        """Net savings as a whole percentage of income; 0 without income."""
        if self.total_income <= 0:
            return 0
        return round_half_away(self.net_savings / self.total_income * 100)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "net_savings": self.net_savings,
            "savings_rate": self.savings_rate,
            "category_totals": dict(self.category_totals),
            "monthly_trend": [
                {"month": m.month, "income": m.income, "expense": m.expense} for m in self.monthly_trend
            ],
        }


def total_for(entries: tuple[LedgerEntry, ...], entry_type: EntryType) -> float:
    return sum(e.amount for e in entries if e.type is entry_type)


def expense_by_category(entries: tuple[LedgerEntry, ...]) -> dict[str, float]:
    """Expense totals per category, in order of first appearance."""
    grouped: dict[str, float] = {}
    for e in entries:
        if e.type is EntryType.EXPENSE:
            grouped[e.category] = grouped.get(e.category, 0) + e.amount
    return grouped


def monthly_trend(entries: tuple[LedgerEntry, ...], months: int = DEFAULT_TREND_MONTHS) -> list[MonthlyTotals]:
    """Income and expense per ``YYYY-MM``, ascending, keeping only the latest ``months``."""
    buckets: dict[str, dict[str, float]] = defaultdict(lambda: {"income": 0.0, "expense": 0.0})
    for e in entries:
        buckets[e.month][e.type.value] += e.amount

    ordered = sorted(buckets.items())[-months:] if months > 0 else []
    return [MonthlyTotals(month=m, income=v["income"], expense=v["expense"]) for m, v in ordered]


def summarize(entries: tuple[LedgerEntry, ...], trend_months: int = DEFAULT_TREND_MONTHS) -> LedgerSummary:
    return LedgerSummary(
        total_income=total_for(entries, EntryType.INCOME),
        total_expenses=total_for(entries, EntryType.EXPENSE),
        category_totals=expense_by_category(entries),
        monthly_trend=monthly_trend(entries, trend_months),
    )


def entries_from_records(records: Any) -> tuple[LedgerEntry, ...]:
    """Rebuild entries from their persisted dicts, skipping any that are malformed."""
    if not isinstance(records, list):
        if records is not None:
            logger.warning(f"Ledger data is not a list ({type(records).__name__}); starting empty")
        return ()

    entries = []
    for record in records:
        try:
            entries.append(LedgerEntry.from_dict(record))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed ledger entry {record!r}: {e}")
    return tuple(entries)


def entries_to_records(entries: tuple[LedgerEntry, ...]) -> list[dict[str, Any]]:
    return [e.to_dict() for e in entries]
