"""Shared value types for the financial calculators.

Every type here is an immutable value: calculators build them, callers
read them, nothing holds a reference to anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TriState(Enum):
    """An answer to a yes/no question that may not have been answered yet.

    Scoring rules treat UNKNOWN exactly like NO.
    """

    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: TriState | bool | str | None) -> TriState:
        """Coerce booleans, None and "yes"/"no"/"true"/"false" strings."""
        if isinstance(value, TriState):
            return value
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, bool):
            return cls.YES if value else cls.NO
        normalized = str(value).strip().lower()
        if normalized in ("yes", "true", "y", "1"):
            return cls.YES
        if normalized in ("no", "false", "n", "0"):
            return cls.NO
        return cls.UNKNOWN

    @property
    def is_yes(self) -> bool:
        return self is TriState.YES


class CityTier(Enum):
    """Cost-of-living band of the insured's city."""

    TIER1 = "tier1"  # Metro
    TIER2 = "tier2"  # Urban
    TIER3 = "tier3"  # Everywhere else


@dataclass(frozen=True)
class BreakdownItem:
    """One contributory line of a recommended cover amount.

    ``label`` is a localisation key, not display text.
    """

    label: str
    amount: int


@dataclass(frozen=True)
class CoverVerdict:
    """How an existing policy compares with the recommended cover."""

    recommended: int
    existing: float
    gap: float
    surplus: float
    sufficient: bool


def assess_cover(recommended: int, existing: float | None) -> CoverVerdict:
    """Compare an existing cover (None = no policy) against a recommendation."""
    held = max(0.0, existing or 0.0)
    sufficient = held >= recommended
    return CoverVerdict(
        recommended=recommended,
        existing=held,
        gap=max(0.0, recommended - held),
        surplus=held - recommended if sufficient else 0.0,
        sufficient=sufficient,
    )
