"""Parsing and clamping of raw form input before it reaches a calculator.

Calculators assume well-formed, non-negative, clamped numbers. These helpers
are what the caller uses to get there.
"""

from __future__ import annotations

import math

DEFAULT_AMOUNT_MAX = 1_000_000_000

# Per-field upper bounds used by the input forms
SAVINGS_RATE_MAX = 100
SAVINGS_YEARS_MAX = 100
AGE_MIN = 18
AGE_MAX = 100
CHILDREN_MAX = 10
PARENTS_MAX = 4


def parse_number(raw: str | float | int | None) -> float | None:
    """Parse like a lenient float parser: None for anything that isn't a finite number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(lo, value), hi)


def parse_amount(raw: str | float | int | None, maximum: float = DEFAULT_AMOUNT_MAX) -> float | None:
    """Turn a raw field value into a clamped non-negative amount.

    Returns:
        0 for an empty field, None for unparseable text (the caller keeps its
        previous value), otherwise the number clamped to ``[0, maximum]``.
    """
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return 0.0
    value = parse_number(raw)
    if value is None:
        return None
    return clamp(value, 0, maximum)


def parse_count(raw: str | int | None, maximum: int, default: int = 0) -> int:
    """Parse an integer count (children, parents, years), clamped to ``[0, maximum]``."""
    value = parse_number(raw)
    if value is None:
        return default
    return int(clamp(int(value), 0, maximum))


def parse_age(raw: str | int | None, default: int = 30) -> int:
    value = parse_number(raw)
    if value is None or value <= 0:
        return default
    return int(clamp(int(value), AGE_MIN, AGE_MAX))
