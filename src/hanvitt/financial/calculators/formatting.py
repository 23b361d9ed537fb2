"""Rupee amount formatting and the rounding rules shared by every calculator.

``amount_to_words`` turns 12000000 into "₹1.2 Crore": it is a display helper
and no calculation depends on it.
"""

from __future__ import annotations

import math

from ..inputs import parse_number

# (divisor, unit, pluralised)
_MAGNITUDE_BANDS = [
    (10_000_000, "Crore", True),
    (100_000, "Lakh", False),
    (1_000, "Thousand", False),
]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def ceil_to(value: float, unit: int) -> int:
    """Round ``value`` up to the next multiple of ``unit``. Multiples are returned unchanged."""
    return int(math.ceil(value / unit)) * unit


def _trim_decimals(value: float, places: int = 2) -> str:
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_inr(value: float) -> str:
    """Format a whole-rupee amount with Indian digit grouping: 1234567 -> "12,34,567"."""
    rounded = round_half_away(value)
    sign = "-" if rounded < 0 else ""
    digits = str(abs(rounded))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def amount_to_words(value: str | float | int | None) -> str:
    """Describe an amount in Thousand/Lakh/Crore terms.

    Returns "" for zero and for anything that doesn't parse as a number.

    Examples:
        >>> amount_to_words(12_000_000)
        '₹1.2 Crore'
        >>> amount_to_words(250_000)
        '₹2.5 Lakh'
        >>> amount_to_words(-500)
        'Minus ₹500'
    """
    num = parse_number(value)
    if num is None or num == 0:
        return ""

    abs_num = abs(num)
    sign = "Minus " if num < 0 else ""

    for divisor, unit, pluralised in _MAGNITUDE_BANDS:
        if abs_num >= divisor:
            scaled = abs_num / divisor
            suffix = "s" if pluralised and scaled >= 2 else ""
            return f"{sign}₹{_trim_decimals(scaled)} {unit}{suffix}"

    return f"{sign}₹{format_inr(abs_num)}"
