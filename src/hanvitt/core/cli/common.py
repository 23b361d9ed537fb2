"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click

from hanvitt.financial.calculators.formatting import amount_to_words, format_inr
from hanvitt.financial.inputs import DEFAULT_AMOUNT_MAX, parse_amount
from hanvitt.financial.models import CityTier, TriState


class AmountType(click.ParamType):
    """Rupee amount: accepts "500000", "5,00,000" or "1e6"; clamped to [0, max]."""

    name = "amount"

    def __init__(self, maximum: float = DEFAULT_AMOUNT_MAX):
        self.maximum = maximum

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return min(max(0.0, float(value)), self.maximum)
        parsed = parse_amount(value, self.maximum)
        if parsed is None:
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        return parsed


AMOUNT = AmountType()
CITY_TIER = click.Choice([t.value for t in CityTier])
TRI_STATE = click.Choice([t.value for t in TriState])


def load_config(ctx: click.Context):
    """Return the Config for this invocation, honouring ``--config``."""
    from hanvitt.core.config import get_config

    obj = ctx.find_root().obj or {}
    if "config" not in obj:
        obj["config"] = get_config(config_file=obj.get("config_file"))
        ctx.find_root().obj = obj
    return obj["config"]


def load_settings(ctx: click.Context):
    """Return the validated ``HanvittConfig`` (paths expanded) for this invocation."""
    obj = ctx.find_root().obj or {}
    if "settings" not in obj:
        obj["settings"] = load_config(ctx).validated()
        ctx.find_root().obj = obj
    return obj["settings"]


def rupees(value: float) -> str:
    """``₹12,34,567 (₹12.35 Lakh)`` for tables."""
    words = amount_to_words(value)
    text = f"₹{format_inr(value)}"
    return f"{text} ({words})" if words and abs(value) >= 1_000 else text


def console():
    from rich.console import Console

    return Console(highlight=False)


def key_value_table(title: str, rows: list[tuple[str, str]]):
    from rich.table import Table

    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("Item", style="bold")
    table.add_column("Value", justify="right")
    for label, value in rows:
        table.add_row(label, value)
    return table
