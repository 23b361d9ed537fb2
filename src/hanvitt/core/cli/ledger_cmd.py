"""hanvitt ledger: record income and expenses and review the totals."""

from __future__ import annotations

import json

import click

from hanvitt.financial.ledger import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    AddEntry,
    ClearAll,
    DeleteEntry,
    create_entry,
    summarize,
)
from hanvitt.financial.ledger_store import LedgerFileStore

from .common import AMOUNT, console, key_value_table, load_settings, rupees


def _store(ctx: click.Context) -> LedgerFileStore:
    settings = load_settings(ctx)
    return LedgerFileStore(path=str(settings.paths.ledger_file), storage_key=settings.ledger.storage_key)


@click.group()
def ledger() -> None:
    """Track income and expenses."""


@ledger.command("add")
@click.argument("entry_type", type=click.Choice(["income", "expense"]))
@click.argument("category", type=click.Choice(INCOME_CATEGORIES + EXPENSE_CATEGORIES))
@click.argument("amount", type=AMOUNT)
@click.option("--description", "-d", default="", help="Defaults to the category.")
@click.option("--date", "entry_date", default=None, help="YYYY-MM-DD, defaults to today.")
@click.pass_context
def add(ctx: click.Context, entry_type: str, category: str, amount: float, description: str, entry_date: str | None) -> None:
    """Record an entry."""
    try:
        entry = create_entry(entry_type, category, amount, description, entry_date)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    _store(ctx).apply(AddEntry(entry))
    click.echo(f"Added {entry.type.value} {entry.id}: {rupees(entry.amount)} ({entry.category})")


@ledger.command("delete")
@click.argument("entry_id")
@click.pass_context
def delete(ctx: click.Context, entry_id: str) -> None:
    """Remove an entry by id."""
    store = _store(ctx)
    before = len(store.load())
    after = len(store.apply(DeleteEntry(entry_id)))
    if after == before:
        click.echo(f"No entry with id {entry_id}")
    else:
        click.echo(f"Deleted {entry_id}")


@ledger.command("clear")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def clear(ctx: click.Context, yes: bool) -> None:
    """Delete every entry."""
    if not yes and not click.confirm("Delete all ledger entries?"):
        click.echo("Aborted.")
        return
    _store(ctx).apply(ClearAll())
    click.echo("Ledger cleared.")


@ledger.command("list")
@click.pass_context
def list_entries(ctx: click.Context) -> None:
    """Show entries, newest first."""
    from rich.table import Table

    entries = _store(ctx).load()
    if not entries:
        click.echo("No entries yet.")
        return

    table = Table(title="Ledger", title_justify="left")
    for column in ("Id", "Date", "Type", "Category", "Amount", "Description"):
        table.add_column(column)
    for e in entries:
        table.add_row(e.id[:8], e.date, e.type.value, e.category, f"{e.amount:,.0f}", e.description)
    console().print(table)


@ledger.command("summary")
@click.option("--json", "as_json", is_flag=True)
@click.pass_context
def summary(ctx: click.Context, as_json: bool) -> None:
    """Totals, savings rate, spending by category and the monthly trend."""
    months = load_settings(ctx).ledger.trend_months
    result = summarize(_store(ctx).load(), trend_months=months)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    out = console()
    out.print(
        key_value_table(
            "Ledger summary",
            [
                ("Income", rupees(result.total_income)),
                ("Expenses", rupees(result.total_expenses)),
                ("Net savings", rupees(result.net_savings)),
                ("Savings rate", f"{result.savings_rate}%"),
            ],
        )
    )
    if result.category_totals:
        out.print(key_value_table("Spending by category", [(k, rupees(v)) for k, v in result.category_totals.items()]))
    if result.monthly_trend:
        out.print(
            key_value_table(
                "Monthly trend",
                [(m.month, f"+{m.income:,.0f} / -{m.expense:,.0f}") for m in result.monthly_trend],
            )
        )
