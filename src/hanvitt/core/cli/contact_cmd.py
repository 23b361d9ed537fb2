"""hanvitt contact: record consultation requests and notify the practice."""

from __future__ import annotations

import click

from hanvitt.contact import ContactNotifier, ContactStore, submit_contact_request
from hanvitt.core.exceptions import ValidationError

from .common import console, load_config, load_settings


def _store(ctx: click.Context) -> ContactStore:
    return ContactStore(str(load_settings(ctx).paths.contact_file))


@click.group()
def contact() -> None:
    """Consultation requests."""


@contact.command("submit")
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.option("--phone", default=None)
@click.option("--message", required=True)
@click.option("--notify/--no-notify", default=True, show_default=True, help="Email the practice inbox.")
@click.pass_context
def submit(ctx: click.Context, name: str, email: str, phone: str | None, message: str, notify: bool) -> None:
    """Save a request and email the practice."""
    notifier = ContactNotifier.from_config(load_config(ctx)) if notify else None
    try:
        request = submit_contact_request(
            {"name": name, "email": email, "phone": phone, "message": message},
            store=_store(ctx),
            notifier=notifier,
        )
    except ValidationError as e:
        raise click.ClickException(f"{e.field}: {e.message}" if e.field else e.message) from e
    click.echo(f"Saved request #{request.id}")


@contact.command("list")
@click.option("--unread", is_flag=True, help="Only requests not yet marked read.")
@click.pass_context
def list_requests(ctx: click.Context, unread: bool) -> None:
    """Show stored requests."""
    from rich.table import Table

    requests = [r for r in _store(ctx).list_requests() if not (unread and r.is_read)]
    if not requests:
        click.echo("No requests.")
        return

    table = Table(title="Consultation requests", title_justify="left")
    for column in ("#", "Received", "Name", "Email", "Phone"):
        table.add_column(column)
    for r in requests:
        table.add_row(str(r.id), r.created_at.strftime("%Y-%m-%d %H:%M"), r.name, r.email, r.phone or "")
    console().print(table)


@contact.command("mark-read")
@click.argument("request_id", type=int)
@click.pass_context
def mark_read(ctx: click.Context, request_id: int) -> None:
    """Mark a request as handled."""
    if _store(ctx).mark_read(request_id):
        click.echo(f"Marked #{request_id} as read")
    else:
        raise click.ClickException(f"No request #{request_id}")
