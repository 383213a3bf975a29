"""Rich views for address book CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from addressbook.person.fields import FieldValue
from addressbook.person.models import AddressBook

_MASK = "(private)"


def render_address_book(console: Console, book: AddressBook, *, source: str) -> None:
    """Render contacts as a table, masking private values.

    Args:
        console: Rich console.
        book: Address book to render.
        source: Storage path shown in the title.
    """
    if not book.contacts:
        console.print(f"No contacts in {source}.", style="yellow", markup=False)
        return
    table = Table(
        title=escape(f"Contacts ({source})"),
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Postal Code", style="bold", no_wrap=True)
    table.add_column("Street")
    table.add_column("Unit", no_wrap=True)
    for index, contact in enumerate(book.contacts, start=1):
        table.add_row(
            str(index),
            _display(contact.postal_code),
            _display(contact.street),
            _display(contact.unit),
        )
    console.print(table)


def render_error(console: Console, *, code: str, message: str) -> None:
    """Render one failure as a red panel.

    Args:
        console: Rich console.
        code: Stable error code.
        message: Human-readable error message.
    """
    console.print(
        Panel(
            escape(message),
            title=escape(f"Error [{code}]"),
            border_style="bold red",
            expand=True,
        )
    )


def _display(field: FieldValue) -> str:
    return _MASK if field.is_private else escape(str(field))
