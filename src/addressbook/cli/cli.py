"""Typer CLI entrypoint for the address book."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.panel import Panel

from addressbook.cli.bootstrap import (
    build_lookup,
    build_storage,
    configure_logging,
    default_config_file,
    resolve_config,
    write_default_config,
)
from addressbook.cli.rendering import render_address_book, render_error
from addressbook.config import ConfigError
from addressbook.person.fields import FieldValueError, PostalCode, Street, Unit
from addressbook.person.models import Contact
from addressbook.storage import StorageError

app = typer.Typer(help="Address book CLI")
_CONSOLE = Console()

_FileOption = Annotated[
    Path | None,
    typer.Option(
        "--file",
        file_okay=True,
        dir_okay=False,
        help="Path to the address book XML file.",
    ),
]
_ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        file_okay=True,
        dir_okay=False,
        help="Path to address book config YAML/JSON file.",
    ),
]


@app.command("init")
def init_command(
    config_file: _ConfigOption = None,
    overwrite_config: Annotated[
        bool,
        typer.Option(
            "--overwrite-config",
            help="Overwrite existing config file with default template.",
        ),
    ] = False,
) -> None:
    """Write the default config file.

    Args:
        config_file: Optional config file path override.
        overwrite_config: Whether to overwrite existing config payload.
    """
    configure_logging()
    path = config_file or default_config_file()
    written = write_default_config(path, overwrite=overwrite_config)
    _CONSOLE.print(
        Panel(
            f"Config: {path}",
            title="Initialized" if written else "Already initialized",
            border_style="green",
            expand=True,
        )
    )


@app.command("list")
def list_command(
    file_path: _FileOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """List stored contacts.

    Args:
        file_path: Optional storage file override.
        config_file: Optional config file path override.

    Raises:
        Exit: Raised with code 1 when config or storage fails.
    """
    configure_logging()
    try:
        storage = build_storage(resolve_config(config_file), file_path)
        book = storage.load()
    except (ConfigError, StorageError) as exc:
        _fail(exc)
    render_address_book(_CONSOLE, book, source=storage.get_path())


@app.command("add")
def add_command(  # noqa: PLR0913
    postal_code: Annotated[str, typer.Option(help="Six-digit postal code.")],
    street: Annotated[str, typer.Option(help="Street name.")],
    unit: Annotated[str, typer.Option(help="Unit number.")],
    private_postal_code: Annotated[
        bool, typer.Option("--private-postal-code", help="Hide the postal code.")
    ] = False,
    private_street: Annotated[
        bool, typer.Option("--private-street", help="Hide the street.")
    ] = False,
    private_unit: Annotated[
        bool, typer.Option("--private-unit", help="Hide the unit.")
    ] = False,
    file_path: _FileOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Append one contact to the address book file.

    Args:
        postal_code: Raw postal code.
        street: Raw street name.
        unit: Raw unit number.
        private_postal_code: Whether the postal code is private.
        private_street: Whether the street is private.
        private_unit: Whether the unit is private.
        file_path: Optional storage file override.
        config_file: Optional config file path override.

    Raises:
        Exit: Raised with code 1 when validation, config, or storage fails.
    """
    configure_logging()
    try:
        contact = Contact(
            postal_code=PostalCode.parse(postal_code, is_private=private_postal_code),
            street=Street.parse(street, is_private=private_street),
            unit=Unit.parse(unit, is_private=private_unit),
        )
        storage = build_storage(resolve_config(config_file), file_path)
        book = storage.load().with_contact(contact)
        storage.save(book)
    except (ConfigError, FieldValueError, StorageError) as exc:
        _fail(exc)
    _CONSOLE.print(
        f"Added contact; {len(book.contacts)} stored in {storage.get_path()}.",
        style="green",
        markup=False,
        soft_wrap=True,
    )


@app.command("lookup")
def lookup_command(
    postal_code: Annotated[str, typer.Argument(help="Six-digit postal code.")],
    config_file: _ConfigOption = None,
) -> None:
    """Look up the street address registered for a postal code.

    Args:
        postal_code: Raw postal code.
        config_file: Optional config file path override.

    Raises:
        Exit: Raised with code 1 when the code is invalid or lookup is disabled.
    """
    configure_logging()
    try:
        config = resolve_config(config_file)
        code = PostalCode.parse(postal_code)
    except (ConfigError, FieldValueError) as exc:
        _fail(exc)
    if not config.lookup.enabled:
        render_error(
            _CONSOLE, code="lookup_disabled", message="Address lookup is disabled."
        )
        raise typer.Exit(code=1)
    address = code.retrieve_matching_address(build_lookup(config))
    _CONSOLE.print(address, markup=False, soft_wrap=True)


@app.command("path")
def path_command(
    file_path: _FileOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Print the effective storage file path.

    Args:
        file_path: Optional storage file override.
        config_file: Optional config file path override.

    Raises:
        Exit: Raised with code 1 when config or path validation fails.
    """
    try:
        storage = build_storage(resolve_config(config_file), file_path)
    except (ConfigError, StorageError) as exc:
        _fail(exc)
    _CONSOLE.print(storage.get_path(), markup=False, soft_wrap=True)


def _fail(exc: ConfigError | FieldValueError | StorageError) -> NoReturn:
    """Render one expected failure and abort the command.

    Args:
        exc: Failure to render.

    Raises:
        Exit: Always, with code 1.
    """
    if isinstance(exc, StorageError):
        code = exc.code.value
    elif isinstance(exc, FieldValueError):
        code = "invalid_field_value"
    else:
        code = "config_invalid"
    render_error(_CONSOLE, code=code, message=str(exc))
    raise typer.Exit(code=1) from exc


def main() -> None:
    """Run the address book CLI."""
    app()
