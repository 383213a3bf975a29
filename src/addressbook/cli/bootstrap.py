"""CLI bootstrap helpers: logging, config, and storage wiring."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from rich.logging import RichHandler

from addressbook.config import AddressBookConfig, load_config
from addressbook.person.lookup import AddressLookup
from addressbook.storage import StorageFile

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def default_config_file() -> Path:
    """Return default config path for the current working directory.

    Returns:
        YAML config path, or the JSON one when only that exists.
    """
    root = Path.cwd() / ".addressbook"
    yaml_path = root / "config.yaml"
    json_path = root / "config.json"
    if not yaml_path.exists() and json_path.exists():
        return json_path
    return yaml_path


def resolve_config(config_file: Path | None) -> AddressBookConfig:
    """Load config from an explicit path or the default location.

    Args:
        config_file: Optional config path override.

    Returns:
        Loaded config, or defaults when the file is missing.
    """
    return load_config(config_file or default_config_file())


def write_default_config(path: Path, *, overwrite: bool) -> bool:
    """Write the default config template.

    Args:
        path: Destination config path.
        overwrite: Whether to replace an existing file.

    Returns:
        ``True`` when the file was written.
    """
    if path.exists() and not overwrite:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = AddressBookConfig().model_dump(mode="json")
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return True


def build_storage(config: AddressBookConfig, file_path: Path | None) -> StorageFile:
    """Build the storage file from config and an optional path override.

    Args:
        config: Loaded config.
        file_path: Optional storage path override.

    Returns:
        Storage file bound to the validated path.
    """
    path = str(file_path) if file_path is not None else config.storage.path
    return StorageFile(path, extension=config.storage.extension)


def build_lookup(config: AddressBookConfig) -> AddressLookup:
    """Build the address lookup client from config.

    Args:
        config: Loaded config.

    Returns:
        Lookup client.
    """
    return AddressLookup(
        base_url=config.lookup.base_url,
        timeout_seconds=config.lookup.timeout_seconds,
    )
