"""Address book config models and loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from addressbook.person.lookup import DEFAULT_SEARCH_URL, DEFAULT_TIMEOUT_SECONDS
from addressbook.storage.storage_file import (
    DEFAULT_STORAGE_EXTENSION,
    DEFAULT_STORAGE_FILEPATH,
)


class StorageSettings(BaseModel):
    """Storage file location and required extension."""

    model_config = ConfigDict(extra="forbid")

    path: str = DEFAULT_STORAGE_FILEPATH
    extension: str = Field(default=DEFAULT_STORAGE_EXTENSION, min_length=1)


class LookupSettings(BaseModel):
    """Address lookup service settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    base_url: str = DEFAULT_SEARCH_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


class AddressBookConfig(BaseModel):
    """Root address book configuration model."""

    model_config = ConfigDict(extra="forbid")

    storage: StorageSettings = StorageSettings()
    lookup: LookupSettings = LookupSettings()


class ConfigError(RuntimeError):
    """Raised when config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError("Invalid config payload: root must be an object")
    return payload


def load_config(path: Path) -> AddressBookConfig:
    """Load address book config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        ConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return AddressBookConfig()
    payload = _decode_config_payload(path)
    try:
        return AddressBookConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config payload: {exc}") from exc
