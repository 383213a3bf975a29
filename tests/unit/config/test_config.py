"""Unit tests for address book config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from addressbook.config import ConfigError, load_config


@pytest.mark.unit
def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    """Missing config file should yield deterministic defaults."""
    config = load_config(tmp_path / "missing.yaml")

    assert config.storage.path == "addressbook.xml"
    assert config.storage.extension == ".xml"
    assert config.lookup.enabled is True
    assert config.lookup.base_url == "https://developers.onemap.sg/commonapi/search"
    assert config.lookup.timeout_seconds == 10.0


@pytest.mark.unit
def test_load_config_reads_yaml_overrides(tmp_path: Path) -> None:
    """YAML payloads should override nested settings."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "storage": {"path": "data/contacts.xml"},
                "lookup": {"enabled": False, "timeout_seconds": 2.5},
            }
        ),
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.storage.path == "data/contacts.xml"
    assert config.storage.extension == ".xml"
    assert config.lookup.enabled is False
    assert config.lookup.timeout_seconds == 2.5


@pytest.mark.unit
def test_load_config_reads_json(tmp_path: Path) -> None:
    """JSON payloads should be decoded by suffix."""
    config_path = tmp_path / "config.json"
    config_path.write_text('{"storage": {"extension": ".book.xml"}}', encoding="utf-8")

    assert load_config(config_path).storage.extension == ".book.xml"


@pytest.mark.unit
def test_load_config_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    """An empty YAML document should behave like an empty mapping."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path).storage.path == "addressbook.xml"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("config.json", "{not-json"),
        ("config.yaml", "storage: [unclosed"),
        ("config.yaml", "- just\n- a list\n"),
        ("config.yaml", "unknown_section: {}\n"),
        ("config.yaml", "lookup:\n  timeout_seconds: 0\n"),
    ],
)
def test_load_config_rejects_invalid_payloads(
    tmp_path: Path, name: str, content: str
) -> None:
    """Decode, shape, and validation failures should raise config errors."""
    config_path = tmp_path / name
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path)
