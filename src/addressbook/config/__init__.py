"""Address book configuration loading."""

from addressbook.config.settings import (
    AddressBookConfig,
    ConfigError,
    LookupSettings,
    StorageSettings,
    load_config,
)

__all__ = [
    "AddressBookConfig",
    "ConfigError",
    "LookupSettings",
    "StorageSettings",
    "load_config",
]
