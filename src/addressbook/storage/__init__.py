"""Address book persistence: adapters, XML codec, and storage file."""

from addressbook.storage.adapted import (
    AdaptedAddressBook,
    AdaptedContact,
    AdaptedField,
    MissingFieldError,
    adapt_address_book,
    adapt_contact,
    address_book_from_adapted,
    contact_from_adapted,
    is_any_required_field_missing,
    missing_required_fields,
)
from addressbook.storage.errors import (
    InvalidStorageFilePathError,
    StorageConversionError,
    StorageError,
    StorageErrorCode,
    StorageInvalidValuesError,
    StorageInvariantError,
    StorageMissingElementsError,
    StorageParseError,
    StorageReadError,
    StorageWriteError,
)
from addressbook.storage.storage_file import (
    DEFAULT_STORAGE_EXTENSION,
    DEFAULT_STORAGE_FILEPATH,
    StorageFile,
)

__all__ = [
    "DEFAULT_STORAGE_EXTENSION",
    "DEFAULT_STORAGE_FILEPATH",
    "AdaptedAddressBook",
    "AdaptedContact",
    "AdaptedField",
    "InvalidStorageFilePathError",
    "MissingFieldError",
    "StorageConversionError",
    "StorageError",
    "StorageErrorCode",
    "StorageFile",
    "StorageInvalidValuesError",
    "StorageInvariantError",
    "StorageMissingElementsError",
    "StorageParseError",
    "StorageReadError",
    "StorageWriteError",
    "adapt_address_book",
    "adapt_contact",
    "address_book_from_adapted",
    "contact_from_adapted",
    "is_any_required_field_missing",
    "missing_required_fields",
]
