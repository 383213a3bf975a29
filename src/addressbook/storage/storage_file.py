"""XML file persistence for the address book."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from addressbook.person.fields import FieldValueError
from addressbook.person.models import AddressBook
from addressbook.storage.adapted import (
    adapt_address_book,
    address_book_from_adapted,
    is_any_required_field_missing,
)
from addressbook.storage.errors import (
    InvalidStorageFilePathError,
    StorageConversionError,
    StorageInvalidValuesError,
    StorageInvariantError,
    StorageMissingElementsError,
    StorageParseError,
    StorageReadError,
    StorageWriteError,
)
from addressbook.storage.xml_codec import (
    XmlDecodeError,
    XmlEncodeError,
    decode_address_book,
    encode_address_book,
)

DEFAULT_STORAGE_FILEPATH = "addressbook.xml"
DEFAULT_STORAGE_EXTENSION = ".xml"

_LOGGER = logging.getLogger(__name__)


class StorageFile:
    """The file used to store address book data.

    The path is validated once at construction. Each ``save``/``load`` call is
    a single best-effort attempt: it either completes or raises one storage
    error. A write that fails midway may leave a truncated file behind.
    """

    def __init__(
        self,
        file_path: str | Path | None = None,
        *,
        extension: str = DEFAULT_STORAGE_EXTENSION,
    ) -> None:
        """Create storage bound to one validated file path.

        Args:
            file_path: Target path; ``DEFAULT_STORAGE_FILEPATH`` when omitted.
            extension: Required case-sensitive file name suffix.

        Raises:
            InvalidStorageFilePathError: If the path lacks ``extension``.
        """
        raw_path = DEFAULT_STORAGE_FILEPATH if file_path is None else str(file_path)
        if not raw_path.endswith(extension):
            raise InvalidStorageFilePathError(
                f"Storage file should end with '{extension}'",
                data={"path": raw_path, "extension": extension},
            )
        self._path = Path(raw_path)

    @property
    def path(self) -> Path:
        """Validated storage file path."""
        return self._path

    def get_path(self) -> str:
        """Return the storage path as a string.

        Returns:
            Storage file path string.
        """
        return str(self._path)

    def save(self, book: AddressBook) -> None:
        """Write every contact to the storage file, replacing its contents.

        Args:
            book: Address book to persist; it is not modified.

        Raises:
            StorageConversionError: If the book cannot be encoded as XML.
            StorageWriteError: If the file cannot be written.
        """
        try:
            payload = encode_address_book(adapt_address_book(book))
        except (XmlEncodeError, ValidationError) as exc:
            raise StorageConversionError(
                "Error converting address book into storage format",
                data={"path": self.get_path(), "reason": str(exc)},
            ) from exc
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("wb") as handle:
                handle.write(payload)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise StorageWriteError(
                f"Error writing to file: {self._path} ({reason}); "
                "try using a different file to which you have edit access.",
                data={"path": self.get_path(), "reason": reason},
            ) from exc
        _LOGGER.debug("Saved %d contacts to %s", len(book.contacts), self._path)

    def load(self) -> AddressBook:
        """Read the address book from the storage file.

        Returns:
            Stored address book, or an empty one when no regular file exists.

        Raises:
            StorageParseError: If the file is not a well-formed address book.
            StorageMissingElementsError: If a contact lacks a required field.
            StorageInvalidValuesError: If a stored value violates its rule.
            StorageReadError: If the existing file cannot be read.
            StorageInvariantError: If the file vanished after the existence check.
        """
        try:
            if not self._path.is_file():
                _LOGGER.debug("No storage file at %s; starting empty", self._path)
                return AddressBook()
            with self._path.open("rb") as handle:
                document = decode_address_book(handle)
        except FileNotFoundError as exc:
            raise StorageInvariantError(
                f"Storage file {self._path} vanished after existence check."
            ) from exc
        except OSError as exc:
            reason = exc.strerror or str(exc)
            _LOGGER.warning("Could not read %s: %s", self._path, reason)
            raise StorageReadError(
                f"Error reading from file: {self._path} ({reason})",
                data={"path": self.get_path(), "reason": reason},
            ) from exc
        except XmlDecodeError as exc:
            _LOGGER.warning("Could not parse %s: %s", self._path, exc)
            raise StorageParseError(
                "Error parsing file data format",
                data={"path": self.get_path(), "reason": str(exc)},
            ) from exc

        if is_any_required_field_missing(document):
            _LOGGER.warning("Storage file %s is missing elements", self._path)
            raise StorageMissingElementsError(
                "File data missing some elements",
                data={"path": self.get_path()},
            )
        try:
            book = address_book_from_adapted(document)
        except FieldValueError as exc:
            _LOGGER.warning("Storage file %s has invalid values: %s", self._path, exc)
            raise StorageInvalidValuesError(
                "File contains illegal data values; data type constraints not met: "
                f"{exc}",
                data={
                    "path": self.get_path(),
                    "field": exc.field,
                    "constraint": exc.constraint,
                },
            ) from exc
        _LOGGER.debug("Loaded %d contacts from %s", len(book.contacts), self._path)
        return book
