"""Deterministic storage error contracts."""

from __future__ import annotations

from enum import StrEnum


class StorageErrorCode(StrEnum):
    """Stable storage file error codes."""

    INVALID_PATH = "storage_invalid_path"
    WRITE_FAILED = "storage_write_failed"
    CONVERSION_FAILED = "storage_conversion_failed"
    PARSE_FAILED = "storage_parse_failed"
    MISSING_ELEMENTS = "storage_missing_elements"
    INVALID_VALUES = "storage_invalid_values"
    READ_FAILED = "storage_read_failed"


class StorageError(RuntimeError):
    """Storage failure with stable deterministic code."""

    code: StorageErrorCode

    def __init__(
        self,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create storage failure.

        Args:
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.data = data or {}


class InvalidStorageFilePathError(StorageError):
    """Raised when a storage path lacks the required file extension."""

    code = StorageErrorCode.INVALID_PATH


class StorageWriteError(StorageError):
    """Raised when the storage file cannot be written."""

    code = StorageErrorCode.WRITE_FAILED


class StorageConversionError(StorageError):
    """Raised when in-memory data cannot be converted into the file format."""

    code = StorageErrorCode.CONVERSION_FAILED


class StorageParseError(StorageError):
    """Raised when the storage file is not a well-formed address book."""

    code = StorageErrorCode.PARSE_FAILED


class StorageMissingElementsError(StorageError):
    """Raised when a stored contact lacks one or more required fields."""

    code = StorageErrorCode.MISSING_ELEMENTS


class StorageInvalidValuesError(StorageError):
    """Raised when a stored field value violates its format rule."""

    code = StorageErrorCode.INVALID_VALUES


class StorageReadError(StorageError):
    """Raised when an existing storage file cannot be read."""

    code = StorageErrorCode.READ_FAILED


class StorageInvariantError(AssertionError):
    """Raised when the storage file vanishes between existence check and read."""
