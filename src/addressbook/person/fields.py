"""Self-validating contact field value objects."""

from __future__ import annotations

import re
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, model_validator

from addressbook.person.lookup import AddressLookup


class FieldValueError(ValueError):
    """Raised when a raw field string does not satisfy its format rule."""

    def __init__(self, field: str, constraint: str) -> None:
        """Create field validation failure.

        Args:
            field: Name of the field that failed validation.
            constraint: Human-readable description of the violated rule.
        """
        super().__init__(f"Invalid {field}: {constraint}")
        self.field = field
        self.constraint = constraint


class FieldValue(BaseModel):
    """Immutable validated field value paired with its visibility flag."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    FIELD_NAME: ClassVar[str] = "field"
    CONSTRAINTS: ClassVar[str] = ""
    # Non-empty single-line text that XML 1.0 can carry; tab is allowed.
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"[^\x00-\x08\x0a-\x1f\x85\u2028\u2029\ud800-\udfff\ufffe\uffff]+"
    )

    value: str
    is_private: bool = False

    @model_validator(mode="after")
    def _check_value(self) -> Self:
        if not type(self).is_valid(self.value):
            raise ValueError(type(self).CONSTRAINTS)
        return self

    @classmethod
    def is_valid(cls, candidate: str) -> bool:
        """Return whether a trimmed candidate satisfies this field's rule.

        Args:
            candidate: Trimmed raw string.

        Returns:
            ``True`` when the candidate is acceptable.
        """
        return cls.VALIDATION_REGEX.fullmatch(candidate) is not None

    @classmethod
    def parse(cls, raw: str, *, is_private: bool = False) -> Self:
        """Build a validated value from one raw string.

        Args:
            raw: Raw field text, trimmed before validation.
            is_private: Visibility flag carried alongside the value.

        Returns:
            Immutable validated field value.

        Raises:
            FieldValueError: If the trimmed text violates the field rule.
        """
        trimmed = raw.strip()
        if not cls.is_valid(trimmed):
            raise FieldValueError(cls.FIELD_NAME, cls.CONSTRAINTS)
        return cls(value=trimmed, is_private=is_private)

    def __str__(self) -> str:
        return self.value


class PostalCode(FieldValue):
    """Six-digit postal code."""

    FIELD_NAME: ClassVar[str] = "postal_code"
    CONSTRAINTS: ClassVar[str] = "Postal codes should be in a 6-digit format"
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{6}")
    EXAMPLE: ClassVar[str] = "119077"

    def retrieve_matching_address(self, lookup: AddressLookup | None = None) -> str:
        """Look up the street address registered for this postal code.

        The private flag has no influence on lookup.

        Args:
            lookup: Lookup service; a default one is built when omitted.

        Returns:
            Address text, or the not-found sentinel.
        """
        return (lookup or AddressLookup()).find_address(self.value)


class Street(FieldValue):
    """Free-form single-line street name."""

    FIELD_NAME: ClassVar[str] = "street"
    CONSTRAINTS: ClassVar[str] = "Street can be in any format"
    EXAMPLE: ClassVar[str] = "Clementi Ave 3"


class Unit(FieldValue):
    """Free-form single-line unit number."""

    FIELD_NAME: ClassVar[str] = "unit"
    CONSTRAINTS: ClassVar[str] = "Unit can be in any format"
    EXAMPLE: ClassVar[str] = "#12-34"
