"""Permissive on-disk shapes and their conversions to and from contact models.

The adapted shapes mirror ``Contact`` and ``AddressBook`` with every field
optional, so that a file can be read completely before any value validation
runs. Conversions are plain functions; shapes carry no behaviour of their own.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from addressbook.person.fields import FieldValue, PostalCode, Street, Unit
from addressbook.person.models import AddressBook, Contact

T = TypeVar("T", bound=FieldValue)

REQUIRED_FIELDS: tuple[str, ...] = ("postal_code", "street", "unit")


class MissingFieldError(ValueError):
    """Raised when an adapted contact lacks a required field."""

    def __init__(self, field_name: str) -> None:
        """Create missing-field failure.

        Args:
            field_name: Name of the absent required field.
        """
        super().__init__(f"Missing required field: {field_name}")
        self.field_name = field_name


class AdaptedField(BaseModel):
    """Raw field text plus optional visibility marker."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: str | None = None
    is_private: bool | None = None


class AdaptedContact(BaseModel):
    """On-disk contact shape with every field optional."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    postal_code: AdaptedField | None = None
    street: AdaptedField | None = None
    unit: AdaptedField | None = None


class AdaptedAddressBook(BaseModel):
    """On-disk address book document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    contacts: tuple[AdaptedContact, ...] = ()


def adapt_contact(contact: Contact) -> AdaptedContact:
    """Copy a contact into its on-disk shape.

    Args:
        contact: Validated contact.

    Returns:
        Adapted contact carrying every value and visibility flag.
    """
    return AdaptedContact(
        postal_code=_adapt_field(contact.postal_code),
        street=_adapt_field(contact.street),
        unit=_adapt_field(contact.unit),
    )


def missing_required_fields(adapted: AdaptedContact) -> tuple[str, ...]:
    """Return names of required fields absent from one adapted contact.

    Args:
        adapted: On-disk contact shape.

    Returns:
        Missing field names in declaration order.
    """
    missing: list[str] = []
    for name in REQUIRED_FIELDS:
        field = getattr(adapted, name)
        if field is None or field.value is None:
            missing.append(name)
    return tuple(missing)


def contact_from_adapted(adapted: AdaptedContact) -> Contact:
    """Rebuild a validated contact from its on-disk shape.

    Args:
        adapted: On-disk contact shape.

    Returns:
        Validated contact.

    Raises:
        MissingFieldError: If a required field is absent.
        FieldValueError: If a present value violates its format rule.
    """
    missing = missing_required_fields(adapted)
    if missing:
        raise MissingFieldError(missing[0])
    return Contact(
        postal_code=_parse_field(PostalCode, adapted.postal_code),
        street=_parse_field(Street, adapted.street),
        unit=_parse_field(Unit, adapted.unit),
    )


def adapt_address_book(book: AddressBook) -> AdaptedAddressBook:
    """Copy an address book into its on-disk document shape.

    Args:
        book: In-memory address book.

    Returns:
        Adapted document with contacts in original order.
    """
    return AdaptedAddressBook(
        contacts=tuple(adapt_contact(contact) for contact in book.contacts)
    )


def is_any_required_field_missing(document: AdaptedAddressBook) -> bool:
    """Return whether any contact in the document lacks a required field.

    Args:
        document: Adapted address book document.

    Returns:
        ``True`` when at least one required field is absent.
    """
    return any(missing_required_fields(contact) for contact in document.contacts)


def address_book_from_adapted(document: AdaptedAddressBook) -> AddressBook:
    """Rebuild a validated address book from its on-disk document.

    Callers must check ``is_any_required_field_missing`` first; a document
    is either converted completely or not at all.

    Args:
        document: Adapted address book document.

    Returns:
        Address book with contacts in original order.

    Raises:
        FieldValueError: If a present value violates its format rule.
    """
    return AddressBook(
        contacts=tuple(contact_from_adapted(contact) for contact in document.contacts)
    )


def _adapt_field(field: FieldValue) -> AdaptedField:
    return AdaptedField(value=str(field), is_private=field.is_private)


def _parse_field(kind: type[T], adapted: AdaptedField | None) -> T:
    assert adapted is not None and adapted.value is not None  # Narrowed by pre-check.
    return kind.parse(adapted.value, is_private=bool(adapted.is_private))
