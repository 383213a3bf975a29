"""Contact models, field value objects, and address lookup."""

from addressbook.person.fields import (
    FieldValue,
    FieldValueError,
    PostalCode,
    Street,
    Unit,
)
from addressbook.person.lookup import ADDRESS_NOT_FOUND, AddressLookup
from addressbook.person.models import AddressBook, Contact

__all__ = [
    "ADDRESS_NOT_FOUND",
    "AddressBook",
    "AddressLookup",
    "Contact",
    "FieldValue",
    "FieldValueError",
    "PostalCode",
    "Street",
    "Unit",
]
