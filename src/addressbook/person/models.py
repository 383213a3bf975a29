"""Contact record and address book collection models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from addressbook.person.fields import PostalCode, Street, Unit


class Contact(BaseModel):
    """One contact entity with validated fields and per-field visibility."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    postal_code: PostalCode
    street: Street
    unit: Unit


class AddressBook(BaseModel):
    """Ordered contact collection; duplicates are permitted."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    contacts: tuple[Contact, ...] = ()

    def with_contact(self, contact: Contact) -> AddressBook:
        """Return a new book with one contact appended.

        Args:
            contact: Contact to append.

        Returns:
            New address book; this instance is unchanged.
        """
        return AddressBook(contacts=(*self.contacts, contact))
