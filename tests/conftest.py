"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from addressbook.person import AddressBook, Contact, PostalCode, Street, Unit


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Address book XML path under a temporary directory."""
    return tmp_path / "addressbook.xml"


@pytest.fixture
def clementi_contact() -> Contact:
    """Public contact at Clementi Ave 3."""
    return Contact(
        postal_code=PostalCode.parse("119077"),
        street=Street.parse("Clementi Ave 3"),
        unit=Unit.parse("#12-34"),
    )


@pytest.fixture
def mixed_book(clementi_contact: Contact) -> AddressBook:
    """Book with a duplicate and a contact carrying private fields."""
    private_contact = Contact(
        postal_code=PostalCode.parse("520123", is_private=True),
        street=Street.parse("Tampines St 11"),
        unit=Unit.parse("#03-07", is_private=True),
    )
    return AddressBook(contacts=(clementi_contact, private_contact, clementi_contact))
