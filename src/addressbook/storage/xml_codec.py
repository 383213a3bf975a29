"""XML encoding and decoding for adapted address book documents."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import BinaryIO

from addressbook.storage.adapted import (
    AdaptedAddressBook,
    AdaptedContact,
    AdaptedField,
)

ROOT_TAG = "addressBook"
CONTACT_TAG = "contact"
PRIVATE_ATTRIBUTE = "isPrivate"

# Contact attribute name -> XML element tag.
FIELD_TAGS: dict[str, str] = {
    "postal_code": "postalCode",
    "street": "street",
    "unit": "unit",
}

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})
_XML_INVALID_CHARS = re.compile(
    r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


class XmlEncodeError(ValueError):
    """Raised when a document cannot be represented as XML."""


class XmlDecodeError(ValueError):
    """Raised when XML input is not a well-formed address book document."""


def encode_address_book(document: AdaptedAddressBook) -> bytes:
    """Serialize an adapted document to pretty-printed UTF-8 XML.

    Args:
        document: Adapted address book document.

    Returns:
        XML bytes including the declaration.

    Raises:
        XmlEncodeError: If a value contains characters XML 1.0 cannot carry.
    """
    root = ET.Element(ROOT_TAG)
    for contact in document.contacts:
        contact_element = ET.SubElement(root, CONTACT_TAG)
        for name, tag in FIELD_TAGS.items():
            field: AdaptedField | None = getattr(contact, name)
            if field is None:
                continue
            _append_field(contact_element, tag, field)
    ET.indent(root)
    return ET.tostring(root, encoding="UTF-8", xml_declaration=True) + b"\n"


def decode_address_book(source: BinaryIO) -> AdaptedAddressBook:
    """Parse XML from a binary handle into an adapted document.

    Args:
        source: Open binary file handle.

    Returns:
        Adapted document; field presence is not checked here.

    Raises:
        XmlDecodeError: If the XML is malformed or has an unexpected layout.
    """
    try:
        root = ET.parse(source).getroot()
    # Unknown or multi-byte declared encodings surface as LookupError/ValueError.
    except (ET.ParseError, LookupError, ValueError) as exc:
        raise XmlDecodeError(f"Malformed XML: {exc}") from exc
    if root.tag != ROOT_TAG:
        raise XmlDecodeError(
            f"Unexpected root element <{root.tag}>; expected <{ROOT_TAG}>."
        )
    contacts: list[AdaptedContact] = []
    for element in root:
        if element.tag != CONTACT_TAG:
            raise XmlDecodeError(
                f"Unexpected element <{element.tag}> inside <{ROOT_TAG}>."
            )
        contacts.append(_decode_contact(element))
    return AdaptedAddressBook(contacts=tuple(contacts))


def _append_field(parent: ET.Element, tag: str, field: AdaptedField) -> None:
    element = ET.SubElement(parent, tag)
    if field.is_private:
        element.set(PRIVATE_ATTRIBUTE, "true")
    if field.value is None:
        return
    if _XML_INVALID_CHARS.search(field.value):
        raise XmlEncodeError(f"Value for <{tag}> contains characters invalid in XML.")
    element.text = field.value


def _decode_contact(element: ET.Element) -> AdaptedContact:
    fields: dict[str, AdaptedField] = {}
    for name, tag in FIELD_TAGS.items():
        child = element.find(tag)
        if child is None:
            continue
        fields[name] = AdaptedField(
            value=child.text,
            is_private=_decode_flag(child.get(PRIVATE_ATTRIBUTE), tag),
        )
    return AdaptedContact(**fields)


def _decode_flag(raw: str | None, tag: str) -> bool | None:
    if raw is None:
        return None
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise XmlDecodeError(f"Invalid {PRIVATE_ATTRIBUTE} value {raw!r} on <{tag}>.")
