"""Unit tests for contact field value objects."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from addressbook.person import FieldValueError, PostalCode, Street, Unit


@pytest.mark.unit
def test_postal_code_parse_trims_and_keeps_flag() -> None:
    """Postal code parse should trim input and carry the private flag."""
    # Act - parse padded code as private
    code = PostalCode.parse("  119077 ", is_private=True)

    # Assert - trimmed value, private flag, str form
    assert code.value == "119077"
    assert code.is_private is True
    assert str(code) == "119077"


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["12A456", "12345", "1234567", "", "١١٩٠٧٧"])
def test_postal_code_rejects_non_six_digit_values(raw: str) -> None:
    """Postal codes must be exactly six ASCII digits."""
    with pytest.raises(FieldValueError) as exc_info:
        PostalCode.parse(raw)

    assert exc_info.value.field == "postal_code"
    assert exc_info.value.constraint == PostalCode.CONSTRAINTS


@pytest.mark.unit
def test_street_and_unit_accept_free_form_single_line_text() -> None:
    """Street and unit accept any non-empty single-line text."""
    street = Street.parse(" Clementi Ave 3")
    unit = Unit.parse(" #12-34")

    assert str(street) == "Clementi Ave 3"
    assert str(unit) == "#12-34"
    assert street.is_private is False


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "   ", "Line one\nLine two", "a\rb"])
def test_street_rejects_blank_or_multiline_text(raw: str) -> None:
    """Blank or multi-line street text should fail validation."""
    with pytest.raises(FieldValueError, match="Street can be in any format"):
        Street.parse(raw)


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["Clementi\x01Ave", "Clementi\x0cAve", "#12\x00-34"])
def test_free_text_rejects_characters_xml_cannot_carry(raw: str) -> None:
    """Control characters other than tab should fail at parse time."""
    with pytest.raises(FieldValueError):
        Street.parse(raw)
    with pytest.raises(FieldValueError):
        Unit.parse(raw)


@pytest.mark.unit
def test_free_text_keeps_inner_tabs_and_non_ascii() -> None:
    """Tabs inside the value and non-ASCII text are valid free text."""
    street = Street.parse("  Clementi\tAve 3  ")
    unit = Unit.parse("#05-06 Résidence 北")

    assert street.value == "Clementi\tAve 3"
    assert unit.value == "#05-06 Résidence 北"


@pytest.mark.unit
def test_direct_construction_with_invalid_value_fails() -> None:
    """Bypassing parse must still refuse invalid values."""
    with pytest.raises(ValidationError):
        PostalCode(value="abc")


@pytest.mark.unit
def test_field_values_are_immutable_and_compare_by_value_and_flag() -> None:
    """Field values should be frozen and equal only with the same flag."""
    public = Unit.parse("#01-01")
    private = Unit.parse("#01-01", is_private=True)

    assert public == Unit.parse("#01-01")
    assert public != private
    with pytest.raises(ValidationError):
        public.value = "#02-02"  # type: ignore[misc]
