"""Tests for identifier shape validators."""

import pytest

from tendzd.domain import (
    format_bahrain_phone,
    validate_bahrain_phone,
    validate_cr_number,
    validate_iban,
    validate_vat_number,
)


class TestCRNumber:
    """Tests for Commercial Registration numbers."""

    @pytest.mark.parametrize(
        "value",
        ["123456", "1234567", "12345678", "123456-01", "12345678-01", "123456/02", "123 456", "١٢٣٤٥٦"],
    )
    def test_valid(self, value: str) -> None:
        """6-8 digits, optionally with a branch suffix, are valid."""
        assert validate_cr_number(value)

    @pytest.mark.parametrize(
        "value",
        ["", "12345", "123456789", "abc123456", "CR123456", "123456-ab"],
    )
    def test_invalid(self, value: str) -> None:
        """Wrong digit counts and stray letters are invalid."""
        assert not validate_cr_number(value)

    def test_non_string(self) -> None:
        """Non-string input is invalid, not an error."""
        assert not validate_cr_number(None)
        assert not validate_cr_number(123456)


class TestVATNumber:
    """Tests for VAT registration numbers."""

    def test_valid(self) -> None:
        """BH followed by nine digits is valid."""
        assert validate_vat_number("BH123456789")

    def test_whitespace_ignored(self) -> None:
        """Whitespace is stripped before matching."""
        assert validate_vat_number(" BH 123 456 789 ")

    def test_too_short(self) -> None:
        """Fewer than nine digits is invalid."""
        assert not validate_vat_number("BH12345")

    def test_prefix_is_case_sensitive(self) -> None:
        """A lowercase prefix is invalid."""
        assert not validate_vat_number("bh123456789")

    @pytest.mark.parametrize("value", ["", "BH1234567890", "XX123456789", "123456789", None])
    def test_invalid(self, value) -> None:
        """Other shapes are invalid."""
        assert not validate_vat_number(value)


class TestBahrainPhone:
    """Tests for Bahraini phone numbers."""

    @pytest.mark.parametrize(
        "value",
        ["+973 3333 1234", "97333331234", "33331234", "3333-1234", "+٩٧٣ ٣٣٣٣ ١٢٣٤"],
    )
    def test_valid(self, value: str) -> None:
        """International and local forms are valid."""
        assert validate_bahrain_phone(value)

    @pytest.mark.parametrize(
        "value",
        ["", "3333123", "96633331234", "0097333331234", "+973 3333 12345", "phone"],
    )
    def test_invalid(self, value: str) -> None:
        """Other digit counts and country codes are invalid."""
        assert not validate_bahrain_phone(value)

    def test_format_international(self) -> None:
        """Valid numbers render in E.164 form."""
        assert format_bahrain_phone("+973 3333 1234") == "+97333331234"
        assert format_bahrain_phone("3333 1234") == "+97333331234"

    def test_format_leaves_invalid_untouched(self) -> None:
        """Invalid numbers are returned unchanged."""
        assert format_bahrain_phone("123") == "123"


class TestIBAN:
    """Tests for Bahraini IBANs."""

    @pytest.mark.parametrize(
        "value",
        ["BH67NBOB00001234567890", "BH89BISB00002345678901", "BH67 NBOB 0000 1234 5678 90"],
    )
    def test_valid(self, value: str) -> None:
        """22-character BH IBANs are valid."""
        assert validate_iban(value)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "bh67nbob00001234567890",
            "BH67NBOB0000123456789",
            "BH67NBOB000012345678901",
            "GB67NBOB00001234567890",
            "BH6XNBOB00001234567890",
            "BH67NB0B00001234567890",
            None,
        ],
    )
    def test_invalid(self, value) -> None:
        """Wrong country, length, case or character classes are invalid."""
        assert not validate_iban(value)
