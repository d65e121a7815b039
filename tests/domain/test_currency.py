"""Tests for fixed-point currency helpers."""

from decimal import Decimal

import pytest

from tendzd.domain import Money, format_currency, normalize_digits, to_decimal, to_fils
from tendzd.domain.exceptions import InvalidAmountError


class TestToFils:
    """Tests for dinar to fils conversion."""

    def test_decimal(self) -> None:
        """Decimal dinars convert to integer fils."""
        assert to_fils(Decimal("450.500")) == 450500

    def test_int_and_string(self) -> None:
        """Integers and numeric strings are accepted."""
        assert to_fils(3) == 3000
        assert to_fils("45.25") == 45250

    def test_float_uses_decimal_representation(self) -> None:
        """Floats convert by their shortest decimal representation."""
        assert to_fils(0.1) == 100
        assert to_fils(19.999) == 19999

    def test_rounds_half_up(self) -> None:
        """Half a fil rounds up."""
        assert to_fils("0.0005") == 1
        assert to_fils("0.0004") == 0
        assert to_fils("1.2345") == 1235

    def test_negative_rounds_away_from_zero(self) -> None:
        """Negative ties round away from zero."""
        assert to_fils("-1.2345") == -1235

    @pytest.mark.parametrize(
        "amount",
        [float("nan"), float("inf"), float("-inf"), Decimal("Infinity"), Decimal("NaN"), "abc", None],
    )
    def test_non_finite_raises(self, amount) -> None:
        """Non-finite or unparseable input raises InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            to_fils(amount)


class TestToDecimal:
    """Tests for fils to dinar conversion."""

    def test_three_fractional_digits(self) -> None:
        """Result always carries exactly three fractional digits."""
        assert str(to_decimal(450500)) == "450.500"
        assert str(to_decimal(5)) == "0.005"
        assert str(to_decimal(0)) == "0.000"


class TestFormatCurrency:
    """Tests for locale formatting."""

    def test_english(self) -> None:
        """English uses Western digits and a BHD prefix."""
        assert format_currency(Money(1234500), "en") == "BHD 1,234.500"

    def test_english_region_tag(self) -> None:
        """Region subtags do not change the language."""
        assert format_currency(Money(450500), "en-BH") == "BHD 450.500"

    def test_arabic(self) -> None:
        """Arabic uses Eastern Arabic-Indic digits and the dinar label."""
        assert format_currency(Money(1234500), "ar") == "١٬٢٣٤٫٥٠٠ د.ب"
        assert format_currency(Money(1234500), "ar-BH") == "١٬٢٣٤٫٥٠٠ د.ب"
        assert format_currency(Money(0), "ar_BH") == "٠٫٠٠٠ د.ب"

    def test_unknown_locale_falls_back_to_english(self) -> None:
        """Unknown locales render as English."""
        assert format_currency(Money(5000), "fr") == "BHD 5.000"

    def test_accepts_fils_and_decimal(self) -> None:
        """Integer fils and dinar Decimals are accepted."""
        assert format_currency(45250, "en") == "BHD 45.250"
        assert format_currency(Decimal("45.25"), "en") == "BHD 45.250"

    def test_negative_amount(self) -> None:
        """Negative amounts get a leading sign."""
        assert format_currency(-5000, "en") == "-BHD 5.000"


class TestNormalizeDigits:
    """Tests for digit normalisation."""

    def test_arabic_indic_digits(self) -> None:
        """Eastern Arabic-Indic digits map to ASCII."""
        assert normalize_digits("٣٣٣٣١٢٣٤") == "33331234"

    def test_persian_digits(self) -> None:
        """Persian digits map to ASCII."""
        assert normalize_digits("۹۷۳") == "973"

    def test_other_text_untouched(self) -> None:
        """Non-digit characters pass through."""
        assert normalize_digits("BH 12-ab") == "BH 12-ab"
