"""Fixed-point currency helpers for the Bahraini dinar.

The dinar has three decimal places: 1 BHD = 1000 fils. Every amount that
enters the system is converted to integer fils with ``to_fils`` and all
arithmetic downstream is integer-only. Conversion back to a decimal and
locale formatting happen only at the presentation boundary.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TYPE_CHECKING

from tendzd.domain.exceptions import InvalidAmountError

if TYPE_CHECKING:
    from tendzd.domain.value_objects import Money


FILS_PER_DINAR = 1000
CURRENCY_CODE = "BHD"
CURRENCY_LABEL_EN = "BHD"
CURRENCY_LABEL_AR = "د.ب"

_ONE = Decimal("1")
_FILS_QUANTUM = Decimal("0.001")

_ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"

_TO_ASCII_DIGITS = str.maketrans(
    _ARABIC_INDIC_DIGITS + _PERSIAN_DIGITS,
    "0123456789" * 2,
)

# Arabic thousands (U+066C) and decimal (U+066B) separators
_TO_ARABIC_GLYPHS = str.maketrans(
    {
        **{str(d): _ARABIC_INDIC_DIGITS[d] for d in range(10)},
        ",": "٬",
        ".": "٫",
    }
)


def round_half_up(value: Decimal) -> int:
    """Round a decimal to the nearest integer, ties away from zero.

    Args:
        value: Decimal value to round.

    Returns:
        Rounded integer.
    """
    return int(value.quantize(_ONE, rounding=ROUND_HALF_UP))


def to_fils(amount: Decimal | int | float | str) -> int:
    """Convert a dinar amount to integer fils.

    Floats are routed through ``str`` so that ``0.1`` means one tenth
    rather than its binary approximation.

    Args:
        amount: Amount in dinars.

    Returns:
        Amount in fils, rounded half-up.

    Raises:
        InvalidAmountError: If the amount is not a finite number.
    """
    if isinstance(amount, float) and not math.isfinite(amount):
        raise InvalidAmountError(amount)
    try:
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, float):
            value = Decimal(str(amount))
        else:
            value = Decimal(amount)
        if not value.is_finite():
            raise InvalidAmountError(amount)
        return round_half_up(value * FILS_PER_DINAR)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(amount) from None


def to_decimal(fils: int) -> Decimal:
    """Convert integer fils to a dinar decimal with three fractional digits.

    Args:
        fils: Amount in fils.

    Returns:
        Decimal amount, e.g. ``Decimal("450.500")``.
    """
    return (Decimal(fils) / FILS_PER_DINAR).quantize(_FILS_QUANTUM)


def normalize_digits(text: str) -> str:
    """Map Eastern Arabic-Indic and Persian digits to ASCII digits."""
    return text.translate(_TO_ASCII_DIGITS)


def is_arabic_locale(locale: str | None) -> bool:
    """Check whether a locale tag (``ar``, ``ar-BH``, ``ar_BH``) is Arabic."""
    if not locale:
        return False
    return locale.replace("_", "-").split("-")[0].lower() == "ar"


def format_currency(amount: "Money | int | Decimal", locale: str = "ar") -> str:
    """Render an amount for display.

    English locales use Western digits and a leading ``BHD`` label;
    Arabic locales use Eastern Arabic-Indic digits with Arabic separators
    and a trailing ``د.ب`` label. Unknown locales render as English.

    Args:
        amount: Money, integer fils, or a dinar Decimal.
        locale: Locale tag such as ``en``, ``en-BH``, ``ar`` or ``ar-BH``.

    Returns:
        Formatted string, e.g. ``"BHD 1,234.500"`` or ``"١٬٢٣٤٫٥٠٠ د.ب"``.
    """
    if isinstance(amount, int):
        fils = amount
    elif isinstance(amount, Decimal):
        fils = to_fils(amount)
    else:
        fils = amount.amount_fils

    sign = "-" if fils < 0 else ""
    text = f"{to_decimal(abs(fils)):,.3f}"

    if is_arabic_locale(locale):
        return f"{sign}{text.translate(_TO_ARABIC_GLYPHS)} {CURRENCY_LABEL_AR}"
    return f"{sign}{CURRENCY_LABEL_EN} {text}"
