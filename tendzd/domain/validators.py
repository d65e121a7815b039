"""Shape validators for Bahraini business and contact identifiers.

Each validator is a total predicate: it returns False for anything that
does not have the expected shape, including empty strings and non-string
input, and never raises. These are format checks only, not registry or
bank lookups.

Digits typed on an Arabic keyboard (Eastern Arabic-Indic) are accepted
and treated as their ASCII equivalents.
"""

import re

from tendzd.domain.currency import normalize_digits


BAHRAIN_COUNTRY_CODE = "973"
LOCAL_PHONE_DIGITS = 8
INTERNATIONAL_PHONE_DIGITS = len(BAHRAIN_COUNTRY_CODE) + LOCAL_PHONE_DIGITS

CR_MIN_DIGITS = 6
CR_MAX_DIGITS = 8

IBAN_LENGTH = 22

_CR_WITH_BRANCH = re.compile(r"[0-9]{6,8}[-/][0-9]{2}")
_CR_ALLOWED = re.compile(r"[0-9./-]+")
_VAT_NUMBER = re.compile(r"BH[0-9]{9}")
_IBAN = re.compile(r"BH[0-9]{2}[A-Z]{4}[0-9]{14}")
_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE = re.compile(r"\s+")


def _digits_only(value: str) -> str:
    return _NON_DIGITS.sub("", normalize_digits(value))


def _compact(value: str) -> str:
    return _WHITESPACE.sub("", normalize_digits(value))


def validate_cr_number(value: object) -> bool:
    """Check the shape of a Commercial Registration number.

    Accepts 6-8 digits, optionally followed by a 2-digit branch suffix
    (``123456-01``). Separators ``-``, ``/`` and ``.`` are ignored when
    counting digits. Letters are rejected rather than stripped, so
    ``CR123456`` is not a CR number.

    Args:
        value: Candidate CR number.

    Returns:
        True if the value looks like a CR number.
    """
    if not isinstance(value, str):
        return False
    compact = _compact(value)
    if _CR_WITH_BRANCH.fullmatch(compact):
        return True
    if not _CR_ALLOWED.fullmatch(compact):
        return False
    return CR_MIN_DIGITS <= len(_digits_only(compact)) <= CR_MAX_DIGITS


def validate_vat_number(value: object) -> bool:
    """Check the shape of a VAT registration number: ``BH`` + 9 digits.

    The ``BH`` prefix is case-sensitive. Whitespace anywhere is ignored.
    """
    if not isinstance(value, str):
        return False
    return _VAT_NUMBER.fullmatch(_compact(value)) is not None


def validate_bahrain_phone(value: object) -> bool:
    """Check the shape of a Bahraini phone number.

    After stripping non-digits the number must be either 8 digits (local
    form) or 11 digits starting with the ``973`` country code.

    Args:
        value: Candidate phone number, e.g. ``"+973 3333 1234"``.

    Returns:
        True if the value looks like a Bahraini phone number.
    """
    if not isinstance(value, str):
        return False
    digits = _digits_only(value)
    if len(digits) == LOCAL_PHONE_DIGITS:
        return True
    return len(digits) == INTERNATIONAL_PHONE_DIGITS and digits.startswith(BAHRAIN_COUNTRY_CODE)


def validate_iban(value: object) -> bool:
    """Check the shape of a Bahraini IBAN.

    ``BH`` + 2 check digits + 4-letter bank code + 14 digits, 22
    characters in total. Whitespace is ignored; the check digits are not
    verified.
    """
    if not isinstance(value, str):
        return False
    compact = _compact(value)
    return len(compact) == IBAN_LENGTH and _IBAN.fullmatch(compact) is not None


def format_bahrain_phone(value: str) -> str:
    """Render a Bahraini phone number in E.164 form.

    Args:
        value: Phone number in any common notation.

    Returns:
        ``+973XXXXXXXX`` for a valid number, otherwise the input unchanged.
    """
    if not validate_bahrain_phone(value):
        return value
    digits = _digits_only(value)
    if len(digits) == LOCAL_PHONE_DIGITS:
        digits = BAHRAIN_COUNTRY_CODE + digits
    return f"+{digits}"
