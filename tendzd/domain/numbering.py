"""Order and vendor-order number generation.

Both generators produce human-readable identifiers and make no
uniqueness guarantee: two concurrent calls may return the same value.
Detecting a duplicate and retrying is the job of whoever persists the
order (see ``OrderService``).
"""

import random
import re
import string

from tendzd.domain.clock import Clock, epoch_millis, read_clock, to_bahrain_time


ORDER_NUMBER_PREFIX = "BH"
ORDER_SUFFIX_LENGTH = 4
ORDER_SUFFIX_ALPHABET = string.digits + string.ascii_uppercase
VENDOR_PREFIX_LENGTH = 3
VENDOR_SUFFIX_DIGITS = 6

ORDER_NUMBER_PATTERN = re.compile(r"BH[0-9]{6}[0-9A-Z]{4}")

# SystemRandom draws from os.urandom and is safe to share between threads
_random = random.SystemRandom()


def generate_order_number(clock: Clock | None = None, rng: random.Random | None = None) -> str:
    """Generate an order number such as ``BH250314K7Q2``.

    Format: ``BH`` + the Bahrain-local date as ``YYMMDD`` + 4 random
    characters from ``0-9A-Z``.

    Args:
        clock: Zero-argument callable returning the current time.
        rng: Random source; defaults to a process-wide SystemRandom.

    Returns:
        Order number string. Not guaranteed unique.
    """
    local = to_bahrain_time(read_clock(clock))
    source = rng or _random
    suffix = "".join(source.choice(ORDER_SUFFIX_ALPHABET) for _ in range(ORDER_SUFFIX_LENGTH))
    return f"{ORDER_NUMBER_PREFIX}{local:%y%m%d}{suffix}"


def generate_vendor_order_number(vendor_slug: str, clock: Clock | None = None) -> str:
    """Generate a vendor order number such as ``TEC123456``.

    Format: first three characters of the vendor slug, uppercased, then
    the last six digits of the current epoch milliseconds. Calls within
    the same millisecond, or exactly 1000 seconds apart, collide.

    Args:
        vendor_slug: Vendor slug, e.g. ``"techstore"``.
        clock: Zero-argument callable returning the current time.

    Returns:
        Vendor order number string. Not guaranteed unique.
    """
    millis = epoch_millis(read_clock(clock))
    prefix = vendor_slug[:VENDOR_PREFIX_LENGTH].upper()
    return f"{prefix}{millis % 10**VENDOR_SUFFIX_DIGITS:0{VENDOR_SUFFIX_DIGITS}d}"


def is_order_number(value: object) -> bool:
    """Check whether a value has the shape of an order number."""
    return isinstance(value, str) and ORDER_NUMBER_PATTERN.fullmatch(value) is not None
