"""Delivery options offered at checkout.

The chosen option sets the flat shipping fee charged to each vendor
group that does not qualify for free shipping.
"""

from enum import Enum

from tendzd.domain.currency import is_arabic_locale
from tendzd.domain.value_objects import Money


class DeliveryOption(str, Enum):
    """Delivery speeds and their per-vendor fees."""

    STANDARD = "standard"
    EXPRESS = "express"
    SAME_DAY = "same_day"

    @property
    def fee(self) -> Money:
        return _FEES[self]

    def label(self, locale: str = "ar") -> str:
        """Display name for the option in the given locale."""
        english, arabic = _LABELS[self]
        return arabic if is_arabic_locale(locale) else english


_FEES = {
    DeliveryOption.STANDARD: Money(amount_fils=5000),
    DeliveryOption.EXPRESS: Money(amount_fils=10000),
    DeliveryOption.SAME_DAY: Money(amount_fils=15000),
}

_LABELS = {
    DeliveryOption.STANDARD: ("Standard Delivery (2-3 days)", "التوصيل العادي (2-3 أيام)"),
    DeliveryOption.EXPRESS: ("Express Delivery (Next day)", "التوصيل السريع (اليوم التالي)"),
    DeliveryOption.SAME_DAY: ("Same Day Delivery", "التوصيل في نفس اليوم"),
}
