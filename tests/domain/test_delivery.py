"""Tests for delivery options."""

from tendzd.domain import DeliveryOption, Money


class TestDeliveryOption:
    """Tests for DeliveryOption."""

    def test_fees(self) -> None:
        """Each speed has its flat per-vendor fee."""
        assert DeliveryOption.STANDARD.fee == Money(5000)
        assert DeliveryOption.EXPRESS.fee == Money(10000)
        assert DeliveryOption.SAME_DAY.fee == Money(15000)

    def test_labels(self) -> None:
        """Labels follow the locale, defaulting to Arabic."""
        assert DeliveryOption.EXPRESS.label("en") == "Express Delivery (Next day)"
        assert DeliveryOption.STANDARD.label() == "التوصيل العادي (2-3 أيام)"

    def test_parse_from_value(self) -> None:
        """Options parse from their string values."""
        assert DeliveryOption("express") is DeliveryOption.EXPRESS
