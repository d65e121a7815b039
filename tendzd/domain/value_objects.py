"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from tendzd.domain.base import ValueObject
from tendzd.domain.currency import CURRENCY_CODE, to_decimal, to_fils
from tendzd.domain.exceptions import CurrencyMismatchError, NegativeMoneyError


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True)
class Money(ValueObject):
    """Represents a non-negative monetary value.

    Money is stored in the smallest currency unit (fils for BHD, where
    1 BHD = 1000 fils) to avoid floating-point precision issues.

    Attributes:
        amount_fils: Amount in fils.
        currency: ISO 4217 currency code.
    """

    amount_fils: int
    currency: str = CURRENCY_CODE

    def __post_init__(self) -> None:
        """Validate money constraints."""
        if self.amount_fils < 0:
            raise NegativeMoneyError(self.amount_fils)
        # Normalize currency to uppercase
        object.__setattr__(self, "currency", self.currency.upper())

    @classmethod
    def zero(cls, currency: str = CURRENCY_CODE) -> Self:
        """Create zero amount money.

        Args:
            currency: Currency code.

        Returns:
            Money with zero amount.
        """
        return cls(amount_fils=0, currency=currency)

    @classmethod
    def from_decimal(cls, amount: Decimal | int | str, currency: str = CURRENCY_CODE) -> Self:
        """Create money from an amount in dinars.

        Args:
            amount: Amount in major units (e.g. ``Decimal("450.500")``).
            currency: Currency code.

        Returns:
            Money instance.

        Raises:
            InvalidAmountError: If the amount is not finite.
            NegativeMoneyError: If the amount is negative.
        """
        return cls(amount_fils=to_fils(amount), currency=currency)

    @classmethod
    def from_float(cls, amount: float, currency: str = CURRENCY_CODE) -> Self:
        """Create money from float amount.

        Note: Prefer from_decimal for precision. This method is
        provided for convenience.

        Args:
            amount: Float amount in major units.
            currency: Currency code.

        Returns:
            Money instance.
        """
        return cls(amount_fils=to_fils(amount), currency=currency)

    def to_decimal(self) -> Decimal:
        """Convert to decimal amount in dinars.

        Returns:
            Decimal amount with exactly three fractional digits.
        """
        return to_decimal(self.amount_fils)

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __add__(self, other: "Money") -> "Money":
        """Add two money amounts.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_currency(other)
        return Money(
            amount_fils=self.amount_fils + other.amount_fils,
            currency=self.currency,
        )

    def __sub__(self, other: "Money") -> "Money":
        """Subtract money amounts.

        Raises:
            CurrencyMismatchError: If currencies don't match.
            NegativeMoneyError: If result would be negative.
        """
        self._check_currency(other)
        return Money(
            amount_fils=self.amount_fils - other.amount_fils,
            currency=self.currency,
        )

    def __mul__(self, quantity: int) -> "Money":
        """Multiply money by quantity."""
        return Money(
            amount_fils=self.amount_fils * quantity,
            currency=self.currency,
        )

    def __rmul__(self, quantity: int) -> "Money":
        return self.__mul__(quantity)

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount_fils < other.amount_fils

    def __le__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount_fils <= other.amount_fils

    def __gt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount_fils > other.amount_fils

    def __ge__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount_fils >= other.amount_fils

    def __str__(self) -> str:
        """Return formatted string representation.

        Returns:
            Formatted money string (e.g., '450.500 BHD').
        """
        return f"{self.to_decimal()} {self.currency}"

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount_fils == 0


# ============================================================================
# Line Item
# ============================================================================


@dataclass(frozen=True)
class LineItem(ValueObject):
    """One product quantity in a cart or order.

    Prices are VAT-inclusive (the displayed sale price). The item is not
    validated on construction: the settlement engine checks the whole
    batch and reports the first offending item.

    Attributes:
        product_id: Opaque product identifier.
        vendor_id: Opaque identifier of the vendor that owns the product.
        unit_price_fils: VAT-inclusive unit price in fils.
        quantity: Number of units.
    """

    product_id: str
    vendor_id: str
    unit_price_fils: int
    quantity: int

    @classmethod
    def from_decimal(
        cls,
        product_id: str,
        vendor_id: str,
        unit_price: Decimal | int | float | str,
        quantity: int,
    ) -> Self:
        """Create a line item from a dinar unit price.

        Args:
            product_id: Product identifier.
            vendor_id: Vendor identifier.
            unit_price: VAT-inclusive unit price in dinars.
            quantity: Number of units.

        Returns:
            LineItem instance.

        Raises:
            InvalidAmountError: If the price is not finite.
        """
        return cls(
            product_id=product_id,
            vendor_id=vendor_id,
            unit_price_fils=to_fils(unit_price),
            quantity=quantity,
        )

    @property
    def unit_price(self) -> Decimal:
        """Unit price in dinars."""
        return to_decimal(self.unit_price_fils)

    @property
    def line_total_fils(self) -> int:
        """Unit price multiplied by quantity, in fils."""
        return self.unit_price_fils * self.quantity


# ============================================================================
# Vendor Configuration
# ============================================================================


@dataclass(frozen=True)
class VendorConfig(ValueObject):
    """Per-vendor settlement settings supplied by the vendor configuration store.

    Attributes:
        free_shipping_threshold: VAT-inclusive items total at or above which
            the vendor ships for free.
        commission_rate: Platform commission for this vendor, or None to
            use the platform default.
    """

    free_shipping_threshold: Money
    commission_rate: Decimal | None = None

    @classmethod
    def from_decimal(
        cls,
        free_shipping_threshold: Decimal | int | str,
        commission_rate: Decimal | str | None = None,
    ) -> Self:
        """Create a vendor config from dinar amounts.

        Args:
            free_shipping_threshold: Threshold in dinars.
            commission_rate: Optional commission rate.

        Returns:
            VendorConfig instance.
        """
        return cls(
            free_shipping_threshold=Money.from_decimal(free_shipping_threshold),
            commission_rate=Decimal(commission_rate) if commission_rate is not None else None,
        )
