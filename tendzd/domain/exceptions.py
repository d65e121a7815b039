"""Domain exceptions.

All domain-level errors that represent business rule violations.
Nothing here is retryable: every failure is local and synchronous,
and the settlement engine raises before producing any partial result.
"""

from typing import Any, ClassVar


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Settlement Errors
# ============================================================================


class SettlementError(DomainError):
    """Base class for settlement computation errors."""

    error_code: ClassVar[str] = "SETTLEMENT_ERROR"


class InvalidLineItemError(SettlementError):
    """Raised when a line item breaks the caller contract.

    Signals the first offending item of the batch; no settlement is
    computed for any of the other items.
    """

    error_code: ClassVar[str] = "INVALID_LINE_ITEM"

    def __init__(self, field: str, index: int, product_id: str, value: Any) -> None:
        """Initialize invalid line item error.

        Args:
            field: Offending field name ("quantity" or "unit_price").
            index: Position of the item in the input sequence.
            product_id: Product of the offending item.
            value: The rejected value.
        """
        super().__init__(
            f"Invalid line item {index} ({product_id}): {field}={value!r}",
            details={
                "field": field,
                "index": index,
                "product_id": product_id,
                "value": value,
            },
        )
        self.field = field
        self.index = index


class InvalidCommissionRateError(SettlementError):
    """Raised when a commission rate falls outside [0, 1]."""

    error_code: ClassVar[str] = "INVALID_COMMISSION_RATE"

    def __init__(self, rate: Any) -> None:
        """Initialize invalid commission rate error.

        Args:
            rate: The rejected rate.
        """
        super().__init__(
            f"Commission rate must be within [0, 1], got {rate}",
            details={"rate": str(rate)},
        )


class InvalidVatRateError(SettlementError):
    """Raised when a VAT rate falls outside [0, 1)."""

    error_code: ClassVar[str] = "INVALID_VAT_RATE"

    def __init__(self, rate: Any) -> None:
        super().__init__(
            f"VAT rate must be within [0, 1), got {rate}",
            details={"rate": str(rate)},
        )


class MissingVendorConfigError(SettlementError):
    """Raised when line items reference a vendor with no configuration."""

    error_code: ClassVar[str] = "MISSING_VENDOR_CONFIG"

    def __init__(self, vendor_id: str) -> None:
        super().__init__(
            f"No configuration supplied for vendor {vendor_id}",
            details={"vendor_id": vendor_id},
        )


# ============================================================================
# Order Errors
# ============================================================================


class OrderError(DomainError):
    """Base class for order-related errors."""

    error_code: ClassVar[str] = "ORDER_ERROR"


class OrderNumberCollisionError(OrderError):
    """Raised when no unused order number could be generated."""

    error_code: ClassVar[str] = "ORDER_NUMBER_COLLISION"

    def __init__(self, attempts: int) -> None:
        """Initialize order number collision error.

        Args:
            attempts: Number of generation attempts made.
        """
        super().__init__(
            f"Could not generate an unused order number after {attempts} attempts",
            details={"attempts": attempts},
        )


# ============================================================================
# Money Errors
# ============================================================================


class MoneyError(DomainError):
    """Base class for money-related errors."""

    error_code: ClassVar[str] = "MONEY_ERROR"


class InvalidAmountError(MoneyError):
    """Raised when a currency amount cannot be converted to fils."""

    error_code: ClassVar[str] = "INVALID_AMOUNT"

    def __init__(self, amount: Any) -> None:
        """Initialize invalid amount error.

        Args:
            amount: The rejected input.
        """
        super().__init__(
            f"Amount is not a finite number: {amount!r}",
            details={"amount": str(amount)},
        )


class CurrencyMismatchError(MoneyError):
    """Raised when attempting to combine money with different currencies."""

    error_code: ClassVar[str] = "CURRENCY_MISMATCH"

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot combine money with different currencies: {currency1} and {currency2}",
            details={"currency1": currency1, "currency2": currency2},
        )


class NegativeMoneyError(MoneyError):
    """Raised when attempting to create money with negative amount."""

    error_code: ClassVar[str] = "NEGATIVE_MONEY"

    def __init__(self, amount: int) -> None:
        """Initialize negative money error.

        Args:
            amount: The negative amount in fils.
        """
        super().__init__(
            f"Money amount cannot be negative: {amount}",
            details={"amount": amount},
        )
