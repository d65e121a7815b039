"""Domain layer - settlement engine, money, validators, numbering.

Everything in this package is pure: no I/O, no logging, no shared
mutable state. It is safe to call from any number of threads.

Example usage:
    from tendzd.domain import LineItem, SettlementEngine, VendorConfig

    engine = SettlementEngine()
    settlement = engine.compute_settlement(
        [
            LineItem.from_decimal("iphone-15", "techstore", "450.500", 1),
            LineItem.from_decimal("abaya-blue", "fashion", "45.250", 1),
        ],
        {
            "techstore": VendorConfig.from_decimal("100.000"),
            "fashion": VendorConfig.from_decimal("75.000"),
        },
    )
    print(settlement.overall_total)  # 500.750 BHD
"""

# Base classes
from tendzd.domain.base import ValueObject

# Business hours
from tendzd.domain.business_hours import BusinessHoursStatus, business_hours_status

# Time
from tendzd.domain.clock import BAHRAIN_TZ, Clock

# Currency
from tendzd.domain.currency import (
    FILS_PER_DINAR,
    format_currency,
    normalize_digits,
    round_half_up,
    to_decimal,
    to_fils,
)

# Delivery
from tendzd.domain.delivery import DeliveryOption

# Exceptions
from tendzd.domain.exceptions import (
    CurrencyMismatchError,
    DomainError,
    InvalidAmountError,
    InvalidCommissionRateError,
    InvalidLineItemError,
    InvalidVatRateError,
    MissingVendorConfigError,
    MoneyError,
    NegativeMoneyError,
    OrderError,
    OrderNumberCollisionError,
    SettlementError,
)

# Numbering
from tendzd.domain.numbering import (
    generate_order_number,
    generate_vendor_order_number,
    is_order_number,
)

# Settlement
from tendzd.domain.settlement import (
    DEFAULT_FLAT_SHIPPING_FEE,
    DEFAULT_VAT_RATE,
    CommissionSplit,
    OrderSettlement,
    SettlementEngine,
    VatBreakdown,
    VendorGroup,
    compute_commission_split,
    compute_settlement,
    decompose_vat,
)

# Validators
from tendzd.domain.validators import (
    format_bahrain_phone,
    validate_bahrain_phone,
    validate_cr_number,
    validate_iban,
    validate_vat_number,
)

# Value Objects
from tendzd.domain.value_objects import LineItem, Money, VendorConfig

__all__ = [
    # Base classes
    "ValueObject",
    # Value Objects
    "LineItem",
    "Money",
    "VendorConfig",
    # Settlement
    "CommissionSplit",
    "DEFAULT_FLAT_SHIPPING_FEE",
    "DEFAULT_VAT_RATE",
    "OrderSettlement",
    "SettlementEngine",
    "VatBreakdown",
    "VendorGroup",
    "compute_commission_split",
    "compute_settlement",
    "decompose_vat",
    # Currency
    "FILS_PER_DINAR",
    "format_currency",
    "normalize_digits",
    "round_half_up",
    "to_decimal",
    "to_fils",
    # Validators
    "format_bahrain_phone",
    "validate_bahrain_phone",
    "validate_cr_number",
    "validate_iban",
    "validate_vat_number",
    # Numbering
    "generate_order_number",
    "generate_vendor_order_number",
    "is_order_number",
    # Time and business hours
    "BAHRAIN_TZ",
    "BusinessHoursStatus",
    "Clock",
    "business_hours_status",
    # Delivery
    "DeliveryOption",
    # Exceptions
    "DomainError",
    "SettlementError",
    "InvalidLineItemError",
    "InvalidCommissionRateError",
    "InvalidVatRateError",
    "MissingVendorConfigError",
    "OrderError",
    "OrderNumberCollisionError",
    "MoneyError",
    "InvalidAmountError",
    "CurrencyMismatchError",
    "NegativeMoneyError",
]
