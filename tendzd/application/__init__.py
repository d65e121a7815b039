"""Application layer - services orchestrating the settlement core."""

from tendzd.application.order_service import (
    OrderRepository,
    OrderService,
    PaymentRequest,
    PlacedOrder,
    PlaceOrderResult,
    QuoteResult,
    ValidationIssue,
    VendorDirectory,
    VendorOrder,
    VendorProfile,
)
from tendzd.application.schemas import CheckoutRequest, LineItemRequest, SettlementRequest

__all__ = [
    "CheckoutRequest",
    "LineItemRequest",
    "OrderRepository",
    "OrderService",
    "PaymentRequest",
    "PlaceOrderResult",
    "PlacedOrder",
    "QuoteResult",
    "SettlementRequest",
    "ValidationIssue",
    "VendorDirectory",
    "VendorOrder",
    "VendorProfile",
]
