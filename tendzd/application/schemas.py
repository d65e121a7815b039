"""Request schemas for the order service.

Pydantic models validating the structure and types of data arriving
from the cart and checkout UI. Business rules (positive quantities,
non-negative prices, identifier shapes) are left to the domain so that
its own errors reach the caller.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from tendzd.domain.delivery import DeliveryOption
from tendzd.domain.value_objects import LineItem


class LineItemRequest(BaseModel):
    """One cart line as submitted by the UI."""

    product_id: str = Field(..., min_length=1, description="Product ID")
    vendor_id: str = Field(..., min_length=1, description="Owning vendor ID")
    unit_price: Decimal = Field(
        ..., allow_inf_nan=False, description="VAT-inclusive unit price in BHD"
    )
    quantity: int = Field(..., description="Number of units")

    def to_domain(self) -> LineItem:
        """Convert to a domain line item."""
        return LineItem.from_decimal(
            product_id=self.product_id,
            vendor_id=self.vendor_id,
            unit_price=self.unit_price,
            quantity=self.quantity,
        )


class SettlementRequest(BaseModel):
    """Request to compute cart totals."""

    items: list[LineItemRequest] = Field(
        default_factory=list, description="Cart lines; may be empty"
    )
    delivery_option: DeliveryOption = Field(
        default=DeliveryOption.STANDARD, description="Chosen delivery speed"
    )
    locale: str | None = Field(
        default=None, description="Display locale (ar or en); platform default when omitted"
    )

    def line_items(self) -> list[LineItem]:
        return [item.to_domain() for item in self.items]


class CheckoutRequest(SettlementRequest):
    """Request to place an order."""

    items: list[LineItemRequest] = Field(
        ..., min_length=1, description="Cart lines to purchase"
    )
    customer_phone: str = Field(..., description="Bahraini contact phone number")
    vat_number: str | None = Field(
        default=None, description="Buyer VAT registration number (business buyers)"
    )
    cr_number: str | None = Field(
        default=None, description="Buyer Commercial Registration number (business buyers)"
    )
