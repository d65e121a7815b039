"""Multi-vendor order settlement.

Computes per-vendor subtotals, VAT, shipping fees and commission splits
for a cart or order, and the overall order totals.

All arithmetic is done in integer fils. Wherever a value is split in two
(VAT-inclusive total into net + VAT, net into commission + earnings) only
one side is rounded and the other side takes the residual, so the parts
always add back up to the whole exactly.

The engine is pure: it performs no I/O, holds no mutable state, and two
calls with identical input return equal results. It is safe to share a
single instance across threads.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self

from tendzd.domain.base import ValueObject
from tendzd.domain.currency import round_half_up
from tendzd.domain.exceptions import (
    InvalidCommissionRateError,
    InvalidLineItemError,
    InvalidVatRateError,
    MissingVendorConfigError,
)
from tendzd.domain.value_objects import LineItem, Money, VendorConfig


DEFAULT_VAT_RATE = Decimal("0.10")
DEFAULT_FLAT_SHIPPING_FEE = Money(amount_fils=5000)

RateLike = Decimal | int | float | str


def _to_rate(value: RateLike) -> Decimal | None:
    """Coerce a rate to Decimal, or None if it is not a finite number."""
    try:
        rate = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return rate if rate.is_finite() else None


def _vat_rate(value: RateLike) -> Decimal:
    rate = _to_rate(value)
    if rate is None or not (0 <= rate < 1):
        raise InvalidVatRateError(value)
    return rate


def _commission_rate(value: RateLike) -> Decimal:
    rate = _to_rate(value)
    if rate is None or not (0 <= rate <= 1):
        raise InvalidCommissionRateError(value)
    return rate


# ============================================================================
# Settlement Results
# ============================================================================


@dataclass(frozen=True)
class VatBreakdown(ValueObject):
    """Decomposition of an amount into its net and VAT parts.

    Attributes:
        net: Amount excluding VAT.
        vat: VAT amount.
        gross: Amount including VAT; always ``net + vat``.
    """

    net: Money
    vat: Money
    gross: Money


@dataclass(frozen=True)
class VendorGroup(ValueObject):
    """Settlement of the line items belonging to one vendor.

    Attributes:
        vendor_id: Vendor identifier.
        free_shipping_threshold: Vendor's free-shipping threshold.
        items: The vendor's line items in insertion order.
        items_total: Sum of line totals, VAT-inclusive.
        subtotal_ex_vat: ``items_total`` without VAT.
        vat_amount: VAT contained in ``items_total``.
        shipping_fee: Zero when the threshold is met, else the flat fee.
        vendor_total: ``items_total + shipping_fee``.
    """

    vendor_id: str
    free_shipping_threshold: Money
    items: tuple[LineItem, ...]
    items_total: Money
    subtotal_ex_vat: Money
    vat_amount: Money
    shipping_fee: Money
    vendor_total: Money

    @property
    def qualifies_for_free_shipping(self) -> bool:
        return self.items_total >= self.free_shipping_threshold

    @property
    def amount_to_free_shipping(self) -> Money:
        """How much more the shopper must add to ship this vendor for free."""
        if self.qualifies_for_free_shipping:
            return Money.zero(self.items_total.currency)
        return self.free_shipping_threshold - self.items_total

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass(frozen=True)
class OrderSettlement(ValueObject):
    """Computed totals for a whole order.

    Overall amounts are sums of the corresponding vendor group amounts.

    Attributes:
        vendor_groups: One group per vendor, in first-seen vendor order.
        overall_subtotal_ex_vat: Sum of group subtotals excluding VAT.
        overall_vat: Sum of group VAT amounts.
        overall_shipping: Sum of group shipping fees.
        overall_total: Sum of group vendor totals.
    """

    vendor_groups: tuple[VendorGroup, ...]
    overall_subtotal_ex_vat: Money
    overall_vat: Money
    overall_shipping: Money
    overall_total: Money

    @classmethod
    def empty(cls) -> Self:
        """Settlement of an empty cart: no groups, all totals zero."""
        return cls.from_groups(())

    @classmethod
    def from_groups(cls, groups: tuple[VendorGroup, ...]) -> Self:
        """Build a settlement by summing vendor groups.

        Args:
            groups: Settled vendor groups.

        Returns:
            OrderSettlement instance.
        """
        return cls(
            vendor_groups=groups,
            overall_subtotal_ex_vat=Money(sum(g.subtotal_ex_vat.amount_fils for g in groups)),
            overall_vat=Money(sum(g.vat_amount.amount_fils for g in groups)),
            overall_shipping=Money(sum(g.shipping_fee.amount_fils for g in groups)),
            overall_total=Money(sum(g.vendor_total.amount_fils for g in groups)),
        )

    @property
    def is_empty(self) -> bool:
        return not self.vendor_groups

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        """All line items across groups, group by group."""
        return tuple(item for group in self.vendor_groups for item in group.items)

    @property
    def item_count(self) -> int:
        return sum(group.item_count for group in self.vendor_groups)

    def group_for(self, vendor_id: str) -> VendorGroup | None:
        """Get the group for a vendor.

        Args:
            vendor_id: Vendor identifier.

        Returns:
            The vendor's group, or None if the vendor has no items.
        """
        for group in self.vendor_groups:
            if group.vendor_id == vendor_id:
                return group
        return None


@dataclass(frozen=True)
class CommissionSplit(ValueObject):
    """Division of a vendor's ex-VAT subtotal between platform and vendor.

    Attributes:
        vendor_id: Vendor identifier.
        commission_rate: Applied rate in [0, 1].
        subtotal_ex_vat: The amount being split.
        commission_amount: Platform share, rounded half-up to the fil.
        vendor_earnings: Residual vendor share.
    """

    vendor_id: str
    commission_rate: Decimal
    subtotal_ex_vat: Money
    commission_amount: Money
    vendor_earnings: Money


# ============================================================================
# Operations
# ============================================================================


def decompose_vat(
    amount: Money,
    vat_rate: RateLike = DEFAULT_VAT_RATE,
    vat_included: bool = True,
) -> VatBreakdown:
    """Split an amount into net and VAT parts.

    With ``vat_included`` the amount is a gross (sale) price and the net
    is ``amount / (1 + vat_rate)`` rounded half-up; VAT is the residual.
    Otherwise the amount is net, VAT is ``amount * vat_rate`` rounded
    half-up and gross is their sum.

    Args:
        amount: Amount to decompose.
        vat_rate: VAT rate in [0, 1).
        vat_included: Whether ``amount`` already includes VAT.

    Returns:
        VatBreakdown with ``net + vat == gross`` exactly.

    Raises:
        InvalidVatRateError: If the rate is outside [0, 1).
    """
    rate = _vat_rate(vat_rate)
    currency = amount.currency
    if vat_included:
        net = round_half_up(Decimal(amount.amount_fils) / (1 + rate))
        return VatBreakdown(
            net=Money(net, currency),
            vat=Money(amount.amount_fils - net, currency),
            gross=amount,
        )
    vat = round_half_up(Decimal(amount.amount_fils) * rate)
    return VatBreakdown(
        net=amount,
        vat=Money(vat, currency),
        gross=Money(amount.amount_fils + vat, currency),
    )


def compute_commission_split(vendor_group: VendorGroup, commission_rate: RateLike) -> CommissionSplit:
    """Split a vendor group's ex-VAT subtotal into commission and earnings.

    Args:
        vendor_group: Settled vendor group.
        commission_rate: Platform commission rate in [0, 1].

    Returns:
        CommissionSplit with ``commission_amount + vendor_earnings ==
        subtotal_ex_vat`` exactly.

    Raises:
        InvalidCommissionRateError: If the rate is outside [0, 1].
    """
    rate = _commission_rate(commission_rate)
    subtotal = vendor_group.subtotal_ex_vat
    commission = round_half_up(Decimal(subtotal.amount_fils) * rate)
    return CommissionSplit(
        vendor_id=vendor_group.vendor_id,
        commission_rate=rate,
        subtotal_ex_vat=subtotal,
        commission_amount=Money(commission, subtotal.currency),
        vendor_earnings=Money(subtotal.amount_fils - commission, subtotal.currency),
    )


def _validate_line_items(items: list[LineItem]) -> None:
    for index, item in enumerate(items):
        if item.quantity <= 0:
            raise InvalidLineItemError("quantity", index, item.product_id, item.quantity)
        if item.unit_price_fils < 0:
            raise InvalidLineItemError("unit_price", index, item.product_id, item.unit_price_fils)


class SettlementEngine:
    """Computes order settlements from line items.

    Example:
        engine = SettlementEngine()
        settlement = engine.compute_settlement(
            [LineItem.from_decimal("p-1", "techstore", "450.500", 1)],
            {"techstore": VendorConfig.from_decimal("100.000")},
        )
        settlement.overall_total  # Money(amount_fils=450500)
    """

    def __init__(
        self,
        vat_rate: RateLike = DEFAULT_VAT_RATE,
        flat_shipping_fee: Money = DEFAULT_FLAT_SHIPPING_FEE,
    ) -> None:
        """Initialize the engine.

        Args:
            vat_rate: Default VAT rate in [0, 1).
            flat_shipping_fee: Default per-vendor shipping charge.

        Raises:
            InvalidVatRateError: If the rate is outside [0, 1).
        """
        self.vat_rate = _vat_rate(vat_rate)
        self.flat_shipping_fee = flat_shipping_fee

    def compute_settlement(
        self,
        line_items: Iterable[LineItem],
        vendor_configs: Mapping[str, VendorConfig],
        vat_rate: RateLike | None = None,
        flat_shipping_fee: Money | None = None,
    ) -> OrderSettlement:
        """Compute the settlement of an order.

        Items are grouped by vendor in first-seen order, keeping insertion
        order within each vendor. An empty input yields an empty settlement.

        Args:
            line_items: Line items of the cart or order.
            vendor_configs: Configuration for every vendor in ``line_items``.
            vat_rate: VAT rate overriding the engine default.
            flat_shipping_fee: Shipping charge overriding the engine default.

        Returns:
            OrderSettlement.

        Raises:
            InvalidLineItemError: For the first item with a non-positive
                quantity or negative unit price.
            MissingVendorConfigError: If a vendor has no configuration.
            InvalidVatRateError: If the rate is outside [0, 1).
        """
        items = list(line_items)
        rate = self.vat_rate if vat_rate is None else _vat_rate(vat_rate)
        shipping = self.flat_shipping_fee if flat_shipping_fee is None else flat_shipping_fee

        _validate_line_items(items)

        by_vendor: dict[str, list[LineItem]] = {}
        for item in items:
            by_vendor.setdefault(item.vendor_id, []).append(item)

        for vendor_id in by_vendor:
            if vendor_id not in vendor_configs:
                raise MissingVendorConfigError(vendor_id)

        groups = tuple(
            self._settle_vendor(vendor_id, vendor_items, vendor_configs[vendor_id], rate, shipping)
            for vendor_id, vendor_items in by_vendor.items()
        )
        return OrderSettlement.from_groups(groups)

    def compute_commission_split(
        self, vendor_group: VendorGroup, commission_rate: RateLike
    ) -> CommissionSplit:
        """Split a vendor group's subtotal. See ``compute_commission_split``."""
        return compute_commission_split(vendor_group, commission_rate)

    def _settle_vendor(
        self,
        vendor_id: str,
        items: list[LineItem],
        config: VendorConfig,
        vat_rate: Decimal,
        flat_shipping_fee: Money,
    ) -> VendorGroup:
        items_total = Money(sum(item.line_total_fils for item in items))
        vat = decompose_vat(items_total, vat_rate)

        # Threshold is inclusive and compared against the VAT-inclusive total
        if items_total >= config.free_shipping_threshold:
            shipping_fee = Money.zero(items_total.currency)
        else:
            shipping_fee = flat_shipping_fee

        return VendorGroup(
            vendor_id=vendor_id,
            free_shipping_threshold=config.free_shipping_threshold,
            items=tuple(items),
            items_total=items_total,
            subtotal_ex_vat=vat.net,
            vat_amount=vat.vat,
            shipping_fee=shipping_fee,
            vendor_total=items_total + shipping_fee,
        )


_default_engine = SettlementEngine()


def compute_settlement(
    line_items: Iterable[LineItem],
    vendor_configs: Mapping[str, VendorConfig],
    vat_rate: RateLike = DEFAULT_VAT_RATE,
    flat_shipping_fee: Money = DEFAULT_FLAT_SHIPPING_FEE,
) -> OrderSettlement:
    """Compute a settlement with a shared default engine."""
    return _default_engine.compute_settlement(
        line_items, vendor_configs, vat_rate=vat_rate, flat_shipping_fee=flat_shipping_fee
    )
