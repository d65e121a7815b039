"""Order application service.

Orchestrates settlement around the pure domain core:
- Quoting live cart totals on every cart change
- Placing orders: validating buyer identifiers, settling, splitting
  commission per vendor, allocating order numbers and persisting

Vendor configuration and order persistence are ports with in-memory
implementations; the domain core never touches them directly.
"""

import random
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal

import structlog

from tendzd.application.schemas import CheckoutRequest, SettlementRequest
from tendzd.domain.clock import Clock, read_clock
from tendzd.domain.currency import format_currency
from tendzd.domain.exceptions import DomainError, OrderNumberCollisionError
from tendzd.domain.numbering import generate_order_number, generate_vendor_order_number
from tendzd.domain.settlement import (
    CommissionSplit,
    OrderSettlement,
    SettlementEngine,
    VendorGroup,
    compute_commission_split,
)
from tendzd.domain.validators import (
    format_bahrain_phone,
    validate_bahrain_phone,
    validate_cr_number,
    validate_vat_number,
)
from tendzd.domain.value_objects import LineItem, Money, VendorConfig
from tendzd.infrastructure import config
from tendzd.infrastructure.config import Settings

logger = structlog.get_logger()


# ============================================================================
# Vendor Directory
# ============================================================================


@dataclass(frozen=True)
class VendorProfile:
    """Settlement-relevant vendor settings.

    Attributes:
        vendor_id: Vendor identifier.
        slug: URL slug; its first letters prefix vendor order numbers.
        free_shipping_threshold: Vendor's free-shipping threshold.
        commission_rate: Negotiated commission, or None for the platform default.
    """

    vendor_id: str
    slug: str
    free_shipping_threshold: Money
    commission_rate: Decimal | None = None


class VendorDirectory:
    """In-memory vendor configuration store."""

    def __init__(self, profiles: list[VendorProfile] | None = None) -> None:
        self._profiles: dict[str, VendorProfile] = {}
        for profile in profiles or []:
            self.register(profile)

    def register(self, profile: VendorProfile) -> None:
        """Add or replace a vendor profile."""
        self._profiles[profile.vendor_id] = profile

    def get(self, vendor_id: str) -> VendorProfile | None:
        """Get vendor profile by ID."""
        return self._profiles.get(vendor_id)


# ============================================================================
# Orders and Repository
# ============================================================================


@dataclass(frozen=True)
class PaymentRequest:
    """What the payment gateway receives: a total and a reference, nothing more."""

    amount: Decimal
    currency: str
    reference: str


@dataclass(frozen=True)
class VendorOrder:
    """A vendor's share of a placed order."""

    vendor_order_number: str
    group: VendorGroup
    commission: CommissionSplit

    @property
    def vendor_id(self) -> str:
        return self.group.vendor_id


@dataclass
class PlacedOrder:
    """A persisted order."""

    order_number: str
    settlement: OrderSettlement
    vendor_orders: list[VendorOrder]
    payment_request: PaymentRequest
    customer_phone: str
    created_at: datetime
    vat_number: str | None = None
    cr_number: str | None = None

    @property
    def platform_commission(self) -> Money:
        """Total commission across all vendor orders."""
        return Money(sum(v.commission.commission_amount.amount_fils for v in self.vendor_orders))


class OrderRepository:
    """In-memory repository for placed orders.

    Number reservation is atomic so that concurrent checkouts racing for
    the same generated number cannot both win.
    """

    def __init__(self) -> None:
        self._orders: dict[str, PlacedOrder] = {}
        self._order_numbers: set[str] = set()
        self._vendor_order_numbers: set[str] = set()
        self._lock = threading.Lock()

    def reserve_order_number(self, order_number: str) -> bool:
        """Reserve an order number.

        Returns:
            False if the number is already taken.
        """
        with self._lock:
            if order_number in self._order_numbers:
                return False
            self._order_numbers.add(order_number)
            return True

    def reserve_vendor_order_number(self, vendor_order_number: str) -> bool:
        """Reserve a vendor order number.

        Returns:
            False if the number is already taken.
        """
        with self._lock:
            if vendor_order_number in self._vendor_order_numbers:
                return False
            self._vendor_order_numbers.add(vendor_order_number)
            return True

    def release_order_number(self, order_number: str) -> None:
        """Give back a reserved order number that was never saved."""
        with self._lock:
            if order_number not in self._orders:
                self._order_numbers.discard(order_number)

    def release_vendor_order_number(self, vendor_order_number: str) -> None:
        """Give back a reserved vendor order number that was never saved."""
        with self._lock:
            self._vendor_order_numbers.discard(vendor_order_number)

    def save(self, order: PlacedOrder) -> None:
        """Save an order."""
        with self._lock:
            self._orders[order.order_number] = order
            self._order_numbers.add(order.order_number)

    def get(self, order_number: str) -> PlacedOrder | None:
        """Get order by number."""
        return self._orders.get(order_number)

    def exists(self, order_number: str) -> bool:
        """Check whether an order number is taken."""
        return order_number in self._order_numbers

    def list_all(self) -> list[PlacedOrder]:
        """List orders, newest first."""
        orders = list(self._orders.values())
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class ValidationIssue:
    """A form-level validation failure."""

    field: str
    message: str


@dataclass
class QuoteResult:
    """Result of quoting cart totals.

    A failed quote means "cannot display total yet", not a crash.
    """

    settlement: OrderSettlement | None = None
    display: dict[str, str] = field(default_factory=dict)
    success: bool = True
    error: str | None = None
    error_code: str | None = None


@dataclass
class PlaceOrderResult:
    """Result of placing an order."""

    order: PlacedOrder | None = None
    success: bool = True
    error: str | None = None
    error_code: str | None = None
    validation_errors: list[ValidationIssue] = field(default_factory=list)


# ============================================================================
# Order Service
# ============================================================================


class OrderService:
    """Service for quoting carts and placing multi-vendor orders."""

    def __init__(
        self,
        vendors: VendorDirectory,
        orders: OrderRepository,
        settings: Settings | None = None,
        engine: SettlementEngine | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize order service.

        Args:
            vendors: Vendor configuration store.
            orders: Order repository.
            settings: Application settings; defaults to the environment.
            engine: Settlement engine; defaults to one at the configured VAT rate.
            clock: Time source for order numbers.
            rng: Random source for order number suffixes.
        """
        self.vendors = vendors
        self.orders = orders
        self.settings = settings or config.settings
        self.engine = engine or SettlementEngine(vat_rate=self.settings.vat_rate)
        self.clock = clock
        self.rng = rng

    # ------------------------------------------------------------------
    # Quote
    # ------------------------------------------------------------------

    def quote(self, request: SettlementRequest) -> QuoteResult:
        """Compute live cart totals.

        Args:
            request: Cart lines and delivery option.

        Returns:
            QuoteResult; domain errors are reported, not raised.
        """
        try:
            settlement = self._settle(request.line_items(), request)
        except DomainError as e:
            logger.warning(
                "Quote unavailable",
                error_code=e.error_code,
                error=e.message,
                details=e.details,
            )
            return QuoteResult(success=False, error=e.message, error_code=e.error_code)

        logger.debug(
            "Quote computed",
            vendor_count=len(settlement.vendor_groups),
            item_count=settlement.item_count,
            overall_total=str(settlement.overall_total),
        )
        return QuoteResult(
            settlement=settlement,
            display=self._display_totals(settlement, request.locale or self.settings.default_locale),
        )

    # ------------------------------------------------------------------
    # Place order
    # ------------------------------------------------------------------

    def place_order(self, request: CheckoutRequest) -> PlaceOrderResult:
        """Place an order authoritatively.

        Args:
            request: Checkout request.

        Returns:
            PlaceOrderResult with the persisted order or the failure.
        """
        issues = self._validate_buyer(request)
        if issues:
            logger.info(
                "Checkout rejected",
                fields=[issue.field for issue in issues],
            )
            return PlaceOrderResult(
                success=False,
                error="Checkout form has invalid fields",
                error_code="VALIDATION_ERROR",
                validation_errors=issues,
            )

        order_number: str | None = None
        vendor_order_numbers: list[str] = []
        try:
            items = request.line_items()
            configs = self._vendor_configs(items)
            settlement = self._settle(items, request, configs)
            commissions = [
                compute_commission_split(group, self._commission_rate(configs[group.vendor_id]))
                for group in settlement.vendor_groups
            ]
            order_number = self._allocate_order_number()
            now = read_clock(self.clock)
            for group in settlement.vendor_groups:
                vendor_order_numbers.append(
                    self._allocate_vendor_order_number(group.vendor_id, now)
                )
        except DomainError as e:
            self._release_numbers(order_number, vendor_order_numbers)
            logger.warning(
                "Order placement failed",
                error_code=e.error_code,
                error=e.message,
                details=e.details,
            )
            return PlaceOrderResult(success=False, error=e.message, error_code=e.error_code)

        with structlog.contextvars.bound_contextvars(order_number=order_number):
            vendor_orders = [
                VendorOrder(vendor_order_number=number, group=group, commission=commission)
                for number, group, commission in zip(
                    vendor_order_numbers, settlement.vendor_groups, commissions
                )
            ]
            order = PlacedOrder(
                order_number=order_number,
                settlement=settlement,
                vendor_orders=vendor_orders,
                payment_request=PaymentRequest(
                    amount=settlement.overall_total.to_decimal(),
                    currency=self.settings.currency_code,
                    reference=order_number,
                ),
                customer_phone=format_bahrain_phone(request.customer_phone),
                vat_number=request.vat_number,
                cr_number=request.cr_number,
                created_at=now,
            )
            self.orders.save(order)

            logger.info(
                "Order placed",
                vendor_count=len(vendor_orders),
                overall_total=str(settlement.overall_total),
                platform_commission=str(order.platform_commission),
            )
        return PlaceOrderResult(order=order)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _settle(
        self,
        items: list[LineItem],
        request: SettlementRequest,
        configs: dict[str, VendorConfig] | None = None,
    ) -> OrderSettlement:
        return self.engine.compute_settlement(
            items,
            configs if configs is not None else self._vendor_configs(items),
            flat_shipping_fee=request.delivery_option.fee,
        )

    def _vendor_configs(self, items: list[LineItem]) -> dict[str, VendorConfig]:
        """Look up configuration for each vendor, falling back to platform defaults."""
        configs: dict[str, VendorConfig] = {}
        for item in items:
            if item.vendor_id in configs:
                continue
            profile = self.vendors.get(item.vendor_id)
            if profile is None:
                configs[item.vendor_id] = VendorConfig(
                    free_shipping_threshold=Money.from_decimal(
                        self.settings.default_free_shipping_threshold
                    ),
                )
            else:
                configs[item.vendor_id] = VendorConfig(
                    free_shipping_threshold=profile.free_shipping_threshold,
                    commission_rate=profile.commission_rate,
                )
        return configs

    def _commission_rate(self, config: VendorConfig) -> Decimal:
        if config.commission_rate is None:
            return self.settings.default_commission_rate
        return config.commission_rate

    def _validate_buyer(self, request: CheckoutRequest) -> list[ValidationIssue]:
        issues = []
        if not validate_bahrain_phone(request.customer_phone):
            issues.append(ValidationIssue("customer_phone", "Invalid Bahrain phone number"))
        if request.vat_number is not None and not validate_vat_number(request.vat_number):
            issues.append(ValidationIssue("vat_number", "Invalid Bahrain VAT number format"))
        if request.cr_number is not None and not validate_cr_number(request.cr_number):
            issues.append(ValidationIssue("cr_number", "Invalid Bahrain CR number format"))
        return issues

    def _allocate_order_number(self) -> str:
        attempts = self.settings.order_number_max_attempts
        for attempt in range(1, attempts + 1):
            order_number = generate_order_number(clock=self.clock, rng=self.rng)
            if self.orders.reserve_order_number(order_number):
                return order_number
            logger.warning("Order number collision", order_number=order_number, attempt=attempt)
        raise OrderNumberCollisionError(attempts)

    def _allocate_vendor_order_number(self, vendor_id: str, now: datetime) -> str:
        """Allocate a vendor order number, stepping the clock a millisecond per collision."""
        profile = self.vendors.get(vendor_id)
        slug = profile.slug if profile else vendor_id
        attempts = self.settings.order_number_max_attempts
        for step in range(attempts):
            moment = now + timedelta(milliseconds=step)
            number = generate_vendor_order_number(slug, clock=lambda: moment)
            if self.orders.reserve_vendor_order_number(number):
                return number
            logger.warning("Vendor order number collision", vendor_order_number=number)
        raise OrderNumberCollisionError(attempts)

    def _release_numbers(self, order_number: str | None, vendor_order_numbers: list[str]) -> None:
        if order_number is not None:
            self.orders.release_order_number(order_number)
        for number in vendor_order_numbers:
            self.orders.release_vendor_order_number(number)

    def _display_totals(self, settlement: OrderSettlement, locale: str) -> dict[str, str]:
        return {
            "subtotal": format_currency(settlement.overall_subtotal_ex_vat, locale),
            "vat": format_currency(settlement.overall_vat, locale),
            "shipping": format_currency(settlement.overall_shipping, locale),
            "total": format_currency(settlement.overall_total, locale),
        }
