# services/checkout_service.py

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from models.cart import Cart
from models.customer import Customer
from models.order import Receipt, ReceiptLine
from services.expiry_service import ExpiryResolver
from services.receipt_service import ReceiptService
from services.shipping_service import ShippingService
from utils.clock import now as system_now

logger = logging.getLogger("checkout.service")


class CheckoutStatus(Enum):
    SETTLED = "settled"
    ABORTED = "aborted"
    AWAITING_EXPIRY_RESOLUTION = "awaiting_expiry_resolution"


class AbortReason(Enum):
    EMPTY_CART = "empty_cart"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    RESOLUTION_FAILED = "resolution_failed"


@dataclass
class CheckoutResult:
    status: CheckoutStatus
    reason: Optional[AbortReason] = None
    index: Optional[int] = None        # offending cart line
    product_name: Optional[str] = None
    receipt: Optional[Receipt] = None

    @property
    def settled(self) -> bool:
        return self.status is CheckoutStatus.SETTLED


class CheckoutService:
    def __init__(
        self,
        shipping: ShippingService,
        resolver: Optional[ExpiryResolver] = None,
        receipts: Optional[ReceiptService] = None,
        output: Callable[[str], None] = print,
        clock: Callable[[], datetime] = system_now,
    ):
        self.shipping = shipping
        self.resolver = resolver
        self.receipts = receipts or ReceiptService()
        self.output = output
        self.clock = clock

    def checkout(self, customer: Customer, cart: Cart) -> CheckoutResult:
        # One validation pass over the cart. Stops at the first expired line
        # without looking at the lines after it.
        if not cart.items:
            return self._abort(AbortReason.EMPTY_CART, "Error: Cart is empty!")

        now = self.clock()
        subtotal = 0.0
        shippables: list[tuple[str, float]] = []
        lines: list[ReceiptLine] = []

        for index, it in enumerate(cart.items):
            product = it.product

            if product.has_expired(now):
                logger.info(f"Line {index} '{product.name}' expired, awaiting resolution")
                return CheckoutResult(
                    status=CheckoutStatus.AWAITING_EXPIRY_RESOLUTION,
                    index=index,
                    product_name=product.name,
                )

            if product.quantity < it.qty:
                return self._abort(
                    AbortReason.INSUFFICIENT_STOCK,
                    f"Error: Not enough stock for '{product.name}'.",
                    index=index,
                    product_name=product.name,
                )

            subtotal += it.line_total
            lines.append(
                ReceiptLine(
                    name=product.name,
                    qty=it.qty,
                    unit_price=product.price,
                    line_total=it.line_total,
                )
            )
            if product.is_shippable:
                shippables.append((product.name, product.weight))

        manifest = self.shipping.ship(shippables)
        total = subtotal + manifest.fee

        if customer.balance < total:
            return self._abort(AbortReason.INSUFFICIENT_BALANCE, "Error: Insufficient balance!")

        customer.deduct(total)
        receipt = Receipt(
            customer=customer.name,
            created_at=now,
            lines=lines,
            manifest=manifest,
            subtotal=subtotal,
            shipping=manifest.fee,
            total=total,
            balance_after=customer.balance,
        )
        for text in self.receipts.render(receipt):
            self.output(text)

        cart.clear()
        logger.info(
            f"Checkout settled for {customer.name}: subtotal={subtotal}, "
            f"shipping={manifest.fee}, total={total}, balance={customer.balance}"
        )
        return CheckoutResult(status=CheckoutStatus.SETTLED, receipt=receipt)

    def run(self, customer: Customer, cart: Cart) -> CheckoutResult:
        # Re-validate from the top after every remove/replace until the
        # checkout settles or aborts.
        while True:
            result = self.checkout(customer, cart)
            if result.status is not CheckoutStatus.AWAITING_EXPIRY_RESOLUTION:
                return result

            if self.resolver is None:
                message = f"Error: Product '{result.product_name}' is expired!"
            elif self.resolver.resolve(cart, result.index):
                continue
            else:
                message = None  # resolver already told the customer
            return self._abort(
                AbortReason.RESOLUTION_FAILED,
                message,
                index=result.index,
                product_name=result.product_name,
            )

    def _abort(self, reason: AbortReason, message: Optional[str], **details) -> CheckoutResult:
        if message:
            self.output(message)
        logger.warning(f"Checkout aborted: {reason.value} {details or ''}".rstrip())
        return CheckoutResult(status=CheckoutStatus.ABORTED, reason=reason, **details)
