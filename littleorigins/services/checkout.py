"""Checkout: hosted payment sessions and order confirmation.

Guests check out with the items they send. Signed-in users may omit the
items, in which case their persisted working cart is used. Charge completion
is not implemented server-side; a well-formed payment-method handle is
accepted as a successful payment.
"""

from __future__ import annotations

import re
import uuid
from typing import TYPE_CHECKING

import structlog

from littleorigins.errors import PaymentError
from littleorigins.metrics import checkout_sessions_total, orders_confirmed_total
from littleorigins.models.checkout import OrderConfirmation
from littleorigins.services.cart import Cart

if TYPE_CHECKING:
    from littleorigins.clients.payments import PaymentClient
    from littleorigins.config import Settings
    from littleorigins.models.account import IdentityUser
    from littleorigins.models.cart import CartItem
    from littleorigins.models.checkout import CheckoutSession, ShippingDetails
    from littleorigins.services.cart import CartService

logger = structlog.get_logger()

_PAYMENT_METHOD_RE = re.compile(r"^pm_[A-Za-z0-9_]+$")


class CheckoutService:
    def __init__(self, carts: CartService, payments: PaymentClient, settings: Settings) -> None:
        self.carts = carts
        self.payments = payments
        self.settings = settings

    def _cart_for(self, user: IdentityUser | None, items: list[CartItem] | None) -> Cart:
        if items:
            cart = Cart(items)
        elif user is not None:
            cart = self.carts.load(user)
        else:
            cart = Cart()
        if cart.count == 0:
            raise ValueError("Cannot check out an empty cart")
        return cart

    def start(
        self, user: IdentityUser | None, items: list[CartItem] | None = None
    ) -> CheckoutSession:
        """Open a hosted checkout session for *items* (or the user's working cart)."""
        cart = self._cart_for(user, items)

        site = self.settings.site_url.rstrip("/")
        session = self.payments.create_checkout_session(
            cart.items,
            success_url=f"{site}/order-confirmation",
            cancel_url=f"{site}/create",
            shipping_amount=self.settings.shipping_amount,
        )
        mode = "live" if self.payments.is_available else "mock"
        checkout_sessions_total.labels(mode=mode).inc()
        logger.info(
            "Checkout session created",
            session_id=session.id,
            items=cart.count,
            guest=user is None,
        )
        return session

    def confirm(
        self,
        user: IdentityUser | None,
        payment_method_id: str,
        shipping: ShippingDetails,
        items: list[CartItem] | None = None,
    ) -> OrderConfirmation:
        """Accept a tokenized payment method and confirm the order.

        A signed-in user's working cart is emptied once the order is confirmed.
        """
        if not _PAYMENT_METHOD_RE.match(payment_method_id):
            raise PaymentError("Payment details could not be processed")

        cart = self._cart_for(user, items)

        subtotal = cart.total
        shipping_amount = round(self.settings.shipping_amount, 2)
        order = OrderConfirmation(
            order_number=f"LO-{uuid.uuid4().hex[:10].upper()}",
            items=cart.items,
            subtotal=subtotal,
            shipping=shipping_amount,
            total=round(subtotal + shipping_amount, 2),
            payment_method_id=payment_method_id,
        )
        if user is not None:
            self.carts.clear(user)
        orders_confirmed_total.inc()
        logger.info(
            "Order confirmed",
            order_number=order.order_number,
            total=order.total,
            ship_to=shipping.country,
            guest=user is None,
        )
        return order
