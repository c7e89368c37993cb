"""Checkout models: hosted sessions, shipping details and order confirmations."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from littleorigins.models.cart import CartItem


class CheckoutSession(BaseModel):
    """Hosted checkout session returned by the payment provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str


class ShippingDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    address_line1: str = Field(min_length=1)
    address_line2: str = ""
    city: str = Field(min_length=1)
    postal_code: str = Field(min_length=1)
    country: str = Field(default="US", min_length=2, max_length=2)


class OrderConfirmation(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_number: str
    items: list[CartItem]
    subtotal: float
    shipping: float
    total: float
    payment_method_id: str
    status: str = "paid"
    confirmed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
