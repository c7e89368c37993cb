"""Checkout endpoints. Sign-in is optional."""

from __future__ import annotations

from fastapi import APIRouter

from littleorigins.api.deps import CheckoutServiceDep, OptionalUserDep
from littleorigins.api.schemas import (
    CheckoutConfirmRequest,
    CheckoutSessionRequest,
    CheckoutSessionResponse,
)
from littleorigins.models.checkout import OrderConfirmation

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("/session", response_model=CheckoutSessionResponse)
def create_session(
    user: OptionalUserDep,
    checkout: CheckoutServiceDep,
    body: CheckoutSessionRequest | None = None,
) -> CheckoutSessionResponse:
    session = checkout.start(user, body.items if body else None)
    return CheckoutSessionResponse(id=session.id, url=session.url)


@router.post("/confirm", response_model=OrderConfirmation)
def confirm_order(
    body: CheckoutConfirmRequest, user: OptionalUserDep, checkout: CheckoutServiceDep
) -> OrderConfirmation:
    return checkout.confirm(user, body.payment_method_id, body.shipping, body.items)
