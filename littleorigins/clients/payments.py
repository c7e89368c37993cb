"""Client for the hosted payment provider (Stripe Checkout API).

Card details never reach the storefront: the browser widget tokenizes them
into a payment-method handle, and hosted checkout sessions are created here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
import structlog

from littleorigins.errors import PaymentError
from littleorigins.models.checkout import CheckoutSession

if TYPE_CHECKING:
    from littleorigins.models.cart import CartItem

logger = structlog.get_logger()

MOCK_SESSION_ID = "cs_test_mockSessionId"


def _to_cents(amount: float) -> int:
    return int(round(amount * 100))


class PaymentClient:
    """Payment provider client. Returns a mock session when no secret key is set."""

    def __init__(
        self,
        secret_key: str = "",
        base_url: str = "https://api.stripe.com",
        currency: str = "usd",
        timeout: float = 30.0,
    ) -> None:
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.currency = currency
        self.timeout = timeout

    @property
    def is_available(self) -> bool:
        return bool(self.secret_key)

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.secret_key}"}

    def create_checkout_session(
        self,
        items: list[CartItem],
        success_url: str,
        cancel_url: str,
        shipping_amount: float,
    ) -> CheckoutSession:
        """Create a hosted checkout session for *items* plus fixed-rate shipping.

        Raises PaymentError when the provider rejects the request.
        """
        if not self.is_available:
            logger.debug("Payment provider not configured, returning mock session")
            return self._mock_session(success_url, cancel_url)

        form = self._session_form(items, success_url, cancel_url, shipping_amount)
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.post(
                    f"{self.base_url}/v1/checkout/sessions",
                    headers=self._headers(),
                    data=form,
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Checkout session creation failed", error=str(exc))
            raise PaymentError("Failed to create checkout session. Please try again.") from exc

        if not isinstance(data, dict) or not data.get("id"):
            logger.warning("Checkout session response missing id")
            raise PaymentError("Failed to create checkout session. Please try again.")

        return CheckoutSession(id=str(data["id"]), url=str(data.get("url", "")))

    def _session_form(
        self,
        items: list[CartItem],
        success_url: str,
        cancel_url: str,
        shipping_amount: float,
    ) -> dict[str, str]:
        form = {
            "mode": "payment",
            "success_url": success_url,
            "cancel_url": cancel_url,
        }
        for idx, item in enumerate(items):
            prefix = f"line_items[{idx}]"
            form[f"{prefix}[price_data][currency]"] = self.currency
            form[f"{prefix}[price_data][product_data][name]"] = item.title
            form[f"{prefix}[price_data][unit_amount]"] = str(_to_cents(item.price))
            form[f"{prefix}[quantity]"] = "1"
        shipping = "shipping_options[0][shipping_rate_data]"
        form[f"{shipping}[type]"] = "fixed_amount"
        form[f"{shipping}[fixed_amount][amount]"] = str(_to_cents(shipping_amount))
        form[f"{shipping}[fixed_amount][currency]"] = self.currency
        form[f"{shipping}[display_name]"] = "Standard Shipping"
        return form

    # ------------------------------------------------------------------
    # Mock data
    # ------------------------------------------------------------------

    def _mock_session(self, success_url: str, cancel_url: str) -> CheckoutSession:
        return CheckoutSession(
            id=MOCK_SESSION_ID,
            url=(
                "https://checkout.stripe.com/pay/cs_test_mockSession"
                f"?success_url={quote(success_url, safe='')}"
                f"&cancel_url={quote(cancel_url, safe='')}"
            ),
        )
