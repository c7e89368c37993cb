"""Tests for the identity and payment provider clients.

Uses respx to mock httpx transport-layer calls, verifying:
- Response parsing for the provider payloads
- Error mapping on HTTP failures
- Development/mock fallback when nothing is configured
"""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest
import respx

from littleorigins.clients.identity import IdentityClient
from littleorigins.clients.payments import MOCK_SESSION_ID, PaymentClient
from littleorigins.errors import IdentityUnavailableError, PaymentError
from littleorigins.models.cart import CartItem

IDENTITY_URL = "https://clerk.example.com"

ME_PAYLOAD = {
    "id": "user_2abc",
    "first_name": "Alex",
    "last_name": "Rivera",
    "image_url": "https://img.example.com/alex.png",
    "primary_email_address_id": "idn_2",
    "email_addresses": [
        {"id": "idn_1", "email_address": "old@example.com"},
        {"id": "idn_2", "email_address": "alex@example.com"},
    ],
}


# =====================================================================
# Identity
# =====================================================================


class TestIdentityClient:
    def test_empty_token(self) -> None:
        assert IdentityClient(IDENTITY_URL).get_current_user("") is None

    def test_development_mode_uses_token_as_id(self) -> None:
        client = IdentityClient()
        assert not client.is_available
        user = client.get_current_user("user_dev")
        assert user is not None
        assert user.id == "user_dev"

    @respx.mock
    def test_parses_me_response(self) -> None:
        route = respx.get(f"{IDENTITY_URL}/v1/me").mock(
            return_value=httpx.Response(200, json=ME_PAYLOAD)
        )
        user = IdentityClient(IDENTITY_URL).get_current_user("sess_token")

        assert user is not None
        assert user.id == "user_2abc"
        assert user.email == "alex@example.com"
        assert user.first_name == "Alex"
        assert route.calls.last.request.headers["Authorization"] == "Bearer sess_token"

    @respx.mock
    def test_unwraps_response_envelope(self) -> None:
        respx.get(f"{IDENTITY_URL}/v1/me").mock(
            return_value=httpx.Response(200, json={"response": ME_PAYLOAD})
        )
        user = IdentityClient(IDENTITY_URL).get_current_user("sess_token")
        assert user is not None
        assert user.id == "user_2abc"

    @respx.mock
    def test_rejected_session_is_anonymous(self) -> None:
        respx.get(f"{IDENTITY_URL}/v1/me").mock(return_value=httpx.Response(401))
        assert IdentityClient(IDENTITY_URL).get_current_user("expired") is None

    @respx.mock
    def test_server_error_raises(self) -> None:
        respx.get(f"{IDENTITY_URL}/v1/me").mock(return_value=httpx.Response(500))
        with pytest.raises(IdentityUnavailableError):
            IdentityClient(IDENTITY_URL).get_current_user("sess_token")

    @respx.mock
    def test_connection_error_raises(self) -> None:
        respx.get(f"{IDENTITY_URL}/v1/me").mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(IdentityUnavailableError):
            IdentityClient(IDENTITY_URL).get_current_user("sess_token")

    @respx.mock
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>maintenance</html>"),
            httpx.Response(200, json=[{"id": "user_abc"}]),
            httpx.Response(200, json="user_abc"),
        ],
    )
    def test_malformed_body_raises(self, response: httpx.Response) -> None:
        respx.get(f"{IDENTITY_URL}/v1/me").mock(return_value=response)
        with pytest.raises(IdentityUnavailableError, match="malformed"):
            IdentityClient(IDENTITY_URL).get_current_user("sess_token")


# =====================================================================
# Payments
# =====================================================================


ITEMS = [
    CartItem(id="book-a", title="Mia's Special Story", price=29.99),
    CartItem(id="book-b", title="Your Special Story", price=24.5),
]


class TestPaymentClient:
    def test_mock_fallback_no_secret_key(self) -> None:
        session = PaymentClient(secret_key="").create_checkout_session(
            ITEMS, "https://shop.example/ok", "https://shop.example/back", 5.0
        )
        assert session.id == MOCK_SESSION_ID
        assert session.url.startswith("https://checkout.stripe.com/pay/cs_test_mockSession")
        assert "success_url=https%3A%2F%2Fshop.example%2Fok" in session.url

    @respx.mock
    def test_posts_line_items_in_cents(self) -> None:
        route = respx.post("https://api.stripe.com/v1/checkout/sessions").mock(
            return_value=httpx.Response(200, json={"id": "cs_1", "url": "https://pay/cs_1"})
        )
        session = PaymentClient(secret_key="sk_test_abc").create_checkout_session(
            ITEMS, "https://shop.example/ok", "https://shop.example/back", 5.0
        )

        assert session.id == "cs_1"
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer sk_test_abc"
        form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        assert form["mode"] == "payment"
        assert form["line_items[0][price_data][unit_amount]"] == "2999"
        assert form["line_items[1][price_data][unit_amount]"] == "2450"
        assert form["line_items[0][price_data][product_data][name]"] == "Mia's Special Story"
        assert form["line_items[1][quantity]"] == "1"
        shipping = "shipping_options[0][shipping_rate_data]"
        assert form[f"{shipping}[fixed_amount][amount]"] == "500"
        assert form[f"{shipping}[display_name]"] == "Standard Shipping"

    @respx.mock
    def test_provider_error_raises(self) -> None:
        respx.post("https://api.stripe.com/v1/checkout/sessions").mock(
            return_value=httpx.Response(400, json={"error": {"message": "bad"}})
        )
        with pytest.raises(PaymentError):
            PaymentClient(secret_key="sk_test_abc").create_checkout_session(
                ITEMS, "https://shop.example/ok", "https://shop.example/back", 5.0
            )

    @respx.mock
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json=["cs_live_123"]),
            httpx.Response(200, json={"url": "https://checkout.stripe.com/c/123"}),
        ],
    )
    def test_malformed_session_raises(self, response: httpx.Response) -> None:
        respx.post("https://api.stripe.com/v1/checkout/sessions").mock(return_value=response)
        with pytest.raises(PaymentError):
            PaymentClient(secret_key="sk_test_abc").create_checkout_session(
                ITEMS, "https://shop.example/ok", "https://shop.example/back", 5.0
            )
