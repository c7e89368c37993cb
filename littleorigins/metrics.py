"""Prometheus metric definitions for the storefront."""

from __future__ import annotations

from prometheus_client import Counter

# --- Retry ---

retry_attempts_total = Counter(
    "littleorigins_retry_attempts_total",
    "Total retry attempts across persistence paths",
    labelnames=["fn_name"],
)

retry_exhausted_total = Counter(
    "littleorigins_retry_exhausted_total",
    "Total times retries were exhausted",
    labelnames=["fn_name"],
)

# --- Book flow ---

previews_total = Counter(
    "littleorigins_previews_total",
    "Total page sequence previews generated",
    labelnames=["family_structure", "conception_type"],
)

drafts_saved_total = Counter(
    "littleorigins_drafts_saved_total",
    "Total drafts saved",
)

cart_mutations_total = Counter(
    "littleorigins_cart_mutations_total",
    "Total cart changes",
    labelnames=["action"],
)

# --- Checkout ---

checkout_sessions_total = Counter(
    "littleorigins_checkout_sessions_total",
    "Total hosted checkout sessions created",
    labelnames=["mode"],
)

orders_confirmed_total = Counter(
    "littleorigins_orders_confirmed_total",
    "Total orders confirmed",
)
