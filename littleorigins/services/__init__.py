"""Storefront services over the data backend and hosted collaborators."""

from littleorigins.services.account import AccountService
from littleorigins.services.blog import BlogService, slugify, validate_post
from littleorigins.services.cart import Cart, CartService, calculate_total, cart_item_for
from littleorigins.services.checkout import CheckoutService
from littleorigins.services.drafts import DraftService, default_draft_title

__all__ = [
    "AccountService",
    "BlogService",
    "Cart",
    "CartService",
    "CheckoutService",
    "DraftService",
    "calculate_total",
    "cart_item_for",
    "default_draft_title",
    "slugify",
    "validate_post",
]
