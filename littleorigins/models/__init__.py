"""Re-exports all Pydantic models."""

from littleorigins.models.account import FamilyMember, FamilyStory, IdentityUser, Profile, Role
from littleorigins.models.blog import BlogPost
from littleorigins.models.book import (
    BookConfiguration,
    BookOption,
    ChildAge,
    ConceptionType,
    FamilyStructure,
    Page,
    book_options,
)
from littleorigins.models.cart import CartItem, SavedCart
from littleorigins.models.checkout import CheckoutSession, OrderConfirmation, ShippingDetails
from littleorigins.models.draft import SavedDraft

__all__ = [
    "BlogPost",
    "BookConfiguration",
    "BookOption",
    "CartItem",
    "CheckoutSession",
    "ChildAge",
    "ConceptionType",
    "FamilyMember",
    "FamilyStory",
    "FamilyStructure",
    "IdentityUser",
    "OrderConfirmation",
    "Page",
    "Profile",
    "Role",
    "SavedCart",
    "SavedDraft",
    "ShippingDetails",
    "book_options",
]
