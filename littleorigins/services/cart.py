"""Cart state and its mirror in the data backend."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

import structlog

from littleorigins.errors import NotFoundError
from littleorigins.metrics import cart_mutations_total
from littleorigins.models.cart import CartItem, SavedCart
from littleorigins.pages import book_title
from littleorigins.services.base import backend_call

if TYPE_CHECKING:
    from littleorigins.db import Database
    from littleorigins.models.account import IdentityUser
    from littleorigins.models.book import BookConfiguration

logger = structlog.get_logger()


def cart_item_for(config: BookConfiguration, price: float) -> CartItem:
    """Snapshot a configuration as a book cart item.

    The id is derived from the configuration, so adding the same book twice
    leaves a single item in the cart.
    """
    digest = hashlib.sha256(config.model_dump_json().encode()).hexdigest()[:16]
    return CartItem(id=f"book-{digest}", title=book_title(config.child_name), price=price)


def calculate_total(items: list[CartItem]) -> float:
    return round(sum(item.price for item in items), 2)


class Cart:
    """In-memory cart. Items are unique by id and keep insertion order."""

    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._items: list[CartItem] = []
        for item in items or []:
            self.add(item)

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    @property
    def total(self) -> float:
        return calculate_total(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    def add(self, item: CartItem) -> bool:
        """Add *item* unless one with the same id is already present."""
        if any(existing.id == item.id for existing in self._items):
            return False
        self._items.append(item)
        return True

    def remove(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [i for i in self._items if i.id != item_id]
        return len(self._items) != before

    def clear(self) -> None:
        self._items = []


class CartService:
    """Keeps each signed-in user's working cart mirrored in ``saved_carts``."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def load(self, user: IdentityUser) -> Cart:
        with backend_call("load cart", user_id=user.backend_id):
            saved = self.db.get_working_cart(user.backend_id)
        if saved is None:
            return Cart()
        logger.debug("Loaded saved cart", user_id=user.backend_id, items=len(saved.items))
        return Cart(saved.items)

    def _save(self, user: IdentityUser, cart: Cart) -> None:
        with backend_call("save cart", user_id=user.backend_id):
            self.db.save_working_cart(user.backend_id, cart.items, cart.total)

    def add(self, user: IdentityUser, item: CartItem) -> Cart:
        cart = self.load(user)
        if cart.add(item):
            self._save(user, cart)
            cart_mutations_total.labels(action="add").inc()
            logger.info("Added item to cart", user_id=user.backend_id, item_id=item.id)
        return cart

    def remove(self, user: IdentityUser, item_id: str) -> Cart:
        cart = self.load(user)
        if not cart.remove(item_id):
            raise NotFoundError(f"Cart item {item_id} not found")
        self._save(user, cart)
        cart_mutations_total.labels(action="remove").inc()
        return cart

    def clear(self, user: IdentityUser) -> Cart:
        cart = self.load(user)
        cart.clear()
        self._save(user, cart)
        cart_mutations_total.labels(action="clear").inc()
        return cart

    def save_with_name(self, user: IdentityUser, name: str) -> SavedCart:
        """Store the working cart as a named snapshot. Empty carts are rejected."""
        name = name.strip()
        if not name:
            raise ValueError("Cart name is required")
        cart = self.load(user)
        if cart.count == 0:
            raise ValueError("Cannot save an empty cart")
        with backend_call("save cart", user_id=user.backend_id):
            saved = self.db.create_named_cart(user.backend_id, name, cart.items, cart.total)
        logger.info("Saved named cart", user_id=user.backend_id, cart_id=saved.id)
        return saved

    def list_saved(self, user: IdentityUser) -> list[SavedCart]:
        with backend_call("load saved carts", user_id=user.backend_id):
            return self.db.list_named_carts(user.backend_id)

    def restore(self, user: IdentityUser, cart_id: int) -> Cart:
        """Merge a named cart's items into the working cart."""
        with backend_call("load saved cart", user_id=user.backend_id):
            saved = self.db.get_named_cart(user.backend_id, cart_id)
        if saved is None:
            raise NotFoundError(f"Saved cart {cart_id} not found")
        cart = self.load(user)
        added = [item for item in saved.items if cart.add(item)]
        if added:
            self._save(user, cart)
            cart_mutations_total.labels(action="restore").inc()
        return cart

    def delete_saved(self, user: IdentityUser, cart_id: int) -> None:
        with backend_call("delete saved cart", user_id=user.backend_id):
            deleted = self.db.delete_named_cart(user.backend_id, cart_id)
        if not deleted:
            raise NotFoundError(f"Saved cart {cart_id} not found")
