"""Working cart and saved cart endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from littleorigins.api.deps import CartServiceDep, CurrentUserDep, SettingsDep
from littleorigins.api.schemas import (
    ActionResponse,
    CartResponse,
    SavedCartResponse,
    SaveCartRequest,
)
from littleorigins.models.book import BookConfiguration
from littleorigins.services.cart import cart_item_for

if TYPE_CHECKING:
    from littleorigins.models.cart import SavedCart
    from littleorigins.services.cart import Cart

router = APIRouter(tags=["cart"])


def _cart_to_response(cart: Cart) -> CartResponse:
    return CartResponse(items=cart.items, total=cart.total, count=cart.count)


def _saved_to_response(saved: SavedCart) -> SavedCartResponse:
    assert saved.id is not None
    return SavedCartResponse(
        id=saved.id,
        name=saved.name,
        items=saved.items,
        total_amount=saved.total_amount,
        created_at=str(saved.created_at),
        updated_at=str(saved.updated_at),
    )


@router.get("/cart", response_model=CartResponse)
def get_cart(user: CurrentUserDep, carts: CartServiceDep) -> CartResponse:
    return _cart_to_response(carts.load(user))


@router.post("/cart/items", response_model=CartResponse)
def add_book_to_cart(
    config: BookConfiguration,
    user: CurrentUserDep,
    carts: CartServiceDep,
    settings: SettingsDep,
) -> CartResponse:
    item = cart_item_for(config, settings.book_price)
    return _cart_to_response(carts.add(user, item))


@router.delete("/cart/items/{item_id}", response_model=CartResponse)
def remove_from_cart(item_id: str, user: CurrentUserDep, carts: CartServiceDep) -> CartResponse:
    return _cart_to_response(carts.remove(user, item_id))


@router.delete("/cart", response_model=CartResponse)
def clear_cart(user: CurrentUserDep, carts: CartServiceDep) -> CartResponse:
    return _cart_to_response(carts.clear(user))


@router.post("/cart/save", response_model=SavedCartResponse, status_code=201)
def save_cart(
    body: SaveCartRequest, user: CurrentUserDep, carts: CartServiceDep
) -> SavedCartResponse:
    return _saved_to_response(carts.save_with_name(user, body.name))


@router.get("/carts/saved", response_model=list[SavedCartResponse])
def list_saved_carts(user: CurrentUserDep, carts: CartServiceDep) -> list[SavedCartResponse]:
    return [_saved_to_response(c) for c in carts.list_saved(user)]


@router.post("/carts/saved/{cart_id}/restore", response_model=CartResponse)
def restore_saved_cart(cart_id: int, user: CurrentUserDep, carts: CartServiceDep) -> CartResponse:
    return _cart_to_response(carts.restore(user, cart_id))


@router.delete("/carts/saved/{cart_id}", response_model=ActionResponse)
def delete_saved_cart(cart_id: int, user: CurrentUserDep, carts: CartServiceDep) -> ActionResponse:
    carts.delete_saved(user, cart_id)
    return ActionResponse(message=f"Saved cart {cart_id} deleted")
