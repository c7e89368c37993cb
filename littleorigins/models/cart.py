"""Cart and saved-cart models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    price: float = Field(ge=0)


class SavedCart(BaseModel):
    """A cart snapshot stored in the data backend.

    The working cart has no name; named carts are snapshots the user saved
    explicitly from the cart view.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    user_id: str
    name: str | None = None
    items: list[CartItem] = Field(default_factory=list)
    total_amount: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None
