"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from littleorigins.clients.identity import IdentityClient
from littleorigins.clients.payments import PaymentClient
from littleorigins.config import Settings
from littleorigins.db import Database
from littleorigins.errors import AuthenticationError
from littleorigins.models.account import IdentityUser
from littleorigins.services import (
    AccountService,
    BlogService,
    CartService,
    CheckoutService,
    DraftService,
)


def _get_db(request: Request) -> Database:
    return request.app.state.db  # type: ignore[no-any-return]


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def _get_identity(request: Request) -> IdentityClient:
    return request.app.state.identity  # type: ignore[no-any-return]


def _get_payments(request: Request) -> PaymentClient:
    return request.app.state.payments  # type: ignore[no-any-return]


DbDep = Annotated[Database, Depends(_get_db)]
SettingsDep = Annotated[Settings, Depends(_get_settings)]
IdentityDep = Annotated[IdentityClient, Depends(_get_identity)]
PaymentsDep = Annotated[PaymentClient, Depends(_get_payments)]


def _bearer_token(request: Request) -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def _optional_user(request: Request, identity: IdentityDep) -> IdentityUser | None:
    return identity.get_current_user(_bearer_token(request))


def _current_user(user: Annotated[IdentityUser | None, Depends(_optional_user)]) -> IdentityUser:
    if user is None:
        raise AuthenticationError("Please sign in to continue")
    return user


OptionalUserDep = Annotated[IdentityUser | None, Depends(_optional_user)]
CurrentUserDep = Annotated[IdentityUser, Depends(_current_user)]


def _cart_service(db: DbDep) -> CartService:
    return CartService(db)


def _draft_service(db: DbDep, settings: SettingsDep) -> DraftService:
    return DraftService(db, save_retries=settings.draft_save_retries)


def _checkout_service(
    db: DbDep, payments: PaymentsDep, settings: SettingsDep
) -> CheckoutService:
    return CheckoutService(CartService(db), payments, settings)


def _account_service(db: DbDep) -> AccountService:
    return AccountService(db)


def _blog_service(db: DbDep) -> BlogService:
    return BlogService(db)


CartServiceDep = Annotated[CartService, Depends(_cart_service)]
DraftServiceDep = Annotated[DraftService, Depends(_draft_service)]
CheckoutServiceDep = Annotated[CheckoutService, Depends(_checkout_service)]
AccountServiceDep = Annotated[AccountService, Depends(_account_service)]
BlogServiceDep = Annotated[BlogService, Depends(_blog_service)]
