"""FastAPI application factory and entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI

from littleorigins import __version__
from littleorigins.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from littleorigins.api.routes import (
    account,
    auth,
    blog,
    books,
    cart,
    checkout,
    coloring,
    drafts,
    system,
)
from littleorigins.clients import IdentityClient, PaymentClient
from littleorigins.config import Settings
from littleorigins.db import Database
from littleorigins.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = structlog.get_logger()

API_PREFIX = "/api/v1"


def attach_state(app: FastAPI, db: Database, settings: Settings) -> None:
    """Wire the database, settings and collaborator clients onto *app*."""
    app.state.db = db
    app.state.settings = settings
    app.state.identity = IdentityClient(settings.identity_api_url)
    app.state.payments = PaymentClient(
        secret_key=settings.payment_secret_key,
        base_url=settings.payment_api_url,
        currency=settings.currency,
    )


def include_routers(app: FastAPI) -> None:
    for module in (system, books, auth, cart, drafts, checkout, account, blog, coloring):
        app.include_router(module.router, prefix=API_PREFIX)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize DB and settings on startup, cleanup on shutdown."""
    settings = Settings()
    settings.ensure_data_dir()

    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
    )

    db = Database(settings.db_path)
    db.init_schema()
    attach_state(app, db, settings)

    logger.info("Storefront API started", host=settings.api_host, port=settings.api_port)
    yield

    db.close()
    logger.info("Storefront API shut down")


def create_app() -> FastAPI:
    """Application factory."""
    app = FastAPI(
        title="Little Origins",
        description="Personalized children's book storefront API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)

    from prometheus_client import make_asgi_app

    app.mount("/metrics", make_asgi_app())

    include_routers(app)
    return app


def main() -> None:
    """Entry point for `littleorigins-api` command."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "littleorigins.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
