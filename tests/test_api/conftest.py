"""FastAPI test client fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from littleorigins.api.app import attach_state, include_routers
from littleorigins.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from littleorigins.models.account import IdentityUser, Role

if TYPE_CHECKING:
    from littleorigins.config import Settings
    from littleorigins.db import Database


def _create_test_app(db: Database, settings: Settings) -> FastAPI:
    """Create a FastAPI app with injected test db/settings (no lifespan)."""
    app = FastAPI(title="Little Origins Test")

    # No identity URL in test settings, so bearer tokens act as user ids
    attach_state(app, db, settings)

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)
    include_routers(app)
    return app


@pytest.fixture()
def client(db: Database, settings: Settings) -> TestClient:
    return TestClient(_create_test_app(db, settings))


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {"Authorization": "Bearer user_test"}


@pytest.fixture()
def other_headers() -> dict[str, str]:
    return {"Authorization": "Bearer user_other"}


@pytest.fixture()
def author_headers(db: Database) -> dict[str, str]:
    db.grant_role(IdentityUser(id="user_author").backend_id, Role.AUTHOR)
    return {"Authorization": "Bearer user_author"}

