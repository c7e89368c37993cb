"""Shared helpers for the storefront services."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog
from sqlalchemy.exc import SQLAlchemyError

from littleorigins.errors import PersistenceError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = structlog.get_logger()


@contextmanager
def backend_call(action: str, **context: object) -> Iterator[None]:
    """Turn data backend failures into a retryable PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Data backend call failed", action=action, error=str(exc), **context)
        raise PersistenceError(f"Failed to {action}") from exc
