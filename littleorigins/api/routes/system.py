"""Health check and config endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from littleorigins import __version__
from littleorigins.api.deps import DbDep, SettingsDep
from littleorigins.api.schemas import ConfigCheckResponse, HealthResponse

router = APIRouter(tags=["system"])

logger = structlog.get_logger()


@router.get("/health", response_model=HealthResponse)
def health_check(
    db: DbDep,
) -> HealthResponse:
    db_ok = False
    try:
        db_ok = db.check_connection()
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed", error=str(exc))

    return HealthResponse(
        status="healthy" if db_ok else "unhealthy",
        version=__version__,
        db_connected=db_ok,
    )


@router.get("/config/check", response_model=ConfigCheckResponse)
def config_check(
    settings: SettingsDep,
) -> ConfigCheckResponse:
    return ConfigCheckResponse(
        configured={
            "identity_provider": bool(settings.identity_api_url),
            "payment_provider": bool(settings.payment_secret_key),
        }
    )
