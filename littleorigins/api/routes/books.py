"""Book customization options and page previews."""

from __future__ import annotations

import structlog
from fastapi import APIRouter

from littleorigins.api.schemas import BookOptionsResponse, PreviewResponse
from littleorigins.metrics import previews_total
from littleorigins.models.book import BookConfiguration, book_options
from littleorigins.pages import generate_for

router = APIRouter(prefix="/books", tags=["books"])

logger = structlog.get_logger()


@router.get("/options", response_model=BookOptionsResponse)
def get_options() -> BookOptionsResponse:
    options = book_options()
    return BookOptionsResponse(
        family_structure=options["family_structure"],
        conception_type=options["conception_type"],
        child_age=options["child_age"],
        defaults=BookConfiguration(),
    )


@router.post("/preview", response_model=PreviewResponse)
def preview(config: BookConfiguration) -> PreviewResponse:
    pages = generate_for(config)
    previews_total.labels(
        family_structure=config.family_structure.value,
        conception_type=config.conception_type.value,
    ).inc()
    logger.debug("Preview generated", pages=len(pages))
    return PreviewResponse(configuration=config, pages=pages)
