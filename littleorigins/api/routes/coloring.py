"""Coloring-page downloads."""

from __future__ import annotations

from fastapi import APIRouter

from littleorigins import coloring
from littleorigins.api.schemas import ColoringPageResponse, PaletteResponse

router = APIRouter(prefix="/coloring", tags=["coloring"])


@router.get("/pages", response_model=list[ColoringPageResponse])
def list_pages() -> list[ColoringPageResponse]:
    return [ColoringPageResponse(**p.model_dump()) for p in coloring.list_pages()]


@router.get("/pages/{page_id}", response_model=ColoringPageResponse)
def get_page(page_id: int) -> ColoringPageResponse:
    return ColoringPageResponse(**coloring.get_page(page_id).model_dump())


@router.get("/palette", response_model=PaletteResponse)
def get_palette() -> PaletteResponse:
    return PaletteResponse(
        colors=list(coloring.PALETTE),
        default_color=coloring.DEFAULT_COLOR,
        default_brush_size=coloring.DEFAULT_BRUSH_SIZE,
        min_brush_size=coloring.MIN_BRUSH_SIZE,
        max_brush_size=coloring.MAX_BRUSH_SIZE,
    )
