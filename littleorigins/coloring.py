"""Free coloring-page catalog for the downloads page."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from littleorigins.errors import NotFoundError


class ColoringPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    image_url: str


_IMAGE_QUERY = "?w=500&h=500&fit=crop&q=80&fm=jpg&crop=entropy&auto=format&fit=max"

COLORING_PAGES: tuple[ColoringPage, ...] = tuple(
    ColoringPage(id=i, title=title, image_url=f"https://images.unsplash.com/{photo}{_IMAGE_QUERY}")
    for i, (title, photo) in enumerate(
        [
            ("Family", "photo-1472396961693-142e6e269027"),
            ("Flowers", "photo-1465146344425-f00d5f5c8f07"),
            ("Nature Bridge", "photo-1433086966358-54859d0ed716"),
            ("Pine Trees", "photo-1509316975850-ff9c5deb0cd9"),
            ("Mountain View", "photo-1469474968028-56623f02e42e"),
            ("Foggy Summit", "photo-1470071459604-3b5ec3a7fe05"),
        ],
        start=1,
    )
)

PALETTE: tuple[str, ...] = (
    "#000000", "#FF0000", "#00FF00", "#0000FF",
    "#FFFF00", "#FF00FF", "#00FFFF", "#FFA500",
    "#800080", "#008000", "#800000", "#008080",
)  # fmt: skip

DEFAULT_COLOR = "#000000"
DEFAULT_BRUSH_SIZE = 5
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 50


def list_pages() -> list[ColoringPage]:
    return list(COLORING_PAGES)


def get_page(page_id: int) -> ColoringPage:
    for page in COLORING_PAGES:
        if page.id == page_id:
            return page
    raise NotFoundError(f"Coloring page {page_id} not found")
