"""Blog post model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BlogPost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    author_id: str
    title: str
    slug: str
    content: str
    excerpt: str | None = None
    featured_image: str | None = None
    is_published: bool = False
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
