"""Blog endpoints: public reading and editor administration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from littleorigins.api.deps import BlogServiceDep, CurrentUserDep
from littleorigins.api.schemas import (
    ActionResponse,
    BlogPostRequest,
    BlogPostResponse,
    BlogPostSummary,
)

if TYPE_CHECKING:
    from littleorigins.models.blog import BlogPost

router = APIRouter(prefix="/blog", tags=["blog"])


def _summary(post: BlogPost) -> BlogPostSummary:
    assert post.id is not None
    return BlogPostSummary(
        id=post.id,
        title=post.title,
        slug=post.slug,
        excerpt=post.excerpt,
        featured_image=post.featured_image,
        published_at=str(post.published_at) if post.published_at else None,
    )


def _full(post: BlogPost) -> BlogPostResponse:
    return BlogPostResponse(
        **_summary(post).model_dump(),
        content=post.content,
        author_id=post.author_id,
        is_published=post.is_published,
        updated_at=str(post.updated_at),
    )


@router.get("/posts", response_model=list[BlogPostSummary])
def list_posts(blog: BlogServiceDep) -> list[BlogPostSummary]:
    return [_summary(p) for p in blog.list_published()]


@router.get("/posts/{slug}", response_model=BlogPostResponse)
def get_post(slug: str, blog: BlogServiceDep) -> BlogPostResponse:
    return _full(blog.get_published(slug))


@router.get("/admin/posts", response_model=list[BlogPostResponse])
def list_all_posts(user: CurrentUserDep, blog: BlogServiceDep) -> list[BlogPostResponse]:
    return [_full(p) for p in blog.list_all(user)]


@router.post("/admin/posts", response_model=BlogPostResponse, status_code=201)
def create_post(
    body: BlogPostRequest, user: CurrentUserDep, blog: BlogServiceDep
) -> BlogPostResponse:
    post = blog.create_post(user, **body.model_dump())
    return _full(post)


@router.put("/admin/posts/{post_id}", response_model=BlogPostResponse)
def update_post(
    post_id: int, body: BlogPostRequest, user: CurrentUserDep, blog: BlogServiceDep
) -> BlogPostResponse:
    post = blog.update_post(user, post_id, **body.model_dump())
    return _full(post)


@router.delete("/admin/posts/{post_id}", response_model=ActionResponse)
def delete_post(post_id: int, user: CurrentUserDep, blog: BlogServiceDep) -> ActionResponse:
    blog.delete_post(user, post_id)
    return ActionResponse(message=f"Post {post_id} deleted")
