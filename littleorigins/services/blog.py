"""Blog posts: public reading and role-gated editing."""

from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog
from sqlalchemy.exc import IntegrityError

from littleorigins.errors import NotFoundError, PermissionDeniedError
from littleorigins.models.account import Role
from littleorigins.models.blog import BlogPost
from littleorigins.services.base import backend_call

if TYPE_CHECKING:
    from collections.abc import Iterator

    from littleorigins.db import Database
    from littleorigins.models.account import IdentityUser

logger = structlog.get_logger()

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

EDITOR_ROLES = frozenset({Role.ADMIN, Role.AUTHOR})

SLUG_TAKEN = "Slug is already in use"


def slugify(title: str) -> str:
    """Lowercase, drop special characters, hyphenate whitespace runs."""
    slug = title.lower()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


@contextmanager
def _unique_slug(slug: str) -> Iterator[None]:
    """Report a lost race on the slug unique constraint as a validation error."""
    try:
        yield
    except IntegrityError as exc:
        logger.info("Slug taken by concurrent write", slug=slug)
        raise ValueError(f"slug: {SLUG_TAKEN}") from exc


def validate_post(title: str, slug: str, content: str) -> dict[str, str]:
    """Return field -> message for every invalid field (empty when valid)."""
    errors: dict[str, str] = {}
    if not title.strip():
        errors["title"] = "Title is required"
    if not slug.strip():
        errors["slug"] = "Slug is required"
    elif not SLUG_RE.match(slug):
        errors["slug"] = "Slug must contain only lowercase letters, numbers, and hyphens"
    if not content.strip():
        errors["content"] = "Content is required"
    return errors


class BlogService:
    def __init__(self, db: Database) -> None:
        self.db = db

    # --- Public ---

    def list_published(self) -> list[BlogPost]:
        with backend_call("load blog posts"):
            return self.db.list_posts(published_only=True)

    def get_published(self, slug: str) -> BlogPost:
        with backend_call("load blog post", slug=slug):
            post = self.db.get_post_by_slug(slug)
        if post is None or not post.is_published:
            raise NotFoundError(f"Post '{slug}' not found")
        return post

    # --- Roles ---

    def roles_of(self, user: IdentityUser) -> set[Role]:
        with backend_call("load roles", user_id=user.backend_id):
            return self.db.get_roles(user.backend_id)

    def require_role(self, user: IdentityUser, allowed: frozenset[Role]) -> None:
        if not self.roles_of(user) & allowed:
            raise PermissionDeniedError("You do not have permission to manage blog posts")

    # --- Editing ---

    def list_all(self, user: IdentityUser) -> list[BlogPost]:
        self.require_role(user, EDITOR_ROLES)
        with backend_call("load blog posts"):
            return self.db.list_posts(published_only=False)

    def create_post(
        self,
        user: IdentityUser,
        title: str,
        content: str,
        slug: str = "",
        excerpt: str | None = None,
        featured_image: str | None = None,
        is_published: bool = False,
    ) -> BlogPost:
        self.require_role(user, EDITOR_ROLES)
        slug = slug or slugify(title)
        self._validate(title, slug, content, post_id=None)

        post = BlogPost(
            author_id=user.backend_id,
            title=title.strip(),
            slug=slug,
            content=content,
            excerpt=excerpt or None,
            featured_image=featured_image or None,
            is_published=is_published,
            published_at=datetime.now(UTC) if is_published else None,
        )
        with backend_call("create blog post", slug=slug), _unique_slug(slug):
            created = self.db.create_post(post)
        logger.info("Blog post created", post_id=created.id, slug=slug)
        return created

    def update_post(
        self,
        user: IdentityUser,
        post_id: int,
        title: str,
        content: str,
        slug: str = "",
        excerpt: str | None = None,
        featured_image: str | None = None,
        is_published: bool = False,
    ) -> BlogPost:
        self.require_role(user, EDITOR_ROLES)
        with backend_call("load blog post", post_id=post_id):
            existing = self.db.get_post(post_id)
        if existing is None:
            raise NotFoundError(f"Post {post_id} not found")

        slug = slug or slugify(title)
        self._validate(title, slug, content, post_id=post_id)

        published_at = existing.published_at
        if is_published and published_at is None:
            published_at = datetime.now(UTC)

        post = existing.model_copy(
            update={
                "title": title.strip(),
                "slug": slug,
                "content": content,
                "excerpt": excerpt or None,
                "featured_image": featured_image or None,
                "is_published": is_published,
                "published_at": published_at,
            }
        )
        with backend_call("update blog post", post_id=post_id), _unique_slug(slug):
            updated = self.db.update_post(post)
        if updated is None:
            raise NotFoundError(f"Post {post_id} not found")
        logger.info("Blog post updated", post_id=post_id, slug=slug)
        return updated

    def delete_post(self, user: IdentityUser, post_id: int) -> None:
        self.require_role(user, EDITOR_ROLES)
        with backend_call("delete blog post", post_id=post_id):
            deleted = self.db.delete_post(post_id)
        if not deleted:
            raise NotFoundError(f"Post {post_id} not found")
        logger.info("Blog post deleted", post_id=post_id)

    def _validate(self, title: str, slug: str, content: str, post_id: int | None) -> None:
        errors = validate_post(title, slug, content)
        if "slug" not in errors:
            with backend_call("check slug", slug=slug):
                clash = self.db.get_post_by_slug(slug)
            if clash is not None and clash.id != post_id:
                errors["slug"] = SLUG_TAKEN
        if errors:
            raise ValueError("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
