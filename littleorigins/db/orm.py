"""SQLAlchemy ORM models mapping to the storefront database tables."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Float,
    Index,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow_str() -> str:
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class Base(DeclarativeBase):
    pass


class ProfileRow(Base):
    __tablename__ = "profiles"

    # Backend user id (UUID text) derived from the identity provider's id
    id: Mapped[str] = mapped_column(Text, primary_key=True)
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)


class SavedDraftRow(Base):
    __tablename__ = "saved_drafts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    conception_type: Mapped[str] = mapped_column(Text, nullable=False)
    family_structure: Mapped[str] = mapped_column(Text, nullable=False)
    child_name: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    child_age: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    used_donor_egg: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    used_donor_sperm: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    used_donor_embryo: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    used_surrogate: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)

    __table_args__ = (Index("idx_saved_drafts_user", "user_id"),)


class SavedCartRow(Base):
    __tablename__ = "saved_carts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    # NULL name marks the user's working cart
    name: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    items_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    total_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)

    __table_args__ = (Index("idx_saved_carts_user", "user_id", "updated_at"),)


class FamilyMemberRow(Base):
    __tablename__ = "family_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    relationship: Mapped[str] = mapped_column(Text, nullable=False)
    birthdate: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)

    __table_args__ = (Index("idx_family_members_user", "user_id"),)


class FamilyStoryRow(Base):
    __tablename__ = "family_stories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    story: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)

    __table_args__ = (UniqueConstraint("user_id", name="uq_family_stories_user"),)


class BlogPostRow(Base):
    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    featured_image: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)

    __table_args__ = (
        UniqueConstraint("slug", name="uq_blog_posts_slug"),
        Index("idx_blog_posts_published", "is_published", "published_at"),
    )


class UserRoleRow(Base):
    __tablename__ = "user_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False, default="user")
    created_at: Mapped[str] = mapped_column(Text, nullable=False, default=_utcnow_str)

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'author', 'user')", name="ck_user_roles_role"),
        UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )
