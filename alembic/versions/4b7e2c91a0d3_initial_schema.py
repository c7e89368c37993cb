"""initial schema

Revision ID: 4b7e2c91a0d3
Revises:
Create Date: 2026-10-19 18:30:12.481266

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "4b7e2c91a0d3"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
    ]


def upgrade() -> None:
    """Create all storefront tables."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("first_name", sa.Text, nullable=True),
        sa.Column("last_name", sa.Text, nullable=True),
        sa.Column("avatar_url", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "saved_drafts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("conception_type", sa.Text, nullable=False),
        sa.Column("family_structure", sa.Text, nullable=False),
        sa.Column("child_name", sa.Text, nullable=True),
        sa.Column("child_age", sa.Text, nullable=True),
        sa.Column("used_donor_egg", sa.Boolean, nullable=True),
        sa.Column("used_donor_sperm", sa.Boolean, nullable=True),
        sa.Column("used_donor_embryo", sa.Boolean, nullable=True),
        sa.Column("used_surrogate", sa.Boolean, nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_saved_drafts_user", "saved_drafts", ["user_id"])

    op.create_table(
        "saved_carts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("name", sa.Text, nullable=True),
        sa.Column("items_json", sa.Text, nullable=False, server_default="[]"),
        sa.Column("total_amount", sa.Float, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("idx_saved_carts_user", "saved_carts", ["user_id", "updated_at"])

    op.create_table(
        "family_members",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("relationship", sa.Text, nullable=False),
        sa.Column("birthdate", sa.Text, nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_family_members_user", "family_members", ["user_id"])

    op.create_table(
        "family_stories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("story", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
        sa.UniqueConstraint("user_id", name="uq_family_stories_user"),
    )

    op.create_table(
        "blog_posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("author_id", sa.Text, nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("slug", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("featured_image", sa.Text, nullable=True),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.Text, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("slug", name="uq_blog_posts_slug"),
    )
    op.create_index(
        "idx_blog_posts_published", "blog_posts", ["is_published", "published_at"]
    )

    op.create_table(
        "user_roles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False, server_default="user"),
        sa.Column("created_at", sa.Text, nullable=False),
        sa.CheckConstraint("role IN ('admin', 'author', 'user')", name="ck_user_roles_role"),
        sa.UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )


def downgrade() -> None:
    """Drop all storefront tables."""
    op.drop_table("user_roles")
    op.drop_index("idx_blog_posts_published", table_name="blog_posts")
    op.drop_table("blog_posts")
    op.drop_table("family_stories")
    op.drop_index("idx_family_members_user", table_name="family_members")
    op.drop_table("family_members")
    op.drop_index("idx_saved_carts_user", table_name="saved_carts")
    op.drop_table("saved_carts")
    op.drop_index("idx_saved_drafts_user", table_name="saved_drafts")
    op.drop_table("saved_drafts")
    op.drop_table("profiles")
