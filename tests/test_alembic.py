"""Tests for Alembic migration infrastructure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from alembic.config import Config
from sqlalchemy import create_engine, inspect

from alembic import command

if TYPE_CHECKING:
    from pathlib import Path

TABLES = {
    "profiles",
    "saved_drafts",
    "saved_carts",
    "family_members",
    "family_stories",
    "blog_posts",
    "user_roles",
}


def _config(db_path: Path) -> Config:
    cfg = Config("alembic.ini")
    cfg.set_main_option("sqlalchemy.url", f"sqlite:///{db_path}")
    return cfg


class TestAlembicMigrations:
    def test_upgrade_to_head_creates_all_tables(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test_alembic.db"
        command.upgrade(_config(db_path), "head")

        engine = create_engine(f"sqlite:///{db_path}")
        tables = set(inspect(engine).get_table_names())
        engine.dispose()

        assert TABLES <= tables
        assert "alembic_version" in tables

    def test_saved_drafts_columns_match_orm(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test_alembic.db"
        command.upgrade(_config(db_path), "head")

        engine = create_engine(f"sqlite:///{db_path}")
        columns = {c["name"] for c in inspect(engine).get_columns("saved_drafts")}
        engine.dispose()

        assert columns == {
            "id",
            "user_id",
            "title",
            "conception_type",
            "family_structure",
            "child_name",
            "child_age",
            "used_donor_egg",
            "used_donor_sperm",
            "used_donor_embryo",
            "used_surrogate",
            "created_at",
            "updated_at",
        }

    def test_blog_slug_is_unique(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test_alembic.db"
        command.upgrade(_config(db_path), "head")

        engine = create_engine(f"sqlite:///{db_path}")
        uniques = inspect(engine).get_unique_constraints("blog_posts")
        engine.dispose()

        assert any(u["column_names"] == ["slug"] for u in uniques)

    def test_downgrade_drops_all_tables(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test_alembic.db"
        cfg = _config(db_path)
        command.upgrade(cfg, "head")
        command.downgrade(cfg, "base")

        engine = create_engine(f"sqlite:///{db_path}")
        tables = set(inspect(engine).get_table_names())
        engine.dispose()

        assert not TABLES & tables
