"""Database package: engine, ORM models, and CRUD facade."""

from littleorigins.db.engine import create_db_engine, create_session_factory
from littleorigins.db.facade import Database
from littleorigins.db.orm import (
    Base,
    BlogPostRow,
    FamilyMemberRow,
    FamilyStoryRow,
    ProfileRow,
    SavedCartRow,
    SavedDraftRow,
    UserRoleRow,
)

__all__ = [
    "Base",
    "BlogPostRow",
    "Database",
    "FamilyMemberRow",
    "FamilyStoryRow",
    "ProfileRow",
    "SavedCartRow",
    "SavedDraftRow",
    "UserRoleRow",
    "create_db_engine",
    "create_session_factory",
]
