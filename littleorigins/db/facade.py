"""SQLAlchemy-backed database connection and CRUD helpers."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import select, text

from littleorigins.db.engine import create_db_engine, create_session_factory
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
from littleorigins.models.account import FamilyMember, FamilyStory, Profile, Role
from littleorigins.models.blog import BlogPost
from littleorigins.models.cart import CartItem, SavedCart
from littleorigins.models.draft import SavedDraft

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy import Engine
    from sqlalchemy.orm import Session, sessionmaker


class Database:
    """SQLAlchemy-backed wrapper with CRUD helpers for every storefront table.

    All user-owned lookups take the backend user id and only ever return
    rows owned by that user.
    """

    def __init__(self, db_path: str | Path = ":memory:"):
        self.db_path = str(db_path)
        self._engine: Engine = create_db_engine(self.db_path)
        self._session_factory: sessionmaker[Session] = create_session_factory(self._engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def Session(self) -> sessionmaker[Session]:  # noqa: N802
        return self._session_factory

    def init_schema(self) -> None:
        """Create all tables via ORM metadata."""
        Base.metadata.create_all(self._engine)

    def close(self) -> None:
        self._engine.dispose()

    def check_connection(self) -> bool:
        """Verify the database is reachable. Returns True or raises."""
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))
        return True

    # --- Profiles ---

    def get_profile(self, user_id: str) -> Profile | None:
        with self._session_factory() as session:
            row = session.get(ProfileRow, user_id)
            if row is None:
                return None
            return self._row_to_profile(row)

    def create_profile(self, profile: Profile) -> Profile:
        with self._session_factory() as session:
            row = ProfileRow(
                id=profile.id,
                first_name=profile.first_name,
                last_name=profile.last_name,
                avatar_url=profile.avatar_url,
            )
            session.add(row)
            session.commit()
            return self._row_to_profile(row)

    def update_profile(
        self,
        user_id: str,
        first_name: str | None,
        last_name: str | None,
        avatar_url: str | None = None,
        update_avatar: bool = False,
    ) -> Profile | None:
        with self._session_factory() as session:
            row = session.get(ProfileRow, user_id)
            if row is None:
                return None
            row.first_name = first_name
            row.last_name = last_name
            if update_avatar:
                row.avatar_url = avatar_url
            row.updated_at = _utcnow_str()
            session.commit()
            return self._row_to_profile(row)

    # --- Drafts ---

    def create_draft(self, draft: SavedDraft) -> SavedDraft:
        with self._session_factory() as session:
            row = SavedDraftRow(
                user_id=draft.user_id,
                title=draft.title,
                conception_type=draft.conception_type,
                family_structure=draft.family_structure,
                child_name=draft.child_name,
                child_age=draft.child_age,
                used_donor_egg=draft.used_donor_egg,
                used_donor_sperm=draft.used_donor_sperm,
                used_donor_embryo=draft.used_donor_embryo,
                used_surrogate=draft.used_surrogate,
            )
            session.add(row)
            session.commit()
            return self._row_to_draft(row)

    def list_drafts(self, user_id: str) -> list[SavedDraft]:
        with self._session_factory() as session:
            stmt = (
                select(SavedDraftRow)
                .where(SavedDraftRow.user_id == user_id)
                .order_by(SavedDraftRow.created_at.desc(), SavedDraftRow.id.desc())
            )
            return [self._row_to_draft(r) for r in session.scalars(stmt).all()]

    def get_draft(self, user_id: str, draft_id: int) -> SavedDraft | None:
        with self._session_factory() as session:
            row = session.get(SavedDraftRow, draft_id)
            if row is None or row.user_id != user_id:
                return None
            return self._row_to_draft(row)

    def delete_draft(self, user_id: str, draft_id: int) -> bool:
        with self._session_factory() as session:
            row = session.get(SavedDraftRow, draft_id)
            if row is None or row.user_id != user_id:
                return False
            session.delete(row)
            session.commit()
            return True

    # --- Carts ---

    def get_working_cart(self, user_id: str) -> SavedCart | None:
        with self._session_factory() as session:
            row = self._working_cart_row(session, user_id)
            if row is None:
                return None
            return self._row_to_cart(row)

    def save_working_cart(
        self, user_id: str, items: list[CartItem], total_amount: float
    ) -> SavedCart | None:
        """Update the working cart, or create it when there is something to store.

        Returns None when there is no working cart and *items* is empty.
        """
        items_json = json.dumps([i.model_dump() for i in items])
        with self._session_factory() as session:
            row = self._working_cart_row(session, user_id)
            if row is not None:
                row.items_json = items_json
                row.total_amount = total_amount
                row.updated_at = _utcnow_str()
            elif items:
                row = SavedCartRow(
                    user_id=user_id,
                    items_json=items_json,
                    total_amount=total_amount,
                )
                session.add(row)
            else:
                return None
            session.commit()
            return self._row_to_cart(row)

    def create_named_cart(
        self, user_id: str, name: str, items: list[CartItem], total_amount: float
    ) -> SavedCart:
        with self._session_factory() as session:
            row = SavedCartRow(
                user_id=user_id,
                name=name,
                items_json=json.dumps([i.model_dump() for i in items]),
                total_amount=total_amount,
            )
            session.add(row)
            session.commit()
            return self._row_to_cart(row)

    def list_named_carts(self, user_id: str) -> list[SavedCart]:
        with self._session_factory() as session:
            stmt = (
                select(SavedCartRow)
                .where(SavedCartRow.user_id == user_id, SavedCartRow.name.is_not(None))
                .order_by(SavedCartRow.updated_at.desc(), SavedCartRow.id.desc())
            )
            return [self._row_to_cart(r) for r in session.scalars(stmt).all()]

    def get_named_cart(self, user_id: str, cart_id: int) -> SavedCart | None:
        with self._session_factory() as session:
            row = session.get(SavedCartRow, cart_id)
            if row is None or row.user_id != user_id or row.name is None:
                return None
            return self._row_to_cart(row)

    def delete_named_cart(self, user_id: str, cart_id: int) -> bool:
        with self._session_factory() as session:
            row = session.get(SavedCartRow, cart_id)
            if row is None or row.user_id != user_id or row.name is None:
                return False
            session.delete(row)
            session.commit()
            return True

    # --- Family ---

    def list_family_members(self, user_id: str) -> list[FamilyMember]:
        with self._session_factory() as session:
            stmt = (
                select(FamilyMemberRow)
                .where(FamilyMemberRow.user_id == user_id)
                .order_by(FamilyMemberRow.id)
            )
            return [self._row_to_member(r) for r in session.scalars(stmt).all()]

    def add_family_member(self, member: FamilyMember) -> FamilyMember:
        with self._session_factory() as session:
            row = FamilyMemberRow(
                user_id=member.user_id,
                name=member.name,
                relationship=member.relationship,
                birthdate=member.birthdate.isoformat() if member.birthdate else None,
            )
            session.add(row)
            session.commit()
            return self._row_to_member(row)

    def update_family_member(
        self,
        user_id: str,
        member_id: int,
        name: str | None = None,
        relationship: str | None = None,
        birthdate: date | None = None,
    ) -> FamilyMember | None:
        with self._session_factory() as session:
            row = session.get(FamilyMemberRow, member_id)
            if row is None or row.user_id != user_id:
                return None
            if name is not None:
                row.name = name
            if relationship is not None:
                row.relationship = relationship
            if birthdate is not None:
                row.birthdate = birthdate.isoformat()
            row.updated_at = _utcnow_str()
            session.commit()
            return self._row_to_member(row)

    def delete_family_member(self, user_id: str, member_id: int) -> bool:
        with self._session_factory() as session:
            row = session.get(FamilyMemberRow, member_id)
            if row is None or row.user_id != user_id:
                return False
            session.delete(row)
            session.commit()
            return True

    def get_family_story(self, user_id: str) -> FamilyStory | None:
        with self._session_factory() as session:
            stmt = select(FamilyStoryRow).where(FamilyStoryRow.user_id == user_id)
            row = session.scalars(stmt).first()
            if row is None:
                return None
            return self._row_to_story(row)

    def save_family_story(self, user_id: str, story: str) -> FamilyStory:
        with self._session_factory() as session:
            stmt = select(FamilyStoryRow).where(FamilyStoryRow.user_id == user_id)
            row = session.scalars(stmt).first()
            if row is not None:
                row.story = story
                row.updated_at = _utcnow_str()
            else:
                row = FamilyStoryRow(user_id=user_id, story=story)
                session.add(row)
            session.commit()
            return self._row_to_story(row)

    # --- Blog ---

    def list_posts(self, published_only: bool = True) -> list[BlogPost]:
        with self._session_factory() as session:
            stmt = select(BlogPostRow)
            if published_only:
                stmt = stmt.where(BlogPostRow.is_published.is_(True)).order_by(
                    BlogPostRow.published_at.desc(), BlogPostRow.id.desc()
                )
            else:
                stmt = stmt.order_by(BlogPostRow.updated_at.desc(), BlogPostRow.id.desc())
            return [self._row_to_post(r) for r in session.scalars(stmt).all()]

    def get_post(self, post_id: int) -> BlogPost | None:
        with self._session_factory() as session:
            row = session.get(BlogPostRow, post_id)
            if row is None:
                return None
            return self._row_to_post(row)

    def get_post_by_slug(self, slug: str) -> BlogPost | None:
        with self._session_factory() as session:
            stmt = select(BlogPostRow).where(BlogPostRow.slug == slug)
            row = session.scalars(stmt).first()
            if row is None:
                return None
            return self._row_to_post(row)

    def create_post(self, post: BlogPost) -> BlogPost:
        with self._session_factory() as session:
            row = BlogPostRow(
                author_id=post.author_id,
                title=post.title,
                slug=post.slug,
                content=post.content,
                excerpt=post.excerpt,
                featured_image=post.featured_image,
                is_published=post.is_published,
                published_at=_dt_to_str(post.published_at),
            )
            session.add(row)
            session.commit()
            return self._row_to_post(row)

    def update_post(self, post: BlogPost) -> BlogPost | None:
        if post.id is None:
            return None
        with self._session_factory() as session:
            row = session.get(BlogPostRow, post.id)
            if row is None:
                return None
            row.author_id = post.author_id
            row.title = post.title
            row.slug = post.slug
            row.content = post.content
            row.excerpt = post.excerpt
            row.featured_image = post.featured_image
            row.is_published = post.is_published
            row.published_at = _dt_to_str(post.published_at)
            row.updated_at = _utcnow_str()
            session.commit()
            return self._row_to_post(row)

    def delete_post(self, post_id: int) -> bool:
        with self._session_factory() as session:
            row = session.get(BlogPostRow, post_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True

    # --- Roles ---

    def get_roles(self, user_id: str) -> set[Role]:
        with self._session_factory() as session:
            stmt = select(UserRoleRow.role).where(UserRoleRow.user_id == user_id)
            return {Role(r) for r in session.scalars(stmt).all()}

    def grant_role(self, user_id: str, role: Role) -> None:
        with self._session_factory() as session:
            stmt = select(UserRoleRow).where(
                UserRoleRow.user_id == user_id, UserRoleRow.role == role.value
            )
            if session.scalars(stmt).first() is not None:
                return
            session.add(UserRoleRow(user_id=user_id, role=role.value))
            session.commit()

    def has_role(self, user_id: str, role: Role) -> bool:
        return role in self.get_roles(user_id)

    # --- Helpers ---

    @staticmethod
    def _working_cart_row(session: Session, user_id: str) -> SavedCartRow | None:
        stmt = (
            select(SavedCartRow)
            .where(SavedCartRow.user_id == user_id, SavedCartRow.name.is_(None))
            .order_by(SavedCartRow.updated_at.desc(), SavedCartRow.id.desc())
        )
        return session.scalars(stmt).first()

    @staticmethod
    def _parse_dt(value: str) -> datetime:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))

    @staticmethod
    def _parse_dt_opt(value: str | None) -> datetime | None:
        if value is None:
            return None
        return datetime.fromisoformat(value.replace("Z", "+00:00"))

    @staticmethod
    def _row_to_profile(row: ProfileRow) -> Profile:
        return Profile(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            avatar_url=row.avatar_url,
            created_at=Database._parse_dt(row.created_at),
            updated_at=Database._parse_dt(row.updated_at),
        )

    @staticmethod
    def _row_to_draft(row: SavedDraftRow) -> SavedDraft:
        return SavedDraft(
            id=row.id,
            user_id=row.user_id,
            title=row.title,
            conception_type=row.conception_type,
            family_structure=row.family_structure,
            child_name=row.child_name,
            child_age=row.child_age,
            used_donor_egg=bool(row.used_donor_egg),
            used_donor_sperm=bool(row.used_donor_sperm),
            used_donor_embryo=bool(row.used_donor_embryo),
            used_surrogate=bool(row.used_surrogate),
            created_at=Database._parse_dt(row.created_at),
            updated_at=Database._parse_dt(row.updated_at),
        )

    @staticmethod
    def _row_to_cart(row: SavedCartRow) -> SavedCart:
        raw_items = json.loads(row.items_json)
        if not isinstance(raw_items, list):
            raw_items = []
        return SavedCart(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            items=[CartItem.model_validate(i) for i in raw_items if isinstance(i, dict)],
            total_amount=row.total_amount,
            created_at=Database._parse_dt(row.created_at),
            updated_at=Database._parse_dt(row.updated_at),
        )

    @staticmethod
    def _row_to_member(row: FamilyMemberRow) -> FamilyMember:
        return FamilyMember(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            relationship=row.relationship,
            birthdate=date.fromisoformat(row.birthdate) if row.birthdate else None,
            created_at=Database._parse_dt(row.created_at),
            updated_at=Database._parse_dt(row.updated_at),
        )

    @staticmethod
    def _row_to_story(row: FamilyStoryRow) -> FamilyStory:
        return FamilyStory(
            id=row.id,
            user_id=row.user_id,
            story=row.story,
            created_at=Database._parse_dt(row.created_at),
            updated_at=Database._parse_dt(row.updated_at),
        )

    @staticmethod
    def _row_to_post(row: BlogPostRow) -> BlogPost:
        return BlogPost(
            id=row.id,
            author_id=row.author_id,
            title=row.title,
            slug=row.slug,
            content=row.content,
            excerpt=row.excerpt,
            featured_image=row.featured_image,
            is_published=row.is_published,
            published_at=Database._parse_dt_opt(row.published_at),
            created_at=Database._parse_dt(row.created_at),
            updated_at=Database._parse_dt(row.updated_at),
        )


def _utcnow_str() -> str:
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _dt_to_str(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
