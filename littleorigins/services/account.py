"""Profile synchronization and family details."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from littleorigins.errors import NotFoundError
from littleorigins.models.account import FamilyMember, Profile
from littleorigins.services.base import backend_call

if TYPE_CHECKING:
    from datetime import date

    from littleorigins.db import Database
    from littleorigins.models.account import FamilyStory, IdentityUser

logger = structlog.get_logger()


class AccountService:
    def __init__(self, db: Database) -> None:
        self.db = db

    def ensure_profile(self, user: IdentityUser) -> Profile:
        """Make sure *user* has a profile that matches the identity provider.

        Creates the profile on first sight. Afterwards, first name, last name
        and avatar are copied over only when they differ.
        """
        uid = user.backend_id
        with backend_call("load profile", user_id=uid):
            existing = self.db.get_profile(uid)

            if existing is None:
                logger.info("Creating profile", user_id=uid)
                return self.db.create_profile(
                    Profile(
                        id=uid,
                        first_name=user.first_name,
                        last_name=user.last_name,
                        avatar_url=user.image_url,
                    )
                )

            if (
                existing.first_name != user.first_name
                or existing.last_name != user.last_name
                or existing.avatar_url != user.image_url
            ):
                logger.info("Synchronizing profile", user_id=uid)
                updated = self.db.update_profile(
                    uid,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    avatar_url=user.image_url,
                    update_avatar=True,
                )
                if updated is not None:
                    return updated

        return existing

    def get_profile(self, user: IdentityUser) -> Profile:
        """Read the profile, creating it on first sight. Existing values are kept."""
        with backend_call("load profile", user_id=user.backend_id):
            existing = self.db.get_profile(user.backend_id)
        if existing is not None:
            return existing
        return self.ensure_profile(user)

    def update_profile(
        self, user: IdentityUser, first_name: str | None, last_name: str | None
    ) -> Profile:
        self.get_profile(user)
        with backend_call("update profile", user_id=user.backend_id):
            profile = self.db.update_profile(
                user.backend_id, first_name=first_name or None, last_name=last_name or None
            )
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    # --- Family members ---

    def list_family_members(self, user: IdentityUser) -> list[FamilyMember]:
        with backend_call("load family members", user_id=user.backend_id):
            return self.db.list_family_members(user.backend_id)

    def add_family_member(
        self,
        user: IdentityUser,
        name: str,
        relationship: str,
        birthdate: date | None = None,
    ) -> FamilyMember:
        member = FamilyMember(
            user_id=user.backend_id, name=name, relationship=relationship, birthdate=birthdate
        )
        with backend_call("add family member", user_id=user.backend_id):
            return self.db.add_family_member(member)

    def update_family_member(
        self,
        user: IdentityUser,
        member_id: int,
        name: str | None = None,
        relationship: str | None = None,
        birthdate: date | None = None,
    ) -> FamilyMember:
        with backend_call("update family member", user_id=user.backend_id):
            member = self.db.update_family_member(
                user.backend_id, member_id, name, relationship, birthdate
            )
        if member is None:
            raise NotFoundError(f"Family member {member_id} not found")
        return member

    def delete_family_member(self, user: IdentityUser, member_id: int) -> None:
        with backend_call("delete family member", user_id=user.backend_id):
            deleted = self.db.delete_family_member(user.backend_id, member_id)
        if not deleted:
            raise NotFoundError(f"Family member {member_id} not found")

    # --- Family story ---

    def get_family_story(self, user: IdentityUser) -> FamilyStory | None:
        with backend_call("load family story", user_id=user.backend_id):
            return self.db.get_family_story(user.backend_id)

    def save_family_story(self, user: IdentityUser, story: str) -> FamilyStory:
        with backend_call("save family story", user_id=user.backend_id):
            return self.db.save_family_story(user.backend_id, story)
