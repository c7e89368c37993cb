"""Tests for profile synchronization and family details."""

from __future__ import annotations

from datetime import date

import pytest

from littleorigins.db import Database
from littleorigins.errors import NotFoundError
from littleorigins.models.account import IdentityUser
from littleorigins.services.account import AccountService


class TestProfileSync:
    def test_created_on_first_sight(self, db: Database, user: IdentityUser) -> None:
        profile = AccountService(db).ensure_profile(user)
        assert profile.id == user.backend_id
        assert profile.first_name == "Alex"
        assert profile.avatar_url == "https://img.example.com/alex.png"
        assert db.get_profile(user.backend_id) is not None

    def test_unchanged_profile_not_rewritten(self, db: Database, user: IdentityUser) -> None:
        service = AccountService(db)
        first = service.ensure_profile(user)
        second = service.ensure_profile(user)
        assert second.updated_at == first.updated_at

    def test_changed_fields_synchronized(self, db: Database, user: IdentityUser) -> None:
        service = AccountService(db)
        service.ensure_profile(user)
        renamed = user.model_copy(update={"last_name": "Rivera-Chen", "image_url": None})
        profile = service.ensure_profile(renamed)
        assert profile.last_name == "Rivera-Chen"
        assert profile.avatar_url is None

    def test_update_profile(self, db: Database, user: IdentityUser) -> None:
        profile = AccountService(db).update_profile(user, "Sam", "")
        assert profile.first_name == "Sam"
        assert profile.last_name is None
        assert profile.avatar_url == "https://img.example.com/alex.png"

    def test_edits_survive_reads(self, db: Database, user: IdentityUser) -> None:
        service = AccountService(db)
        service.update_profile(user, "Sam", "Rivera")
        assert service.get_profile(user).first_name == "Sam"
        assert service.ensure_profile(user).first_name == "Alex"


class TestFamilyMembers:
    def test_crud(self, db: Database, user: IdentityUser) -> None:
        service = AccountService(db)
        member = service.add_family_member(user, "Mia", "Daughter", date(2021, 4, 2))
        assert [m.name for m in service.list_family_members(user)] == ["Mia"]

        updated = service.update_family_member(user, member.id, name="Mia Rose")
        assert updated.name == "Mia Rose"
        assert updated.birthdate == date(2021, 4, 2)

        service.delete_family_member(user, member.id)
        assert service.list_family_members(user) == []

    def test_other_users_member_not_found(
        self, db: Database, user: IdentityUser, other_user: IdentityUser
    ) -> None:
        service = AccountService(db)
        member = service.add_family_member(user, "Mia", "Daughter")
        with pytest.raises(NotFoundError):
            service.update_family_member(other_user, member.id, name="X")
        with pytest.raises(NotFoundError):
            service.delete_family_member(other_user, member.id)

    def test_blank_name_rejected(self, db: Database, user: IdentityUser) -> None:
        with pytest.raises(ValueError):
            AccountService(db).add_family_member(user, "", "Daughter")


class TestFamilyStory:
    def test_save_and_get(self, db: Database, user: IdentityUser) -> None:
        service = AccountService(db)
        assert service.get_family_story(user) is None
        service.save_family_story(user, "We waited a long time for you.")
        story = service.get_family_story(user)
        assert story is not None
        assert story.story == "We waited a long time for you."
