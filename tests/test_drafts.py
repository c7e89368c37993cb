"""Tests for draft saving and loading."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from littleorigins.db import Database
from littleorigins.errors import NotFoundError, PersistenceError
from littleorigins.models.account import IdentityUser
from littleorigins.models.book import BookConfiguration
from littleorigins.models.draft import SavedDraft
from littleorigins.services.drafts import DraftService, default_draft_title


def _locked() -> OperationalError:
    return OperationalError("INSERT", {}, Exception("database is locked"))


class TestDefaultTitle:
    def test_with_name(self) -> None:
        assert default_draft_title("Mia") == "Mia's Story"

    def test_without_name(self) -> None:
        assert default_draft_title("") == "Untitled Draft"


class TestDraftService:
    def test_save_and_load(
        self, db: Database, user: IdentityUser, sample_config: BookConfiguration
    ) -> None:
        service = DraftService(db)
        saved = service.save_draft(user, None, sample_config)
        assert saved.title == "Mia's Story"
        assert saved.user_id == user.backend_id
        assert service.load_draft(user, saved.id) == sample_config

    def test_explicit_title(self, db: Database, user: IdentityUser) -> None:
        saved = DraftService(db).save_draft(user, "Bedtime version", BookConfiguration())
        assert saved.title == "Bedtime version"

    def test_blank_name_untitled(self, db: Database, user: IdentityUser) -> None:
        saved = DraftService(db).save_draft(user, "", BookConfiguration())
        assert saved.title == "Untitled Draft"
        assert saved.child_name is None

    def test_list_only_own(
        self,
        db: Database,
        user: IdentityUser,
        other_user: IdentityUser,
        sample_config: BookConfiguration,
    ) -> None:
        service = DraftService(db)
        service.save_draft(user, None, sample_config)
        service.save_draft(other_user, None, sample_config)
        assert len(service.list_drafts(user)) == 1

    def test_get_other_users_draft(
        self,
        db: Database,
        user: IdentityUser,
        other_user: IdentityUser,
        sample_config: BookConfiguration,
    ) -> None:
        service = DraftService(db)
        saved = service.save_draft(user, None, sample_config)
        with pytest.raises(NotFoundError):
            service.get_draft(other_user, saved.id)

    def test_delete(
        self, db: Database, user: IdentityUser, sample_config: BookConfiguration
    ) -> None:
        service = DraftService(db)
        saved = service.save_draft(user, None, sample_config)
        service.delete_draft(user, saved.id)
        assert service.list_drafts(user) == []
        with pytest.raises(NotFoundError):
            service.delete_draft(user, saved.id)


class TestDraftSaveRetry:
    def test_recovers_after_transient_failure(
        self,
        db: Database,
        user: IdentityUser,
        sample_config: BookConfiguration,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        real_create = db.create_draft
        calls = {"count": 0}

        def flaky(draft: SavedDraft) -> SavedDraft:
            calls["count"] += 1
            if calls["count"] < 3:
                raise _locked()
            return real_create(draft)

        monkeypatch.setattr(db, "create_draft", flaky)
        saved = DraftService(db, save_retries=2).save_draft(user, None, sample_config)
        assert saved.id is not None
        assert calls["count"] == 3

    def test_exhausted_raises_persistence_error(
        self,
        db: Database,
        user: IdentityUser,
        sample_config: BookConfiguration,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        calls = {"count": 0}

        def always_locked(_draft: SavedDraft) -> SavedDraft:
            calls["count"] += 1
            raise _locked()

        monkeypatch.setattr(db, "create_draft", always_locked)
        with pytest.raises(PersistenceError, match="save draft"):
            DraftService(db, save_retries=2).save_draft(user, None, sample_config)
        assert calls["count"] == 3
        assert DraftService(db).list_drafts(user) == []
