"""Draft saving, listing, loading and deletion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy.exc import SQLAlchemyError

from littleorigins.errors import NotFoundError, PersistenceError
from littleorigins.metrics import drafts_saved_total
from littleorigins.models.draft import SavedDraft
from littleorigins.retry import RetryExhaustedError, with_retry
from littleorigins.services.base import backend_call

if TYPE_CHECKING:
    from littleorigins.db import Database
    from littleorigins.models.account import IdentityUser
    from littleorigins.models.book import BookConfiguration

logger = structlog.get_logger()


def default_draft_title(child_name: str) -> str:
    return f"{child_name}'s Story" if child_name else "Untitled Draft"


class DraftService:
    def __init__(self, db: Database, save_retries: int = 2) -> None:
        self.db = db
        self.save_retries = save_retries

    def save_draft(
        self,
        user: IdentityUser,
        title: str | None,
        config: BookConfiguration,
    ) -> SavedDraft:
        """Persist a snapshot of *config* for *user*.

        Failed writes are retried immediately a fixed number of times.
        """
        draft = SavedDraft(
            user_id=user.backend_id,
            title=title or default_draft_title(config.child_name),
            conception_type=config.conception_type.value,
            family_structure=config.family_structure.value,
            child_name=config.child_name or None,
            child_age=config.child_age.value or None,
            used_donor_egg=config.used_donor_egg,
            used_donor_sperm=config.used_donor_sperm,
            used_donor_embryo=config.used_donor_embryo,
            used_surrogate=config.used_surrogate,
        )

        def _insert_draft() -> SavedDraft:
            return self.db.create_draft(draft)

        try:
            saved = with_retry(
                _insert_draft,
                max_retries=self.save_retries,
                base_delay=0.0,
                jitter=False,
                retryable=(SQLAlchemyError,),
            )
        except RetryExhaustedError as exc:
            logger.error("Draft save failed", user_id=user.backend_id, error=str(exc.__cause__))
            raise PersistenceError("Failed to save draft") from exc

        drafts_saved_total.inc()
        logger.info("Draft saved", user_id=user.backend_id, draft_id=saved.id)
        return saved

    def list_drafts(self, user: IdentityUser) -> list[SavedDraft]:
        with backend_call("load drafts", user_id=user.backend_id):
            return self.db.list_drafts(user.backend_id)

    def get_draft(self, user: IdentityUser, draft_id: int) -> SavedDraft:
        with backend_call("load draft", user_id=user.backend_id):
            draft = self.db.get_draft(user.backend_id, draft_id)
        if draft is None:
            raise NotFoundError(f"Draft {draft_id} not found")
        return draft

    def load_draft(self, user: IdentityUser, draft_id: int) -> BookConfiguration:
        return self.get_draft(user, draft_id).to_configuration()

    def delete_draft(self, user: IdentityUser, draft_id: int) -> None:
        with backend_call("delete draft", user_id=user.backend_id):
            deleted = self.db.delete_draft(user.backend_id, draft_id)
        if not deleted:
            raise NotFoundError(f"Draft {draft_id} not found")
        logger.info("Draft deleted", user_id=user.backend_id, draft_id=draft_id)
