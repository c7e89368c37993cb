"""Saved draft endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from littleorigins.api.deps import CurrentUserDep, DraftServiceDep
from littleorigins.api.schemas import (
    ActionResponse,
    DraftListResponse,
    DraftResponse,
    SaveDraftRequest,
)

if TYPE_CHECKING:
    from littleorigins.models.draft import SavedDraft

router = APIRouter(prefix="/drafts", tags=["drafts"])


def _draft_to_response(draft: SavedDraft) -> DraftResponse:
    assert draft.id is not None
    return DraftResponse(
        id=draft.id,
        title=draft.title,
        configuration=draft.to_configuration(),
        created_at=str(draft.created_at),
        updated_at=str(draft.updated_at),
    )


@router.get("", response_model=DraftListResponse)
def list_drafts(user: CurrentUserDep, drafts: DraftServiceDep) -> DraftListResponse:
    items = drafts.list_drafts(user)
    return DraftListResponse(drafts=[_draft_to_response(d) for d in items], total=len(items))


@router.post("", response_model=DraftResponse, status_code=201)
def save_draft(
    body: SaveDraftRequest, user: CurrentUserDep, drafts: DraftServiceDep
) -> DraftResponse:
    saved = drafts.save_draft(user, body.title, body.configuration)
    return _draft_to_response(saved)


@router.get("/{draft_id}", response_model=DraftResponse)
def get_draft(draft_id: int, user: CurrentUserDep, drafts: DraftServiceDep) -> DraftResponse:
    return _draft_to_response(drafts.get_draft(user, draft_id))


@router.delete("/{draft_id}", response_model=ActionResponse)
def delete_draft(draft_id: int, user: CurrentUserDep, drafts: DraftServiceDep) -> ActionResponse:
    drafts.delete_draft(user, draft_id)
    return ActionResponse(message=f"Draft {draft_id} deleted")
