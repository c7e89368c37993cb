"""Account endpoints: profile, family members, family story."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from littleorigins.api.deps import AccountServiceDep, CurrentUserDep
from littleorigins.api.schemas import (
    ActionResponse,
    FamilyMemberRequest,
    FamilyMemberResponse,
    FamilyMemberUpdateRequest,
    FamilyStoryRequest,
    FamilyStoryResponse,
    ProfileResponse,
    ProfileUpdateRequest,
)

if TYPE_CHECKING:
    from littleorigins.models.account import FamilyMember, IdentityUser, Profile

router = APIRouter(prefix="/account", tags=["account"])


def _profile_to_response(profile: Profile, user: IdentityUser) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        avatar_url=profile.avatar_url,
        email=user.email,
        updated_at=str(profile.updated_at) if profile.updated_at else None,
    )


def _member_to_response(member: FamilyMember) -> FamilyMemberResponse:
    assert member.id is not None
    return FamilyMemberResponse(
        id=member.id,
        name=member.name,
        relationship=member.relationship,
        birthdate=member.birthdate,
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(user: CurrentUserDep, accounts: AccountServiceDep) -> ProfileResponse:
    return _profile_to_response(accounts.get_profile(user), user)


@router.post("/profile/sync", response_model=ProfileResponse)
def sync_profile(user: CurrentUserDep, accounts: AccountServiceDep) -> ProfileResponse:
    """Called after sign-in: copy name and avatar from the identity provider."""
    return _profile_to_response(accounts.ensure_profile(user), user)


@router.patch("/profile", response_model=ProfileResponse)
def update_profile(
    body: ProfileUpdateRequest, user: CurrentUserDep, accounts: AccountServiceDep
) -> ProfileResponse:
    profile = accounts.update_profile(user, body.first_name, body.last_name)
    return _profile_to_response(profile, user)


@router.get("/family-members", response_model=list[FamilyMemberResponse])
def list_family_members(
    user: CurrentUserDep, accounts: AccountServiceDep
) -> list[FamilyMemberResponse]:
    return [_member_to_response(m) for m in accounts.list_family_members(user)]


@router.post("/family-members", response_model=FamilyMemberResponse, status_code=201)
def add_family_member(
    body: FamilyMemberRequest, user: CurrentUserDep, accounts: AccountServiceDep
) -> FamilyMemberResponse:
    member = accounts.add_family_member(user, body.name, body.relationship, body.birthdate)
    return _member_to_response(member)


@router.patch("/family-members/{member_id}", response_model=FamilyMemberResponse)
def update_family_member(
    member_id: int,
    body: FamilyMemberUpdateRequest,
    user: CurrentUserDep,
    accounts: AccountServiceDep,
) -> FamilyMemberResponse:
    member = accounts.update_family_member(
        user, member_id, body.name, body.relationship, body.birthdate
    )
    return _member_to_response(member)


@router.delete("/family-members/{member_id}", response_model=ActionResponse)
def delete_family_member(
    member_id: int, user: CurrentUserDep, accounts: AccountServiceDep
) -> ActionResponse:
    accounts.delete_family_member(user, member_id)
    return ActionResponse(message=f"Family member {member_id} deleted")


@router.get("/family-story", response_model=FamilyStoryResponse)
def get_family_story(user: CurrentUserDep, accounts: AccountServiceDep) -> FamilyStoryResponse:
    story = accounts.get_family_story(user)
    if story is None:
        return FamilyStoryResponse(story="")
    return FamilyStoryResponse(story=story.story, updated_at=str(story.updated_at))


@router.put("/family-story", response_model=FamilyStoryResponse)
def save_family_story(
    body: FamilyStoryRequest, user: CurrentUserDep, accounts: AccountServiceDep
) -> FamilyStoryResponse:
    story = accounts.save_family_story(user, body.story)
    return FamilyStoryResponse(story=story.story, updated_at=str(story.updated_at))
