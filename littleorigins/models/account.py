"""Identity, profile and family models."""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from littleorigins.identity import to_backend_user_id


class Role(StrEnum):
    ADMIN = "admin"
    AUTHOR = "author"
    USER = "user"


class IdentityUser(BaseModel):
    """The signed-in user as reported by the identity provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None

    @property
    def backend_id(self) -> str:
        """Key for this user's rows in the data backend."""
        return to_backend_user_id(self.id)


class Profile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str | None = None
    last_name: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FamilyMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    user_id: str
    name: str = Field(min_length=1)
    relationship: str = Field(min_length=1)
    birthdate: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FamilyStory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    user_id: str
    story: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
