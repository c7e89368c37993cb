"""API request/response schemas (separate from domain models)."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from littleorigins.models.book import BookConfiguration, BookOption, Page
from littleorigins.models.cart import CartItem
from littleorigins.models.checkout import ShippingDetails

# --- Responses ---


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    version: str
    db_connected: bool


class ConfigCheckResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    configured: dict[str, bool]


class BookOptionsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    family_structure: list[BookOption]
    conception_type: list[BookOption]
    child_age: list[BookOption]
    defaults: BookConfiguration


class PreviewResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    configuration: BookConfiguration
    pages: list[Page]


class PasswordStrengthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: bool
    uppercase: bool
    lowercase: bool
    number: bool
    special: bool
    score: int
    label: str
    is_strong: bool


class CartResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: list[CartItem]
    total: float
    count: int


class SavedCartResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str | None
    items: list[CartItem]
    total_amount: float
    created_at: str
    updated_at: str


class DraftResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    configuration: BookConfiguration
    created_at: str
    updated_at: str


class DraftListResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    drafts: list[DraftResponse]
    total: int


class ProfileResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str | None
    last_name: str | None
    avatar_url: str | None
    email: str | None = None
    updated_at: str | None = None


class FamilyMemberResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    relationship: str
    birthdate: date | None


class FamilyStoryResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    story: str
    updated_at: str | None = None


class BlogPostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    slug: str
    excerpt: str | None
    featured_image: str | None
    published_at: str | None


class BlogPostResponse(BlogPostSummary):
    content: str
    author_id: str
    is_published: bool
    updated_at: str


class ColoringPageResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    image_url: str


class PaletteResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    colors: list[str]
    default_color: str
    default_brush_size: int
    min_brush_size: int
    max_brush_size: int


class CheckoutSessionResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    url: str


class ActionResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str


# --- Requests ---


class PasswordStrengthRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    password: str


class SaveCartRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=120)


class SaveDraftRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = Field(default=None, max_length=200)
    configuration: BookConfiguration = Field(default_factory=BookConfiguration)


class ProfileUpdateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str | None = None
    last_name: str | None = None


class FamilyMemberRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    relationship: str = Field(min_length=1)
    birthdate: date | None = None


class FamilyMemberUpdateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, min_length=1)
    relationship: str | None = Field(default=None, min_length=1)
    birthdate: date | None = None


class FamilyStoryRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    story: str


class BlogPostRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    slug: str = ""
    excerpt: str | None = None
    featured_image: str | None = None
    is_published: bool = False


class CheckoutSessionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Empty means the signed-in user's working cart
    items: list[CartItem] = Field(default_factory=list)


class CheckoutConfirmRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    payment_method_id: str
    shipping: ShippingDetails
    items: list[CartItem] = Field(default_factory=list)

