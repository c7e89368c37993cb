"""Sign-up helpers. Sign-in itself happens on the identity provider's pages."""

from __future__ import annotations

from fastapi import APIRouter

from littleorigins.api.schemas import PasswordStrengthRequest, PasswordStrengthResponse
from littleorigins.identity import check_password_strength

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/password-strength", response_model=PasswordStrengthResponse)
def password_strength(body: PasswordStrengthRequest) -> PasswordStrengthResponse:
    return PasswordStrengthResponse(**check_password_strength(body.password))
