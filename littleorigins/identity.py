"""Identity helpers: backend user keys and password strength scoring."""

from __future__ import annotations

import re
import uuid
from typing import TypedDict

# Fixed namespace so the same identity user always maps to the same backend key
_USER_NAMESPACE = uuid.UUID("6f1c2a4e-3b7d-5e9a-8c10-4d2f6b8a9e01")

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

_SPECIAL_RE = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")


def to_backend_user_id(identity_user_id: str) -> str:
    """Map an identity provider user id to the data backend's UUID key.

    The mapping is deterministic and one-way (UUIDv5 over SHA-1). Ids that
    are already UUIDs pass through in canonical lower-case form.
    """
    if _UUID_RE.match(identity_user_id):
        return identity_user_id.lower()
    return str(uuid.uuid5(_USER_NAMESPACE, identity_user_id))


class PasswordStrength(TypedDict):
    length: bool
    uppercase: bool
    lowercase: bool
    number: bool
    special: bool
    score: int
    label: str
    is_strong: bool


def _strength_label(score: int) -> str:
    if score >= 4:
        return "Strong"
    if score >= 3:
        return "Good"
    if score >= 2:
        return "Fair"
    return "Weak"


def check_password_strength(password: str) -> PasswordStrength:
    """Score a password against the sign-up form's five criteria.

    One point each for: at least 8 characters, an uppercase letter, a
    lowercase letter, a digit, a special character. A score of 3 or more
    counts as strong enough to submit.
    """
    checks = {
        "length": len(password) >= 8,
        "uppercase": re.search(r"[A-Z]", password) is not None,
        "lowercase": re.search(r"[a-z]", password) is not None,
        "number": re.search(r"[0-9]", password) is not None,
        "special": _SPECIAL_RE.search(password) is not None,
    }
    score = sum(checks.values())
    return {
        "length": checks["length"],
        "uppercase": checks["uppercase"],
        "lowercase": checks["lowercase"],
        "number": checks["number"],
        "special": checks["special"],
        "score": score,
        "label": _strength_label(score),
        "is_strong": score >= 3,
    }
