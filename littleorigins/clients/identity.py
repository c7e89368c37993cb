"""Client for the hosted identity provider.

Sign-in, sign-up and sign-out happen on the provider's hosted pages. The
storefront only turns a bearer session token into the current user, via the
provider's Frontend API ``GET /v1/me`` endpoint.
"""

from __future__ import annotations

import httpx
import structlog

from littleorigins.errors import IdentityUnavailableError
from littleorigins.models.account import IdentityUser

logger = structlog.get_logger()

_NO_USER_STATUSES = {401, 403, 404}
_MALFORMED = "Identity provider returned a malformed response"


class IdentityClient:
    """Identity provider client. Runs in development mode when no URL is configured.

    In development mode the bearer token is taken as the user id itself, so
    local tools and tests can act as any user without a provider account.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.timeout = timeout

    @property
    def is_available(self) -> bool:
        return bool(self.base_url)

    def get_current_user(self, token: str) -> IdentityUser | None:
        """Resolve a session token to the signed-in user.

        Returns None when the token is empty, expired or rejected.
        Raises IdentityUnavailableError when the provider cannot be reached.
        """
        if not token:
            return None
        if not self.is_available:
            logger.debug("Identity provider not configured, using token as user id")
            return IdentityUser(id=token)

        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(
                    f"{self.base_url}/v1/me",
                    headers={"Authorization": f"Bearer {token}"},
                )
                if resp.status_code in _NO_USER_STATUSES:
                    logger.info("Identity provider rejected session", status=resp.status_code)
                    return None
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as exc:
            logger.warning("Identity provider error", error=str(exc))
            raise IdentityUnavailableError("Identity provider unavailable") from exc
        except ValueError as exc:
            logger.warning("Identity provider returned invalid JSON", error=str(exc))
            raise IdentityUnavailableError(_MALFORMED) from exc

        if not isinstance(data, dict):
            logger.warning("Identity provider returned non-object body", body=type(data).__name__)
            raise IdentityUnavailableError(_MALFORMED)

        # Some deployments wrap the user object in {"response": {...}}
        payload = data.get("response", data)
        if not isinstance(payload, dict) or not payload.get("id"):
            return None
        return IdentityUser(
            id=str(payload["id"]),
            email=_primary_email(payload),
            first_name=_opt_str(payload.get("first_name")),
            last_name=_opt_str(payload.get("last_name")),
            image_url=_opt_str(payload.get("image_url")),
        )


def _opt_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _primary_email(payload: dict[str, object]) -> str | None:
    addresses = payload.get("email_addresses")
    if not isinstance(addresses, list):
        return None
    primary_id = payload.get("primary_email_address_id")
    for entry in addresses:
        if isinstance(entry, dict) and (primary_id is None or entry.get("id") == primary_id):
            return _opt_str(entry.get("email_address"))
    return None
