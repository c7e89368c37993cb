"""Domain exceptions mapped to HTTP responses by the API error handlers."""

from __future__ import annotations


class NotFoundError(LookupError):
    """A requested record does not exist or is not owned by the caller."""


class AuthenticationError(Exception):
    """No signed-in user for an operation that needs one."""


class PermissionDeniedError(Exception):
    """The signed-in user lacks the role an operation requires."""


class PersistenceError(Exception):
    """The data backend rejected or failed a write. Safe for the user to retry."""


class PaymentError(Exception):
    """Payment details could not be tokenized or accepted."""


class IdentityUnavailableError(Exception):
    """The identity provider could not be reached."""
