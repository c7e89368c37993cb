"""Clients for the hosted collaborators.

Each client follows the same pattern:
- Accepts its credentials in __init__
- Exposes an `is_available` property (True when configured)
- Falls back to development/mock behaviour when not configured
- Uses httpx for real HTTP calls
"""

from littleorigins.clients.identity import IdentityClient
from littleorigins.clients.payments import PaymentClient

__all__ = [
    "IdentityClient",
    "PaymentClient",
]
