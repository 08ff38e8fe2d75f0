"""Dependency injection utilities for the demo server"""

import logging

from fastapi import HTTPException

from twitch_kraken.core.config import get_settings
from twitch_kraken.models import Access, new_access
from twitch_kraken.services import AccessClient, Client

logger = logging.getLogger(__name__)


# ============================================
# Client
# ============================================


_client: Client | None = None


def get_client() -> Client:
    """Get shared Client singleton (connection reuse)."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = Client(
            settings.client_id,
            settings.client_secret,
            settings.redirect_uri,
            settings.client_config(),
        )
    return _client


async def close_client() -> None:
    """Close the shared Client. Call on app shutdown."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None


# ============================================
# Access
# ============================================


class AccessStore:
    """Holds the most recent Access obtained by the server."""

    def __init__(self, access: Access | None = None):
        self.access = access

    def handle_access(self, access: Access | None, error: Exception | None) -> None:
        """Callback for Client.handle_authorization."""
        if error is not None:
            logger.error(f"Failed to get access: {error}")
            return

        self.access = access
        logger.info(f"Got access: {access}")


_access_store: AccessStore | None = None


def get_access_store() -> AccessStore:
    global _access_store
    if _access_store is None:
        settings = get_settings()
        initial = None
        if settings.access_token:
            initial = new_access(settings.access_token, settings.scopes)
            logger.info("Using access token from settings")
        _access_store = AccessStore(initial)
    return _access_store


def reset_access_store() -> None:
    global _access_store
    _access_store = None


def get_access_client() -> AccessClient:
    """Client bound to the stored Access, 401 when nobody has authorized yet."""
    access = get_access_store().access
    if access is None:
        logger.warning("No access available, authorize via / first")
        raise HTTPException(status_code=401, detail="Not authorized")
    return get_client().with_access(access)
