"""Authenticated Kraken operations.

Each scoped operation validates the Access first and raises
MissingScopeError without touching the network.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from twitch_kraken.core.errors import (
    FollowError,
    NoSubscriptionProgramError,
    NotSubscribedError,
    UnfollowError,
)
from twitch_kraken.models import Access, Block, Follow, Subscription, User

from .transport import decode

if TYPE_CHECKING:
    from .client import Client

logger = logging.getLogger(__name__)

SCOPE_USER_READ = "user_read"
SCOPE_USER_SUBSCRIPTIONS = "user_subscriptions"
SCOPE_USER_FOLLOWS_EDIT = "user_follows_edit"
SCOPE_USER_BLOCKS_EDIT = "user_blocks_edit"


class AccessClient:
    """A Client bound to an Access. Holds no other state."""

    def __init__(self, client: Client, access: Access):
        self._client = client
        self._access = access

    @property
    def client(self) -> Client:
        return self._client

    @property
    def access(self) -> Access:
        return self._access

    def __repr__(self) -> str:
        return f"AccessClient(client={self._client!r}, access={self._access!r})"

    async def _request(
        self, method: str, *segments: str, json: dict | None = None
    ) -> httpx.Response:
        transport = self._client.transport
        return await transport.request(
            method,
            transport.url(*segments),
            client_id=self._client.client_id,
            token=self._access.token,
            json=json,
        )

    async def get_user(self) -> User:
        """Get the user the access token belongs to."""
        self._access.validate_scope(SCOPE_USER_READ)

        response = await self._request("GET", "user")
        return decode(response, User)

    async def get_user_subscription(self, user_id: str, channel_id: str) -> Subscription:
        """Get the subscription of ``user_id`` to ``channel_id``.

        Raises NotSubscribedError (404) or NoSubscriptionProgramError (422).
        """
        self._access.validate_scope(SCOPE_USER_SUBSCRIPTIONS)

        response = await self._request("GET", "users", user_id, "subscriptions", channel_id)

        if response.status_code == 404:
            raise NotSubscribedError(user_id, channel_id)
        if response.status_code == 422:
            raise NoSubscriptionProgramError(channel_id)

        return decode(response, Subscription)

    async def follow_channel(self, user_id: str, channel_id: str, notify: bool = False) -> Follow:
        """Follow ``channel_id`` as ``user_id``; ``notify`` enables live notifications."""
        self._access.validate_scope(SCOPE_USER_FOLLOWS_EDIT)

        response = await self._request(
            "PUT",
            "users",
            user_id,
            "follows",
            "channels",
            channel_id,
            json={"notifications": notify},
        )

        if response.status_code == 422:
            raise FollowError(user_id, channel_id)

        follow = decode(response, Follow)
        logger.info(f"User {user_id} followed channel {channel_id}")
        return follow

    async def unfollow_channel(self, user_id: str, channel_id: str) -> None:
        self._access.validate_scope(SCOPE_USER_FOLLOWS_EDIT)

        response = await self._request("DELETE", "users", user_id, "follows", "channels", channel_id)

        if response.status_code != 204:
            raise UnfollowError(user_id, channel_id, response.status_code)

        logger.info(f"User {user_id} unfollowed channel {channel_id}")

    async def block_user(self, user_id: str, blocked_id: str) -> Block:
        """Add ``blocked_id`` to the block list of ``user_id``."""
        self._access.validate_scope(SCOPE_USER_BLOCKS_EDIT)

        response = await self._request("PUT", "users", user_id, "blocks", blocked_id)
        block = decode(response, Block)
        logger.info(f"User {user_id} blocked {blocked_id}")
        return block
