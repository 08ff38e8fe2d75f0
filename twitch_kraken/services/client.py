"""Kraken API client.

Token flow:
- ``authorize`` redirects the user to Twitch to grant scopes.
- Twitch redirects back to ``redirect_uri`` with a ``code``;
  ``handle_authorization`` (or ``exchange_code``) turns it into an Access.
- ``with_access`` binds that Access for authenticated calls.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from urllib.parse import urlencode

import httpx
from fastapi import Request
from fastapi.responses import RedirectResponse, Response

from twitch_kraken.core.config import ClientConfig
from twitch_kraken.core.errors import (
    AuthorizationDeniedError,
    DecodeError,
    NotFollowingError,
    RequestConstructionError,
    TwitchError,
)
from twitch_kraken.models import Access, Follow, Follows, User, Users

from .access_client import AccessClient
from .transport import Transport, decode

logger = logging.getLogger(__name__)

MAX_LOGINS = 100

AccessCallback = Callable[[Access | None, Exception | None], Awaitable[None] | None]


class Client:
    """Application credentials plus the transport used for every call.

    Shares one ``httpx.AsyncClient`` across all calls, including those made
    through ``AccessClient`` instances derived from it.
    """

    def __init__(
        self,
        client_id: str,
        secret: str,
        redirect_uri: str,
        config: ClientConfig | None = None,
        *,
        http: httpx.AsyncClient | None = None,
    ):
        self._client_id = client_id
        self._secret = secret
        self._redirect_uri = redirect_uri
        self._config = config or ClientConfig()
        self.transport = Transport(self._config, http)

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def redirect_uri(self) -> str:
        return self._redirect_uri

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def close(self) -> None:
        """Close the shared HTTP client. Call on app shutdown."""
        await self.transport.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"Client(client_id={self._client_id!r}, redirect_uri={self._redirect_uri!r})"

    def with_access(self, access: Access) -> AccessClient:
        """Bind an Access for authenticated calls."""
        return AccessClient(self, access)

    # ------------------------------------------------------------------
    # OAuth flow
    # ------------------------------------------------------------------

    def get_authorize_url(self, scopes: list[str] | tuple[str, ...]) -> str:
        """Twitch authorization URL requesting ``scopes`` (space-joined, in order)."""
        query = urlencode(
            {
                "client_id": self._client_id,
                "redirect_uri": self._redirect_uri,
                "response_type": "code",
                "scope": " ".join(scopes),
            }
        )
        return f"{self.transport.url('oauth2', 'authorize')}?{query}"

    def authorize(self, *scopes: str) -> Callable[[], Awaitable[RedirectResponse]]:
        """Request handler that redirects (302) the user to Twitch for authorization."""
        auth_url = self.get_authorize_url(scopes)

        async def authorize_endpoint() -> RedirectResponse:
            return RedirectResponse(url=auth_url, status_code=302)

        return authorize_endpoint

    async def exchange_code(self, code: str) -> Access:
        """Exchange an authorization code for an Access.

        Credentials travel as query parameters on a bodyless POST.
        """
        if not code:
            raise RequestConstructionError("No authorization code to exchange")

        params = {
            "client_id": self._client_id,
            "client_secret": self._secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self._redirect_uri,
        }
        response = await self.transport.post(self.transport.url("oauth2", "token"), params=params)

        try:
            access = decode(response, Access)
        except DecodeError:
            logger.error(f"Failed to exchange code: {response.status_code}")
            raise

        logger.info(f"Exchanged code for access with scope {list(access.scope)}")
        return access

    def handle_authorization(
        self, handle_access: AccessCallback
    ) -> Callable[[Request], Awaitable[Response]]:
        """Request handler for the OAuth redirect URI.

        Reads ``code`` from the query string, exchanges it and calls
        ``handle_access(access, error)`` with exactly one of them set.
        ``handle_access`` may be a plain or a coroutine function.
        """

        async def authorization_endpoint(request: Request) -> Response:
            query = request.query_params
            access: Access | None = None
            error: Exception | None = None

            if query.get("error"):
                error = AuthorizationDeniedError(query["error"], query.get("error_description"))
            else:
                try:
                    access = await self.exchange_code(query.get("code", ""))
                except TwitchError as e:
                    error = e

            if error is not None:
                logger.error(f"Authorization failed: {error}")

            result = handle_access(access, error)
            if inspect.isawaitable(result):
                await result

            return Response(status_code=200 if access is not None else 400)

        return authorization_endpoint

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def _get(self, *segments: str, params: dict | None = None) -> httpx.Response:
        return await self.transport.get(
            self.transport.url(*segments), client_id=self._client_id, params=params
        )

    async def get_user_by_id(self, user_id: str) -> User:
        """Get a user by ID."""
        response = await self._get("users", user_id)
        return decode(response, User)

    async def get_users_by_name(self, *names: str) -> list[User]:
        """Look up up to 100 users by login name. Users that don't exist are left out."""
        if not names:
            raise RequestConstructionError("At least one login name is required")
        if len(names) > MAX_LOGINS:
            raise RequestConstructionError(
                f"At most {MAX_LOGINS} login names per request, got {len(names)}"
            )
        # names are sent comma-joined in a single query parameter
        for name in names:
            if not name or "," in name:
                raise RequestConstructionError(f"Invalid login name: {name!r}")

        response = await self._get("users", params={"login": ",".join(names)})
        return decode(response, Users).users

    # ------------------------------------------------------------------
    # Follows
    # ------------------------------------------------------------------

    async def get_user_follows(self, user_id: str, limit: int = 25, offset: int = 0) -> Follows:
        """Channels followed by a user, one page at a time."""
        response = await self._get(
            "users", user_id, "follows", "channels", params={"limit": limit, "offset": offset}
        )
        return decode(response, Follows)

    async def check_user_follows_channel(self, user_id: str, channel_id: str) -> Follow:
        """Return the Follow if ``user_id`` follows ``channel_id``, else raise NotFollowingError."""
        response = await self._get("users", user_id, "follows", "channels", channel_id)

        if response.status_code == 404:
            raise NotFollowingError(user_id, channel_id)

        return decode(response, Follow)
