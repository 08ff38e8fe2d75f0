"""
Tests for the OAuth2 authorization-code flow
"""
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from starlette.requests import Request

from twitch_kraken import (
    Access,
    AuthorizationDeniedError,
    Client,
    ClientConfig,
    DecodeError,
    RequestConstructionError,
    TransportError,
)

from .conftest import ALL_SCOPES

TOKEN_RESPONSE = {
    "access_token": "fresh_token",
    "refresh_token": "refresh",
    "expires_in": 14124,
    "scope": ["user_read", "user_subscriptions"],
}


def make_request(query_string: bytes) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/authorized",
            "query_string": query_string,
            "headers": [],
        }
    )


class Recorder:
    """Callback collecting (access, error) pairs"""

    def __init__(self):
        self.calls: list[tuple[Access | None, Exception | None]] = []

    def __call__(self, access, error):
        self.calls.append((access, error))


class TestAuthorizeURL:

    def test_contains_exactly_the_oauth_parameters(self, client):
        url = client.get_authorize_url(ALL_SCOPES)
        parts = urlsplit(url)
        query = parse_qs(parts.query)

        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://api.twitch.tv/kraken/oauth2/authorize"
        )
        assert set(query) == {"client_id", "redirect_uri", "response_type", "scope"}
        assert query["client_id"] == ["test_client_id"]
        assert query["redirect_uri"] == ["http://localhost:8080/authorized"]
        assert query["response_type"] == ["code"]
        assert query["scope"] == [" ".join(ALL_SCOPES)]

    def test_scopes_keep_input_order(self, client):
        url = client.get_authorize_url(["user_read", "openid", "user_blocks_edit"])
        query = parse_qs(urlsplit(url).query)
        assert query["scope"] == ["user_read openid user_blocks_edit"]

    def test_follows_configured_base_uri(self, http):
        client = Client(
            "cid", "secret", "http://localhost/cb",
            ClientConfig(base_uri="http://localhost:9000/kraken"),
            http=http,
        )
        assert client.get_authorize_url(["user_read"]).startswith(
            "http://localhost:9000/kraken/oauth2/authorize?"
        )

    @pytest.mark.asyncio
    async def test_authorize_handler_redirects_302(self, client, kraken):
        endpoint = client.authorize("user_read", "user_follows_edit")

        response = await endpoint()

        assert response.status_code == 302
        location = response.headers["location"]
        assert parse_qs(urlsplit(location).query)["scope"] == ["user_read user_follows_edit"]
        assert kraken.calls == 0


class TestExchangeCode:

    @pytest.mark.asyncio
    async def test_request_shape(self, client, kraken):
        kraken.add("POST", "/oauth2/token", json=TOKEN_RESPONSE)

        await client.exchange_code("auth_code")

        request = kraken.last
        assert request.method == "POST"
        assert request.url.path == "/kraken/oauth2/token"
        assert dict(request.url.params) == {
            "client_id": "test_client_id",
            "client_secret": "test_secret",
            "code": "auth_code",
            "grant_type": "authorization_code",
            "redirect_uri": "http://localhost:8080/authorized",
        }
        assert request.content == b""
        assert "Client-ID" not in request.headers
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_decodes_access(self, client, kraken):
        kraken.add("POST", "/oauth2/token", json=TOKEN_RESPONSE)

        access = await client.exchange_code("auth_code")

        assert access.token == "fresh_token"
        assert access.scope == ("user_read", "user_subscriptions")

    @pytest.mark.asyncio
    async def test_rejected_code_is_decode_error(self, client, kraken):
        kraken.add(
            "POST",
            "/oauth2/token",
            status=400,
            json={"status": 400, "message": "Invalid authorization code"},
        )

        with pytest.raises(DecodeError):
            await client.exchange_code("bad_code")

    @pytest.mark.asyncio
    async def test_empty_code_never_hits_network(self, client, kraken):
        with pytest.raises(RequestConstructionError):
            await client.exchange_code("")
        assert kraken.calls == 0


class TestHandleAuthorization:

    @pytest.mark.asyncio
    async def test_delivers_access(self, client, kraken):
        kraken.add("POST", "/oauth2/token", json=TOKEN_RESPONSE)
        recorder = Recorder()
        endpoint = client.handle_authorization(recorder)

        response = await endpoint(make_request(b"code=auth_code&scope=user_read"))

        assert response.status_code == 200
        assert len(recorder.calls) == 1
        access, error = recorder.calls[0]
        assert error is None
        assert access.token == "fresh_token"
        assert kraken.last.url.params["code"] == "auth_code"

    @pytest.mark.asyncio
    async def test_async_callback_is_awaited(self, client, kraken):
        kraken.add("POST", "/oauth2/token", json=TOKEN_RESPONSE)
        seen = []

        async def handle_access(access, error):
            seen.append((access, error))

        await client.handle_authorization(handle_access)(make_request(b"code=auth_code"))

        assert seen[0][0].token == "fresh_token"

    @pytest.mark.asyncio
    async def test_missing_code(self, client, kraken):
        recorder = Recorder()

        response = await client.handle_authorization(recorder)(make_request(b""))

        assert response.status_code == 400
        access, error = recorder.calls[0]
        assert access is None
        assert isinstance(error, RequestConstructionError)
        assert kraken.calls == 0

    @pytest.mark.asyncio
    async def test_user_denied(self, client, kraken):
        recorder = Recorder()
        query = b"error=access_denied&error_description=The+user+denied+you+access"

        response = await client.handle_authorization(recorder)(make_request(query))

        assert response.status_code == 400
        access, error = recorder.calls[0]
        assert access is None
        assert isinstance(error, AuthorizationDeniedError)
        assert error.error == "access_denied"
        assert error.description == "The user denied you access"
        assert kraken.calls == 0

    @pytest.mark.asyncio
    async def test_transport_failure_reaches_callback(self, client, kraken):
        kraken.fail_with(httpx.ConnectTimeout("timed out"))
        recorder = Recorder()

        await client.handle_authorization(recorder)(make_request(b"code=auth_code"))

        access, error = recorder.calls[0]
        assert access is None
        assert isinstance(error, TransportError)
