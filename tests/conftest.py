"""
Pytest configuration
Provides a fake Kraken endpoint and clients wired to it
"""
import httpx
import pytest

from twitch_kraken import Client, new_access

BASE = "https://api.twitch.tv/kraken"

ALL_SCOPES = [
    "openid",
    "user_read",
    "user_subscriptions",
    "user_follows_edit",
    "user_blocks_edit",
]

CHANNEL = {
    "_id": "12826",
    "name": "twitch",
    "display_name": "Twitch",
    "mature": False,
    "status": "The Twitch Channel",
    "language": "en",
    "broadcaster_language": "en",
    "game": "Gaming Talk Shows",
    "partner": True,
    "logo": "https://static-cdn.jtvnw.net/jtv_user_pictures/twitch-profile_image.png",
    "url": "https://www.twitch.tv/twitch",
    "views": 105109,
    "followers": 1000,
    "created_at": "2007-05-22T10:39:54Z",
    "updated_at": "2016-12-14T01:01:44Z",
}

USER = {
    "_id": "44322889",
    "name": "dallas",
    "display_name": "dallas",
    "bio": "Just a gamer playing games and chatting.",
    "logo": "https://static-cdn.jtvnw.net/jtv_user_pictures/dallas-profile_image.png",
    "type": "staff",
    "created_at": "2013-06-03T19:12:02.580593Z",
    "updated_at": "2016-12-14T22:49:56.852803Z",
}

AUTHED_USER = {
    **USER,
    "email": "email-address@provider.com",
    "email_verified": True,
    "notifications": {"email": True, "push": False},
    "partnered": False,
    "twitter_connected": False,
}

SUBSCRIPTION = {
    "_id": "c660cb408bc3b542f5bdbba52f3e638e652756b4",
    "sub_plan": "1000",
    "sub_plan_name": "Channel Subscription (mr_woodchuck)",
    "channel": CHANNEL,
    "created_at": "2016-12-12T15:52:52Z",
}

FOLLOW = {
    "created_at": "2016-09-16T20:37:39Z",
    "notifications": False,
    "channel": CHANNEL,
}

BLOCK = {
    "_id": "34105660",
    "updated_at": "2016-12-15T18:58:11Z",
    "user": USER,
}


class FakeKraken:
    """MockTransport handler: canned responses per (method, path), records every request."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, object, bytes | None]] = {}
        self.requests: list[httpx.Request] = []
        self.error: Exception | None = None

    def add(self, method: str, path: str, status: int = 200, json=None, content: bytes | None = None):
        self.routes[(method, f"/kraken{path}")] = (status, json, content)

    def fail_with(self, error: Exception):
        self.error = error

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(
                404, json={"error": "Not Found", "status": 404, "message": "no route"}
            )

        status, body, content = self.routes[key]
        if content is not None:
            return httpx.Response(status, content=content)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)


@pytest.fixture
def kraken():
    return FakeKraken()


@pytest.fixture
def http(kraken):
    return httpx.AsyncClient(transport=httpx.MockTransport(kraken))


@pytest.fixture
def client(http):
    return Client("test_client_id", "test_secret", "http://localhost:8080/authorized", http=http)


@pytest.fixture
def access():
    return new_access("test_token", ALL_SCOPES)


@pytest.fixture
def access_client(client, access):
    return client.with_access(access)
