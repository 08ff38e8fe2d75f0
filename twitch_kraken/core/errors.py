"""Exceptions raised by the Kraken client.

Every failure reaches the caller as a ``TwitchError`` subclass:

- ``RequestConstructionError``: arguments that cannot form a valid request
- ``TransportError``: network, DNS or TLS failure (wraps ``httpx.HTTPError``)
- ``DecodeError``: response body is not JSON or does not match the model
- ``DomainError``: a status code with a known meaning for that endpoint
- ``MissingScopeError``: the Access lacks the scope an operation needs
"""


class TwitchError(Exception):
    """Base class for all client errors"""


class RequestConstructionError(TwitchError):
    """Request could not be built from the given arguments"""


class TransportError(TwitchError):
    """Request did not complete"""


class DecodeError(TwitchError):
    """Response body could not be decoded into the expected record"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingScopeError(TwitchError):
    def __init__(self, scope: str):
        super().__init__(
            f"Can not complete request because Access does not have '{scope}' scope"
        )
        self.scope = scope


class AuthorizationDeniedError(TwitchError):
    """Twitch redirected back with an ``error`` instead of a code"""

    def __init__(self, error: str, description: str | None = None):
        message = f"Authorization denied: {error}"
        if description:
            message += f" ({description})"
        super().__init__(message)
        self.error = error
        self.description = description


class DomainError(TwitchError):
    """Status code mapped to a named condition"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class NotSubscribedError(DomainError):
    def __init__(self, user_id: str, channel_id: str, status_code: int = 404):
        super().__init__(f"User {user_id} is not subscribed to channel {channel_id}", status_code)
        self.user_id = user_id
        self.channel_id = channel_id


class NoSubscriptionProgramError(DomainError):
    def __init__(self, channel_id: str, status_code: int = 422):
        super().__init__(f"Channel {channel_id} does not have a subscription program", status_code)
        self.channel_id = channel_id


class NotFollowingError(DomainError):
    def __init__(self, user_id: str, channel_id: str, status_code: int = 404):
        super().__init__(f"User {user_id} does not follow channel {channel_id}", status_code)
        self.user_id = user_id
        self.channel_id = channel_id


class FollowError(DomainError):
    def __init__(self, user_id: str, channel_id: str, status_code: int = 422):
        super().__init__(f"User {user_id} could not follow channel {channel_id}", status_code)
        self.user_id = user_id
        self.channel_id = channel_id


class UnfollowError(DomainError):
    def __init__(self, user_id: str, channel_id: str, status_code: int):
        super().__init__(
            f"Failed to unfollow user {user_id} from channel {channel_id} (HTTP {status_code})",
            status_code,
        )
        self.user_id = user_id
        self.channel_id = channel_id
