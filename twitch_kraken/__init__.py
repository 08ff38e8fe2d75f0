"""Async client for the Twitch v5 (Kraken) API."""

from .core.config import ClientConfig
from .core.errors import (
    AuthorizationDeniedError,
    DecodeError,
    DomainError,
    FollowError,
    MissingScopeError,
    NoSubscriptionProgramError,
    NotFollowingError,
    NotSubscribedError,
    RequestConstructionError,
    TransportError,
    TwitchError,
    UnfollowError,
)
from .models import (
    Access,
    Block,
    Channel,
    Follow,
    Follows,
    Notifications,
    Subscription,
    User,
    new_access,
)
from .services import AccessClient, Client

__version__ = "0.1.0"

__all__ = [
    "Access",
    "AccessClient",
    "AuthorizationDeniedError",
    "Block",
    "Channel",
    "Client",
    "ClientConfig",
    "DecodeError",
    "DomainError",
    "Follow",
    "FollowError",
    "Follows",
    "MissingScopeError",
    "NoSubscriptionProgramError",
    "NotFollowingError",
    "NotSubscribedError",
    "Notifications",
    "RequestConstructionError",
    "Subscription",
    "TransportError",
    "TwitchError",
    "UnfollowError",
    "User",
    "new_access",
]
