"""Core modules: configuration, errors, logging."""

from .config import DEFAULT_SCOPES, KRAKEN_ACCEPT, KRAKEN_BASE, ClientConfig, Settings, get_settings
from .errors import (
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
from .logging import setup_logging

__all__ = [
    # Config
    "ClientConfig",
    "Settings",
    "get_settings",
    "DEFAULT_SCOPES",
    "KRAKEN_ACCEPT",
    "KRAKEN_BASE",
    # Errors
    "TwitchError",
    "RequestConstructionError",
    "TransportError",
    "DecodeError",
    "DomainError",
    "MissingScopeError",
    "AuthorizationDeniedError",
    "NotSubscribedError",
    "NoSubscriptionProgramError",
    "NotFollowingError",
    "FollowError",
    "UnfollowError",
    # Logging
    "setup_logging",
]
