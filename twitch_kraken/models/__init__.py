"""Data models mirroring Kraken JSON payloads."""

from .access import Access, new_access
from .channel import Channel, KrakenModel
from .user import Block, Follow, Follows, Notifications, Subscription, User, Users

__all__ = [
    "Access",
    "Block",
    "Channel",
    "Follow",
    "Follows",
    "KrakenModel",
    "Notifications",
    "Subscription",
    "User",
    "Users",
    "new_access",
]
