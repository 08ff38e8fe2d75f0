"""Kraken user records: users, subscriptions, follows, blocks."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .channel import Channel, KrakenModel


class Notifications(KrakenModel):
    email: bool | None = None
    push: bool | None = None


class User(KrakenModel):
    """Twitch user.

    Depending on how the user was retrieved some fields are omitted:
    ``email``, ``email_verified``, ``notifications``, ``partnered`` and
    ``twitter_connected`` are only returned for the authenticated user.
    """

    id: str = Field(alias="_id")
    name: str
    bio: str | None = None
    display_name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    logo: str | None = None
    notifications: Notifications | None = None
    partnered: bool | None = None
    twitter_connected: bool | None = None
    type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Users(KrakenModel):
    """Envelope of GET /users."""

    total: int = Field(default=0, alias="_total")
    users: list[User] = Field(default_factory=list)


class Subscription(KrakenModel):
    id: str = Field(alias="_id")
    channel: Channel
    sub_plan: str | None = None
    sub_plan_name: str | None = None
    created_at: datetime | None = None


class Follow(KrakenModel):
    channel: Channel
    notifications: bool | None = None
    created_at: datetime | None = None


class Follows(KrakenModel):
    total: int = Field(default=0, alias="_total")
    follows: list[Follow] = Field(default_factory=list)


class Block(KrakenModel):
    id: str = Field(alias="_id")
    user: User
    updated_at: datetime | None = None
