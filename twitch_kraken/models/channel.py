"""Kraken channel record."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class KrakenModel(BaseModel):
    """Base for provider payloads: immutable, ``_id``-style aliases, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        """Serialise back to the provider's field names, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Channel(KrakenModel):
    """Twitch channel. ``email`` and ``stream_key`` only appear on the authenticated channel."""

    id: str = Field(alias="_id")
    name: str
    display_name: str | None = None
    email: str | None = None
    mature: bool | None = None
    status: str | None = None
    language: str | None = None
    broadcaster_language: str | None = None
    game: str | None = None
    partner: bool | None = None
    logo: str | None = None
    video_banner: str | None = None
    profile_banner: str | None = None
    profile_banner_background_color: str | None = None
    url: str | None = None
    views: int | None = None
    followers: int | None = None
    broadcaster_type: str | None = None
    stream_key: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
