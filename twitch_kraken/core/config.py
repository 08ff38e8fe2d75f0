"""Client and demo server configuration"""

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

KRAKEN_BASE = "https://api.twitch.tv/kraken"
KRAKEN_ACCEPT = "application/vnd.twitchtv.v5+json"

DEFAULT_SCOPES = [
    "openid",
    "user_read",  # GET /user
    "user_subscriptions",  # subscription lookups
    "user_follows_edit",  # follow / unfollow
    "user_blocks_edit",  # block
]


@dataclass(frozen=True)
class ClientConfig:
    """Per-client connection settings.

    Passed explicitly to ``Client`` so that several clients with different
    endpoints can coexist in one process.
    """

    base_uri: str = KRAKEN_BASE
    accept: str = KRAKEN_ACCEPT
    timeout: float = 10.0


class Settings(BaseSettings):
    """Demo server settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_prefix="TWITCH_",
        env_file=Path.cwd() / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Twitch OAuth
    client_id: str = Field(..., description="Twitch OAuth Client ID")
    client_secret: str = Field(..., description="Twitch OAuth Client Secret")
    redirect_uri: str = Field(
        default="http://localhost:8080/authorized", description="OAuth redirect URI"
    )
    scopes: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SCOPES), description="Scopes requested on /"
    )

    # Pre-issued token, skips the OAuth round trip when set
    access_token: str = Field(default="", description="Existing OAuth access token")

    # Kraken endpoint
    base_uri: str = Field(default=KRAKEN_BASE, description="Kraken API base URI")
    accept: str = Field(default=KRAKEN_ACCEPT, description="Versioned Accept media type")
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")

    # Environment
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_width: int | None = Field(
        default=None, description="Console width for log output, terminal width when unset"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(f"Invalid log level '{v}', defaulting to INFO")
            return "INFO"
        return v_upper

    @field_validator("scopes", mode="before")
    @classmethod
    def split_scopes(cls, v):
        """Accept a JSON list or a space/comma separated string"""
        if not isinstance(v, str):
            return v
        if v.lstrip().startswith("["):
            return json.loads(v)
        return [s for s in re.split(r"[\s,]+", v) if s]

    @field_validator("base_uri")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment.lower() == "development"

    def client_config(self) -> ClientConfig:
        return ClientConfig(base_uri=self.base_uri, accept=self.accept, timeout=self.timeout)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()  # type: ignore[call-arg]
