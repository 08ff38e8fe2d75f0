"""OAuth access token and its granted scopes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from twitch_kraken.core.errors import MissingScopeError


class Access(BaseModel):
    """Access token plus the authorization scope granted with it.

    Decoded straight from the token endpoint response; keys other than
    ``access_token`` and ``scope`` (``refresh_token``, ``expires_in``) are
    ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    token: str = Field(alias="access_token")
    scope: tuple[str, ...] = ()

    @field_validator("scope", mode="before")
    @classmethod
    def null_scope_is_empty(cls, v):
        return () if v is None else v

    def validate_scope(self, scope: str) -> None:
        """Raise MissingScopeError unless ``scope`` was granted."""
        if not self.has_scope(scope):
            raise MissingScopeError(scope)

    def has_scope(self, scope: str) -> bool:
        return scope in self.scope

    def __repr__(self) -> str:
        # keep tokens out of logs
        return f"Access(token='***', scope={list(self.scope)!r})"

    __str__ = __repr__


def new_access(token: str, scope: list[str] | tuple[str, ...]) -> Access:
    """Build an Access from an existing token/scope combination."""
    return Access(token=token, scope=tuple(scope))
