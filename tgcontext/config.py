"""Context options.

Options are supplied once when a context is built and never change for the
lifetime of that context.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContextOptions(BaseModel):
    """Per-bot settings consumed by ``UpdateContext``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    channel_mode: bool = Field(
        default=False,
        description="Split channel posts into message sub-types, like regular messages.",
    )
    username: str | None = Field(
        default=None,
        description="The bot's own username, exposed as ``UpdateContext.me``.",
    )

    @field_validator("username")
    @classmethod
    def _normalize_username(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().removeprefix("@")
        return value or None
