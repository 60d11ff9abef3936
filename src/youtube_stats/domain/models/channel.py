"""Channel configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field, validator

CHANNEL_ID_PREFIX = "UC"
CHANNEL_ID_LENGTH = 24


def channel_id_problem(channel_id: str) -> str | None:
    """Return why ``channel_id`` is not a valid YouTube channel ID, or None."""
    if not channel_id:
        return "Channel ID cannot be empty"
    if not channel_id.startswith(CHANNEL_ID_PREFIX):
        return f"Invalid YouTube channel ID format: {channel_id}"
    if len(channel_id) != CHANNEL_ID_LENGTH:
        return f"YouTube channel ID must be {CHANNEL_ID_LENGTH} characters long: {channel_id}"
    return None


class ChannelConfig(BaseModel):
    """
    The channel whose statistics are served by default.

    Loaded from YAML or from the ``YOUTUBE_CHANNEL_ID`` environment variable.
    """

    channel_id: str = Field(..., min_length=1, description="YouTube channel ID")
    name: str | None = Field(default=None, description="Human-readable channel name")

    @validator("channel_id")
    def validate_channel_id(cls, v: str) -> str:
        """Validate YouTube channel ID format."""
        problem = channel_id_problem(v)
        if problem:
            raise ValueError(problem)
        return v

    class Config:
        """Pydantic configuration."""

        extra = "forbid"
        validate_assignment = True
