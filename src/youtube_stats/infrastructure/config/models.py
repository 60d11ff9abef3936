"""Pydantic configuration models for application settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, validator

from youtube_stats.domain.models.channel import ChannelConfig
from youtube_stats.domain.models.credentials import ServiceAccountInfo

READONLY_SCOPE = "https://www.googleapis.com/auth/youtube.readonly"
FULL_SCOPE = "https://www.googleapis.com/auth/youtube"


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @validator("level")
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class CacheSettings(BaseModel):
    """Shared-cache directives sent with successful statistics responses."""

    s_maxage: int = Field(default=1200, ge=0, description="Seconds a shared cache may serve the response")
    stale_while_revalidate: int = Field(
        default=600, ge=0, description="Seconds a stale response may be served while revalidating"
    )

    def header_value(self) -> str:
        """Render the ``Cache-Control`` header."""
        return (
            f"public, s-maxage={self.s_maxage}, "
            f"stale-while-revalidate={self.stale_while_revalidate}"
        )

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class ServerSettings(BaseModel):
    """Configuration for the HTTP server."""

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=8000, ge=1, le=65535, description="Port to listen on")
    route_path: str = Field(default="/api/youtube", description="Path of the statistics route")

    @validator("route_path")
    def validate_route_path(cls, v: str) -> str:
        """Route paths are absolute and have no trailing slash."""
        if not v.startswith("/"):
            raise ValueError(f"Route path must start with '/': {v}")
        if len(v) > 1:
            v = v.rstrip("/")
        return v

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class YouTubeAPIConfig(BaseModel):
    """Configuration for YouTube Data API access with a service account."""

    channel: ChannelConfig | None = Field(default=None, description="Default channel to report on")
    credentials_file: str | None = Field(default=None, description="Path to a service account JSON key file")
    service_account: ServiceAccountInfo | None = Field(
        default=None, description="Inline service account credentials"
    )
    subject: str | None = Field(default=None, description="User to impersonate via domain-wide delegation")
    scopes: list[str] = Field(
        default=[READONLY_SCOPE],
        description="OAuth2 scopes requested for the service account"
    )

    @validator("scopes")
    def validate_scopes(cls, v: list[str]) -> list[str]:
        """Validate YouTube API scopes."""
        if READONLY_SCOPE not in v and FULL_SCOPE not in v:
            raise ValueError(f"Required scope {READONLY_SCOPE} must be included")
        return v

    @validator("subject", "credentials_file")
    def empty_as_none(cls, v: str | None) -> str | None:
        """Treat empty strings (unset environment variables) as not configured."""
        return v or None

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class AppConfig(BaseModel):
    """
    Main application configuration model.

    This is the root configuration object that contains all application settings,
    validated using Pydantic for type safety and runtime validation.
    """

    youtube_api: YouTubeAPIConfig = Field(default_factory=YouTubeAPIConfig)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @validator("youtube_api")
    def validate_credentials_source(cls, v: YouTubeAPIConfig) -> YouTubeAPIConfig:
        """At most one credentials source may be configured."""
        if v.credentials_file and v.service_account:
            raise ValueError("Configure either credentials_file or service_account, not both")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.dict()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True
