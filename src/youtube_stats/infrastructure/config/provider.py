"""Configuration provider backed by a validated AppConfig."""

from __future__ import annotations

from abc import abstractmethod

from youtube_stats.domain.exceptions import ConfigurationError
from youtube_stats.domain.models.credentials import ServiceAccountInfo
from youtube_stats.domain.services.configuration_provider import ConfigurationProvider
from youtube_stats.infrastructure.config.models import (
    AppConfig,
    CacheSettings,
    LoggingConfig,
    ServerSettings,
)


class AppConfigProvider(ConfigurationProvider):
    """
    Serves settings from an ``AppConfig`` produced by ``_load_config``.

    Subclasses decide where the raw settings come from.
    """

    def __init__(self) -> None:
        self._config: AppConfig | None = None
        self._load_config()

    @abstractmethod
    def _load_config(self) -> None:
        """Load and validate configuration into ``self._config``."""

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def get_channel_id(self) -> str | None:
        """Get the default channel ID."""
        channel = self.config.youtube_api.channel
        return channel.channel_id if channel else None

    def get_service_account_info(self) -> ServiceAccountInfo | None:
        """Get inline service account credentials."""
        return self.config.youtube_api.service_account

    def get_credentials_file(self) -> str | None:
        """Get the path to the service account key file."""
        return self.config.youtube_api.credentials_file

    def get_scopes(self) -> list[str]:
        """Get the requested OAuth2 scopes."""
        return self.config.youtube_api.scopes

    def get_delegated_subject(self) -> str | None:
        """Get the domain-wide delegation subject."""
        return self.config.youtube_api.subject

    def get_cache_settings(self) -> CacheSettings:
        """Get HTTP caching settings."""
        return self.config.cache

    def get_server_settings(self) -> ServerSettings:
        """Get web server settings."""
        return self.config.server

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging

    def reload(self) -> None:
        """Reload configuration from source."""
        self._config = None
        self._load_config()
