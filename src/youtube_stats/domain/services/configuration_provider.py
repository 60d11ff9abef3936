"""Abstract base class for configuration management."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from youtube_stats.domain.models.credentials import ServiceAccountInfo


class ConfigurationProvider(ABC):
    """
    Abstract service for providing application configuration.

    This interface defines the contract for loading and validating
    configuration data from various sources (YAML files, environment
    variables, etc.).
    """

    @abstractmethod
    def get_channel_id(self) -> Optional[str]:
        """
        Get the channel whose statistics are served by default.

        Returns:
            YouTube channel ID, or None if no default channel is configured
        """
        pass

    @abstractmethod
    def get_service_account_info(self) -> Optional[ServiceAccountInfo]:
        """
        Get inline service account credentials.

        Returns:
            Validated service account info, or None if credentials come
            from a key file instead

        Raises:
            ConfigurationError: If the configured credentials are invalid
        """
        pass

    @abstractmethod
    def get_credentials_file(self) -> Optional[str]:
        """Get the path to a service account JSON key file, if configured."""
        pass

    @abstractmethod
    def get_scopes(self) -> list[str]:
        """Get the OAuth2 scopes requested for the service account."""
        pass

    @abstractmethod
    def get_delegated_subject(self) -> Optional[str]:
        """
        Get the user to impersonate through domain-wide delegation.

        Returns:
            User email, or None to act as the service account itself
        """
        pass

    @abstractmethod
    def get_cache_settings(self) -> Any:
        """
        Get HTTP caching settings for the statistics route.

        Returns:
            Settings with ``s_maxage`` and ``stale_while_revalidate`` seconds
        """
        pass

    @abstractmethod
    def get_server_settings(self) -> Any:
        """Get host, port and route path for the web server."""
        pass

    @abstractmethod
    def get_logging_config(self) -> Any:
        """
        Get logging configuration.

        Returns:
            Logging settings (level, format, file handler options)
        """
        pass

    @abstractmethod
    def reload(self) -> None:
        """
        Reload configuration from source.

        Raises:
            ConfigurationError: If configuration cannot be reloaded or is invalid
        """
        pass
