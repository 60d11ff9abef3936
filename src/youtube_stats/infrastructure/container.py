"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

from dependency_injector import containers, providers

from youtube_stats.application.services.statistics_service import DefaultStatisticsService
from youtube_stats.domain.services.configuration_provider import ConfigurationProvider
from youtube_stats.domain.services.statistics_repository import ChannelStatisticsRepository
from youtube_stats.domain.services.statistics_service import StatisticsService
from youtube_stats.infrastructure.config.env_provider import EnvironmentConfigurationProvider
from youtube_stats.infrastructure.config.yaml_provider import YamlConfigurationProvider
from youtube_stats.infrastructure.youtube.auth_manager import ServiceAccountAuthManager
from youtube_stats.infrastructure.youtube.statistics_repository import (
    YouTubeChannelStatisticsRepository,
)


def _build_configuration_provider(config_path: str | None) -> ConfigurationProvider:
    """YAML configuration when a path is given, environment variables otherwise."""
    if config_path:
        return YamlConfigurationProvider(config_path)
    return EnvironmentConfigurationProvider()


def _build_auth_manager(config_provider: ConfigurationProvider) -> ServiceAccountAuthManager:
    return ServiceAccountAuthManager(
        scopes=config_provider.get_scopes(),
        service_account_info=config_provider.get_service_account_info(),
        credentials_file=config_provider.get_credentials_file(),
        subject=config_provider.get_delegated_subject(),
    )


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for the YouTube Stats application.

    The configuration provider, auth manager and repository are singletons
    so the API client handle is built once and shared by all requests.
    """

    config = providers.Configuration()

    configuration_provider = providers.Singleton(
        _build_configuration_provider,
        config_path=config.config_path,
    )

    auth_manager = providers.Singleton(
        _build_auth_manager,
        config_provider=configuration_provider,
    )

    statistics_repository = providers.Singleton(
        YouTubeChannelStatisticsRepository,
        auth_manager=auth_manager,
    )

    statistics_service = providers.Factory(
        DefaultStatisticsService,
        repository=statistics_repository,
        config_provider=configuration_provider,
    )


def create_container(config_path: str | Path | None = None) -> Container:
    """
    Create and configure the dependency injection container.

    Args:
        config_path: Path to a YAML configuration file; None reads the environment

    Returns:
        Configured container instance

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    container = Container()
    container.config.from_dict({"config_path": str(config_path) if config_path else None})
    # Load configuration eagerly so errors surface at startup.
    container.configuration_provider()
    return container


def get_configuration_provider(container: Container) -> ConfigurationProvider:
    """Get the configuration provider from the container."""
    return container.configuration_provider()


def get_auth_manager(container: Container) -> ServiceAccountAuthManager:
    """Get the shared service account authentication manager."""
    return container.auth_manager()


def get_statistics_repository(container: Container) -> ChannelStatisticsRepository:
    """Get the channel statistics repository."""
    return container.statistics_repository()


def get_statistics_service(container: Container) -> StatisticsService:
    """Get the statistics service."""
    return container.statistics_service()
