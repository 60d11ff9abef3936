"""Configuration providers and models."""

from youtube_stats.infrastructure.config.env_provider import EnvironmentConfigurationProvider
from youtube_stats.infrastructure.config.models import AppConfig, CacheSettings, ServerSettings
from youtube_stats.infrastructure.config.yaml_provider import YamlConfigurationProvider

__all__ = [
    "AppConfig",
    "CacheSettings",
    "EnvironmentConfigurationProvider",
    "ServerSettings",
    "YamlConfigurationProvider",
]
