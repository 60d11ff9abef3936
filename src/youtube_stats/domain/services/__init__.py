"""Abstract base classes for domain services."""

from youtube_stats.domain.services.configuration_provider import (
    ConfigurationProvider,
)
from youtube_stats.domain.services.statistics_repository import ChannelStatisticsRepository
from youtube_stats.domain.services.statistics_service import StatisticsService

__all__ = [
    "ChannelStatisticsRepository",
    "ConfigurationProvider",
    "StatisticsService",
]
