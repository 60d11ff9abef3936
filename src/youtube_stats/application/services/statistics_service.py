"""Default implementation of the statistics service."""

from __future__ import annotations

import logging

from youtube_stats.domain.exceptions import ConfigurationError, ValidationError
from youtube_stats.domain.models.channel import channel_id_problem
from youtube_stats.domain.models.statistics import ChannelStatistics
from youtube_stats.domain.services.configuration_provider import ConfigurationProvider
from youtube_stats.domain.services.statistics_repository import ChannelStatisticsRepository
from youtube_stats.domain.services.statistics_service import StatisticsService

logger = logging.getLogger(__name__)


class DefaultStatisticsService(StatisticsService):
    """
    Resolves which channel to report on and fetches its statistics.

    No results are kept between calls; freshness is left to HTTP caches
    downstream of the web route.
    """

    def __init__(
        self,
        repository: ChannelStatisticsRepository,
        config_provider: ConfigurationProvider,
    ) -> None:
        """
        Initialize the statistics service.

        Args:
            repository: Repository for channel statistics
            config_provider: Provider for the default channel
        """
        self.repository = repository
        self.config_provider = config_provider

    def resolve_channel_id(self, channel_id: str | None = None) -> str:
        """
        Pick the requested channel or fall back to the configured one.

        Raises:
            ConfigurationError: If no channel is given and none is configured
            ValidationError: If the channel ID is malformed
        """
        if channel_id is None:
            channel_id = self.config_provider.get_channel_id()
            if not channel_id:
                raise ConfigurationError(
                    "No channel configured. Set YOUTUBE_CHANNEL_ID or youtube_api.channel."
                )

        problem = channel_id_problem(channel_id)
        if problem:
            raise ValidationError("channel_id", channel_id, problem)
        return channel_id

    async def get_statistics(self, channel_id: str | None = None) -> ChannelStatistics:
        """Get statistics for the requested or configured channel."""
        resolved = self.resolve_channel_id(channel_id)
        logger.info(f"Fetching statistics for channel {resolved}")

        statistics = await self.repository.get_channel_statistics(resolved)

        logger.info(
            f"Channel {resolved}: {statistics.subscriber_count} subscribers, "
            f"{statistics.view_count} views"
        )
        return statistics
