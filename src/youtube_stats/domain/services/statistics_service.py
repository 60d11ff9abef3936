"""Abstract base class for the statistics service."""

from abc import ABC, abstractmethod
from typing import Optional

from youtube_stats.domain.models.statistics import ChannelStatistics


class StatisticsService(ABC):
    """Service answering statistics requests for a channel."""

    @abstractmethod
    async def get_statistics(self, channel_id: Optional[str] = None) -> ChannelStatistics:
        """
        Get statistics for a channel.

        Args:
            channel_id: Channel to look up; the configured channel when None

        Returns:
            Statistics of the channel

        Raises:
            ConfigurationError: If no channel is given and none is configured
            ValidationError: If the channel ID is malformed
            ChannelNotFoundError: If the channel doesn't exist
            APIError: If the API call fails
        """
        pass
