"""Abstract base class for channel statistics retrieval."""

from abc import ABC, abstractmethod

from youtube_stats.domain.models.statistics import ChannelStatistics


class ChannelStatisticsRepository(ABC):
    """
    Abstract repository for channel statistics.

    Implementations fetch the statistics resource of a channel from an
    external source (like the YouTube Data API) and map it to the domain
    model.
    """

    @abstractmethod
    async def get_channel_statistics(self, channel_id: str) -> ChannelStatistics:
        """
        Retrieve the statistics of a channel.

        Args:
            channel_id: YouTube channel ID

        Returns:
            Statistics of the channel

        Raises:
            ChannelNotFoundError: If the channel doesn't exist or isn't accessible
            RateLimitError: If the API quota is exhausted
            APIError: If the API call fails
            AuthenticationError: If authentication is invalid
        """
        pass
