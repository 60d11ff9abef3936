"""YouTube API channel statistics repository implementation."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from googleapiclient.errors import HttpError

from youtube_stats.domain.exceptions import (
    APIError,
    AuthenticationError,
    ChannelNotFoundError,
    RateLimitError,
    YouTubeStatsError,
)
from youtube_stats.domain.models.statistics import ChannelStatistics
from youtube_stats.domain.services.statistics_repository import ChannelStatisticsRepository
from youtube_stats.infrastructure.youtube.auth_manager import ServiceAccountAuthManager

logger = logging.getLogger(__name__)

QUOTA_REASONS = ("quotaExceeded", "rateLimitExceeded", "dailyLimitExceeded")


class YouTubeChannelStatisticsRepository(ChannelStatisticsRepository):
    """
    YouTube Data API v3 implementation of the statistics repository.

    Each lookup is a single ``channels.list`` call requesting the
    ``statistics`` part; the first returned item is used.
    """

    def __init__(self, auth_manager: ServiceAccountAuthManager) -> None:
        """
        Initialize the repository.

        Args:
            auth_manager: Service account authentication manager
        """
        self.auth_manager = auth_manager

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
        service = self.auth_manager.get_authenticated_service()

        try:
            response = await asyncio.to_thread(self._list_statistics, service, channel_id)
        except HttpError as e:
            raise self._map_http_error(e, channel_id) from e
        except YouTubeStatsError:
            raise
        except Exception as e:
            raise APIError(f"Failed to get channel statistics: {e}", cause=e) from e

        items = response.get("items") or []
        if not items:
            raise ChannelNotFoundError(channel_id)

        item = items[0]
        item.setdefault("id", channel_id)
        try:
            statistics = ChannelStatistics.from_api_item(item)
        except ValueError as e:
            raise APIError(f"Unexpected statistics payload for {channel_id}: {e}", cause=e) from e

        logger.debug(f"Fetched statistics for {channel_id}: {statistics}")
        return statistics

    def _list_statistics(self, service: Any, channel_id: str) -> dict[str, Any]:
        """Blocking ``channels.list`` call over the worker thread's own transport."""
        return service.channels().list(
            part="statistics",
            id=channel_id,
        ).execute(http=self.auth_manager.authorized_http())

    @staticmethod
    def _map_http_error(error: HttpError, channel_id: str) -> YouTubeStatsError:
        """Translate an API HTTP error into a domain exception."""
        status = error.resp.status
        if status == 404:
            return ChannelNotFoundError(channel_id, error)
        if status == 429 or (status == 403 and any(r in str(error) for r in QUOTA_REASONS)):
            return RateLimitError("YouTube API quota exceeded", error)
        if status in (401, 403):
            return AuthenticationError(f"Insufficient permissions: {error}", error)
        return APIError(f"YouTube API error: {error}", status, error)
