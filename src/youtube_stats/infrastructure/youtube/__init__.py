"""YouTube API integration implementations."""

from youtube_stats.infrastructure.youtube.auth_manager import ServiceAccountAuthManager
from youtube_stats.infrastructure.youtube.statistics_repository import (
    YouTubeChannelStatisticsRepository,
)

__all__ = [
    "ServiceAccountAuthManager",
    "YouTubeChannelStatisticsRepository",
]
