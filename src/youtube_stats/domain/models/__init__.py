"""Domain models for the YouTube Stats application."""

from youtube_stats.domain.models.channel import ChannelConfig
from youtube_stats.domain.models.credentials import ServiceAccountInfo
from youtube_stats.domain.models.statistics import ChannelStatistics

__all__ = [
    "ChannelConfig",
    "ChannelStatistics",
    "ServiceAccountInfo",
]
