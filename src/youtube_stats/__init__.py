"""YouTube Stats - serve a YouTube channel's statistics over HTTP using a service account."""

__version__ = "0.1.0"
__description__ = "HTTP route reporting YouTube channel statistics via a Google service account"

from youtube_stats.domain.models import ChannelStatistics, ServiceAccountInfo

__all__ = ["ChannelStatistics", "ServiceAccountInfo"]
