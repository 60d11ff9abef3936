"""Application service implementations."""

from youtube_stats.application.services.statistics_service import DefaultStatisticsService

__all__ = ["DefaultStatisticsService"]
