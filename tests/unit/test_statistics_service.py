"""Tests for the DefaultStatisticsService."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from youtube_stats.application.services.statistics_service import DefaultStatisticsService
from youtube_stats.domain.exceptions import (
    ChannelNotFoundError,
    ConfigurationError,
    ValidationError,
)
from youtube_stats.domain.models.statistics import ChannelStatistics


class TestDefaultStatisticsService:
    """Tests for DefaultStatisticsService."""

    @pytest.fixture
    def statistics_service(
        self,
        mock_statistics_repository: AsyncMock,
        mock_config_provider: Mock,
    ) -> DefaultStatisticsService:
        """Create a statistics service instance for testing."""
        return DefaultStatisticsService(
            repository=mock_statistics_repository,
            config_provider=mock_config_provider,
        )

    @pytest.mark.asyncio
    async def test_configured_channel(
        self,
        statistics_service: DefaultStatisticsService,
        mock_statistics_repository: AsyncMock,
        sample_statistics: ChannelStatistics,
        channel_id: str,
    ) -> None:
        """Test the configured channel is used by default."""
        result = await statistics_service.get_statistics()

        assert result == sample_statistics
        mock_statistics_repository.get_channel_statistics.assert_awaited_once_with(channel_id)

    @pytest.mark.asyncio
    async def test_explicit_channel(
        self,
        statistics_service: DefaultStatisticsService,
        mock_statistics_repository: AsyncMock,
        other_channel_id: str,
    ) -> None:
        """Test an explicit channel overrides the configured one."""
        await statistics_service.get_statistics(other_channel_id)

        mock_statistics_repository.get_channel_statistics.assert_awaited_once_with(other_channel_id)

    @pytest.mark.asyncio
    async def test_no_channel_configured(
        self,
        statistics_service: DefaultStatisticsService,
        mock_config_provider: Mock,
        mock_statistics_repository: AsyncMock,
    ) -> None:
        """Test a missing default channel is a configuration error."""
        mock_config_provider.get_channel_id.return_value = None

        with pytest.raises(ConfigurationError, match="No channel configured"):
            await statistics_service.get_statistics()
        mock_statistics_repository.get_channel_statistics.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_channel_id(
        self,
        statistics_service: DefaultStatisticsService,
        mock_statistics_repository: AsyncMock,
    ) -> None:
        """Test malformed channel IDs never reach the API."""
        with pytest.raises(ValidationError) as exc_info:
            await statistics_service.get_statistics("bogus")

        assert exc_info.value.field == "channel_id"
        assert exc_info.value.value == "bogus"
        mock_statistics_repository.get_channel_statistics.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_errors_propagate(
        self,
        statistics_service: DefaultStatisticsService,
        mock_statistics_repository: AsyncMock,
        channel_id: str,
    ) -> None:
        """Test repository errors are not swallowed."""
        mock_statistics_repository.get_channel_statistics.side_effect = ChannelNotFoundError(
            channel_id
        )

        with pytest.raises(ChannelNotFoundError):
            await statistics_service.get_statistics()

    def test_resolve_channel_id(
        self, statistics_service: DefaultStatisticsService, channel_id: str, other_channel_id: str
    ) -> None:
        """Test channel resolution without fetching."""
        assert statistics_service.resolve_channel_id() == channel_id
        assert statistics_service.resolve_channel_id(other_channel_id) == other_channel_id
