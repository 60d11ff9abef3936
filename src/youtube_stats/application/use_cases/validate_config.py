"""Use case for validating application configuration."""

from __future__ import annotations

from pathlib import Path

from youtube_stats.domain.exceptions import YouTubeStatsError
from youtube_stats.domain.models.channel import channel_id_problem
from youtube_stats.domain.services.configuration_provider import ConfigurationProvider
from youtube_stats.infrastructure.config.models import FULL_SCOPE, READONLY_SCOPE
from youtube_stats.infrastructure.youtube.auth_manager import ServiceAccountAuthManager


class ValidateConfigUseCase:
    """
    Use case for validating the application configuration.

    Checks that a default channel and a credentials source are configured,
    that the scopes allow reading channel data, and that a configured key
    file exists. Optionally verifies the credentials against Google.
    """

    def __init__(
        self,
        config_provider: ConfigurationProvider,
        auth_manager: ServiceAccountAuthManager | None = None,
    ) -> None:
        """
        Initialize the validation use case.

        Args:
            config_provider: Configuration provider to validate
            auth_manager: Used by ``validate_api_connectivity`` when given
        """
        self.config_provider = config_provider
        self.auth_manager = auth_manager

    def execute(self) -> list[str]:
        """
        Execute configuration validation.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        channel_id = self.config_provider.get_channel_id()
        if not channel_id:
            errors.append("No default channel configured (YOUTUBE_CHANNEL_ID)")
        else:
            problem = self.validate_channel_id(channel_id)
            if problem:
                errors.append(problem)

        credentials_file = self.config_provider.get_credentials_file()
        if self.config_provider.get_service_account_info() is None and not credentials_file:
            errors.append(
                "No service account credentials configured "
                "(GOOGLE_PRIVATE_KEY, GOOGLE_CLIENT_EMAIL, GOOGLE_CLIENT_ID)"
            )

        scopes = self.config_provider.get_scopes()
        if READONLY_SCOPE not in scopes and FULL_SCOPE not in scopes:
            errors.append(f"Missing required scope: {READONLY_SCOPE}")

        if credentials_file and not Path(credentials_file).is_file():
            errors.append(f"Service account key file not found: {credentials_file}")

        return errors

    def validate_channel_id(self, channel_id: str) -> str | None:
        """
        Validate the format of a channel ID.

        Returns:
            Error message if validation fails, None if successful
        """
        return channel_id_problem(channel_id)

    def validate_api_connectivity(self) -> str | None:
        """
        Check that the service account can obtain an access token.

        Returns:
            Error message if validation fails, None if successful
        """
        if self.auth_manager is None:
            return "No authentication manager available"

        try:
            self.auth_manager.refresh()
        except YouTubeStatsError as e:
            return str(e)
        return None
