"""Tests for the configuration validation use case."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

from youtube_stats.application.use_cases.validate_config import ValidateConfigUseCase
from youtube_stats.domain.exceptions import AuthenticationError


class TestValidateConfigUseCase:
    """Tests for ValidateConfigUseCase."""

    def test_valid_configuration(self, mock_config_provider: Mock) -> None:
        """Test a complete configuration has no errors."""
        assert ValidateConfigUseCase(mock_config_provider).execute() == []

    def test_missing_channel(self, mock_config_provider: Mock) -> None:
        """Test a missing default channel is reported."""
        mock_config_provider.get_channel_id.return_value = None

        errors = ValidateConfigUseCase(mock_config_provider).execute()

        assert len(errors) == 1
        assert "No default channel" in errors[0]

    def test_invalid_channel(self, mock_config_provider: Mock) -> None:
        """Test a malformed channel ID is reported."""
        mock_config_provider.get_channel_id.return_value = "UC123"

        errors = ValidateConfigUseCase(mock_config_provider).execute()

        assert any("24 characters" in error for error in errors)

    def test_missing_credentials(self, mock_config_provider: Mock) -> None:
        """Test missing credentials are reported."""
        mock_config_provider.get_service_account_info.return_value = None
        mock_config_provider.get_credentials_file.return_value = None

        errors = ValidateConfigUseCase(mock_config_provider).execute()

        assert any("No service account credentials" in error for error in errors)

    def test_key_file_counts_as_credentials(
        self, mock_config_provider: Mock, temp_key_file: Path
    ) -> None:
        """Test a key file satisfies the credentials check."""
        mock_config_provider.get_service_account_info.return_value = None
        mock_config_provider.get_credentials_file.return_value = str(temp_key_file)

        assert ValidateConfigUseCase(mock_config_provider).execute() == []

    def test_missing_key_file(self, mock_config_provider: Mock, tmp_path: Path) -> None:
        """Test a configured key file that does not exist is reported."""
        missing = tmp_path / "missing.json"
        mock_config_provider.get_service_account_info.return_value = None
        mock_config_provider.get_credentials_file.return_value = str(missing)

        errors = ValidateConfigUseCase(mock_config_provider).execute()

        assert errors == [f"Service account key file not found: {missing}"]

    def test_missing_scope(self, mock_config_provider: Mock) -> None:
        """Test a scope list without YouTube access is reported."""
        mock_config_provider.get_scopes.return_value = ["https://www.googleapis.com/auth/drive"]

        errors = ValidateConfigUseCase(mock_config_provider).execute()

        assert any("Missing required scope" in error for error in errors)

    def test_api_connectivity_success(self, mock_config_provider: Mock) -> None:
        """Test connectivity passes when a token is obtained."""
        auth_manager = Mock()

        use_case = ValidateConfigUseCase(mock_config_provider, auth_manager)

        assert use_case.validate_api_connectivity() is None
        auth_manager.refresh.assert_called_once()

    def test_api_connectivity_failure(self, mock_config_provider: Mock) -> None:
        """Test connectivity failures are returned as messages."""
        auth_manager = Mock()
        auth_manager.refresh.side_effect = AuthenticationError("Failed to obtain access token")

        use_case = ValidateConfigUseCase(mock_config_provider, auth_manager)

        assert use_case.validate_api_connectivity() == "Failed to obtain access token"

    def test_api_connectivity_without_auth_manager(self, mock_config_provider: Mock) -> None:
        """Test connectivity cannot be checked without an auth manager."""
        use_case = ValidateConfigUseCase(mock_config_provider)
        assert use_case.validate_api_connectivity() == "No authentication manager available"
