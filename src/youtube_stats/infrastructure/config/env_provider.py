"""Configuration provider reading only environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from youtube_stats.domain.exceptions import ConfigurationError
from youtube_stats.infrastructure.config.models import AppConfig
from youtube_stats.infrastructure.config.provider import AppConfigProvider

PRIVATE_KEY_VAR = "GOOGLE_PRIVATE_KEY"
CLIENT_EMAIL_VAR = "GOOGLE_CLIENT_EMAIL"
CLIENT_ID_VAR = "GOOGLE_CLIENT_ID"
CREDENTIAL_VARS = (PRIVATE_KEY_VAR, CLIENT_EMAIL_VAR, CLIENT_ID_VAR)


class EnvironmentConfigurationProvider(AppConfigProvider):
    """
    Builds the configuration from environment variables.

    Three variables carry the service account: ``GOOGLE_PRIVATE_KEY``,
    ``GOOGLE_CLIENT_EMAIL`` and ``GOOGLE_CLIENT_ID``. ``YOUTUBE_CHANNEL_ID``
    names the default channel. ``GOOGLE_APPLICATION_CREDENTIALS`` may point
    at a key file instead of the three credential variables.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """
        Args:
            environ: Variables to read; ``os.environ`` when None
        """
        self.environ = os.environ if environ is None else environ
        super().__init__()

    def _get(self, name: str) -> str | None:
        value = self.environ.get(name, "").strip()
        return value or None

    def _load_config(self) -> None:
        """Assemble and validate configuration from the environment."""
        youtube_api: dict[str, Any] = {}

        channel_id = self._get("YOUTUBE_CHANNEL_ID")
        if channel_id:
            youtube_api["channel"] = {"channel_id": channel_id}

        present = [name for name in CREDENTIAL_VARS if self._get(name)]
        if present and len(present) != len(CREDENTIAL_VARS):
            missing = sorted(set(CREDENTIAL_VARS) - set(present))
            raise ConfigurationError(
                f"Incomplete service account credentials, missing: {', '.join(missing)}"
            )
        if present:
            youtube_api["service_account"] = {
                "private_key": self._get(PRIVATE_KEY_VAR),
                "client_email": self._get(CLIENT_EMAIL_VAR),
                "client_id": self._get(CLIENT_ID_VAR),
                "project_id": self._get("GOOGLE_PROJECT_ID"),
                "private_key_id": self._get("GOOGLE_PRIVATE_KEY_ID"),
            }
        elif self._get("GOOGLE_APPLICATION_CREDENTIALS"):
            youtube_api["credentials_file"] = self._get("GOOGLE_APPLICATION_CREDENTIALS")

        subject = self._get("GOOGLE_DELEGATED_SUBJECT")
        if subject:
            youtube_api["subject"] = subject

        raw_config: dict[str, Any] = {"youtube_api": youtube_api}

        server: dict[str, Any] = {}
        if self._get("HOST"):
            server["host"] = self._get("HOST")
        if self._get("PORT"):
            server["port"] = self._get("PORT")
        if server:
            raw_config["server"] = server

        if self._get("LOG_LEVEL"):
            raw_config["logging"] = {"level": self._get("LOG_LEVEL")}

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e
