"""YouTube API service account authentication manager."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

import google_auth_httplib2
import httplib2
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from googleapiclient.discovery import Resource, build

from youtube_stats.domain.exceptions import AuthenticationError, ConfigurationError
from youtube_stats.domain.models.credentials import ServiceAccountInfo

logger = logging.getLogger(__name__)


class ServiceAccountAuthManager:
    """
    Manages YouTube API authentication using a Google service account.

    Credentials are built from either a JSON key file or inline key fields,
    bound to the configured scopes, and optionally delegated to a domain
    user. The API client built on top of them is cached and reused.
    """

    def __init__(
        self,
        scopes: list[str],
        service_account_info: ServiceAccountInfo | None = None,
        credentials_file: str | Path | None = None,
        subject: str | None = None,
    ) -> None:
        """
        Initialize the authentication manager.

        Args:
            scopes: OAuth2 scopes to request
            service_account_info: Inline service account credentials
            credentials_file: Path to a service account JSON key file
            subject: User to impersonate via domain-wide delegation
        """
        self.scopes = scopes
        self.service_account_info = service_account_info
        self.credentials_file = Path(credentials_file) if credentials_file else None
        self.subject = subject
        self._credentials: service_account.Credentials | None = None
        self._service: Resource | None = None
        self._local = threading.local()

    def get_authenticated_service(self) -> Resource:
        """
        Get an authenticated YouTube Data API v3 client.

        Returns:
            Cached YouTube API client

        Raises:
            ConfigurationError: If no usable credentials are configured
            AuthenticationError: If the client cannot be built
        """
        if self._service is None:
            credentials = self._get_credentials()
            try:
                self._service = build(
                    "youtube", "v3", credentials=credentials, cache_discovery=False
                )
            except Exception as e:
                raise AuthenticationError(f"Failed to build YouTube API client: {e}", e) from e
            logger.debug(f"Built YouTube API client for {credentials.service_account_email}")

        return self._service

    def authorized_http(self) -> google_auth_httplib2.AuthorizedHttp:
        """
        Get the authorized transport for the calling thread.

        httplib2 connections are not thread-safe, so each worker thread
        executes requests over its own ``Http`` while sharing credentials
        and the API client.
        """
        http = getattr(self._local, "http", None)
        if http is None:
            http = google_auth_httplib2.AuthorizedHttp(
                self._get_credentials(), http=httplib2.Http()
            )
            self._local.http = http
            logger.debug(f"Created HTTP transport for thread {threading.get_ident()}")
        return http

    def _get_credentials(self) -> service_account.Credentials:
        """Build (once) the scoped service account credentials."""
        if self._credentials is not None:
            return self._credentials

        if self.service_account_info is not None:
            info = self.service_account_info.to_info()
        elif self.credentials_file is not None:
            info = self._read_credentials_file(self.credentials_file)
        else:
            raise ConfigurationError(
                "No service account credentials configured.\n"
                "Set GOOGLE_PRIVATE_KEY, GOOGLE_CLIENT_EMAIL and GOOGLE_CLIENT_ID, "
                "or point credentials_file at a service account key."
            )

        try:
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=self.scopes
            )
        except (ValueError, KeyError) as e:
            raise AuthenticationError(f"Invalid service account credentials: {e}", e) from e

        if self.subject:
            credentials = credentials.with_subject(self.subject)
            logger.info(f"Using domain-wide delegation as {self.subject}")

        self._credentials = credentials
        return credentials

    @staticmethod
    def _read_credentials_file(credentials_file: Path) -> dict[str, Any]:
        """Load a service account key file."""
        if not credentials_file.exists():
            raise ConfigurationError(
                f"Service account key file not found: {credentials_file}\n"
                "Download a JSON key for the service account from Google Cloud Console."
            )

        try:
            with open(credentials_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read service account key file {credentials_file}: {e}"
            ) from e

        try:
            return ServiceAccountInfo(**raw).to_info()
        except Exception as e:
            raise ConfigurationError(
                f"Invalid service account key file {credentials_file}: {e}"
            ) from e

    def get_service_account_email(self) -> str:
        """
        Get the email of the service account in use.

        Raises:
            ConfigurationError: If no usable credentials are configured
        """
        return self._get_credentials().service_account_email

    def refresh(self) -> None:
        """
        Obtain a fresh access token.

        Raises:
            AuthenticationError: If the token endpoint rejects the credentials
        """
        credentials = self._get_credentials()
        try:
            credentials.refresh(Request())
        except GoogleAuthError as e:
            raise AuthenticationError(f"Failed to obtain access token: {e}", e) from e

    def reset(self) -> None:
        """Drop cached credentials, API client and transports."""
        self._credentials = None
        self._service = None
        self._local = threading.local()

    @property
    def is_authenticated(self) -> bool:
        """Check whether an access token can be obtained."""
        try:
            self.refresh()
            return True
        except (AuthenticationError, ConfigurationError) as e:
            logger.warning(f"Service account authentication failed: {e}")
            return False
