"""Domain-specific exceptions for the YouTube Stats application."""

from typing import Optional


class YouTubeStatsError(Exception):
    """Base exception for all YouTube Stats errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(YouTubeStatsError):
    """Raised when there are configuration-related errors."""

    pass


class AuthenticationError(YouTubeStatsError):
    """Raised when service account authentication fails."""

    pass


class APIError(YouTubeStatsError):
    """Raised when YouTube API calls fail."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class RateLimitError(APIError):
    """Raised when the YouTube API quota is exhausted."""

    def __init__(
        self,
        message: str = "YouTube API rate limit exceeded",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, 429, cause)


class ChannelNotFoundError(YouTubeStatsError):
    """Raised when a channel cannot be found or accessed."""

    def __init__(self, channel_id: str, cause: Optional[Exception] = None) -> None:
        message = f"Channel not found or not accessible: {channel_id}"
        super().__init__(message, cause)
        self.channel_id = channel_id


class ValidationError(YouTubeStatsError):
    """Raised when request data validation fails."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        message = f"Validation failed for {field}='{value}': {reason}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason
