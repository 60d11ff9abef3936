"""
FastAPI application serving channel statistics.
"""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from youtube_stats import __version__
from youtube_stats.domain.exceptions import (
    APIError,
    AuthenticationError,
    ChannelNotFoundError,
    ConfigurationError,
    RateLimitError,
    ValidationError,
    YouTubeStatsError,
)
from youtube_stats.domain.services.statistics_service import StatisticsService
from youtube_stats.infrastructure.container import (
    Container,
    create_container,
    get_configuration_provider,
    get_statistics_service,
)

logger = logging.getLogger(__name__)

# Most specific first: RateLimitError is an APIError.
ERROR_STATUS_CODES: list[tuple[type[YouTubeStatsError], int]] = [
    (ValidationError, 400),
    (ChannelNotFoundError, 404),
    (RateLimitError, 429),
    (AuthenticationError, 502),
    (APIError, 502),
    (ConfigurationError, 500),
]


def status_code_for(error: YouTubeStatsError) -> int:
    """HTTP status returned for a domain error."""
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(error, error_type):
            return status_code
    return 500


async def _handle_domain_error(request: Request, exc: YouTubeStatsError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


def _statistics_service(request: Request) -> StatisticsService:
    return get_statistics_service(request.app.state.container)


def create_app(container: Container | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        container: Dependency container; built from the environment when None

    Returns:
        Configured FastAPI application
    """
    if container is None:
        container = create_container()

    config_provider = get_configuration_provider(container)
    route_path = config_provider.get_server_settings().route_path.rstrip("/")
    cache_control = config_provider.get_cache_settings().header_value()

    app = FastAPI(
        title="YouTube Stats API",
        description="YouTube channel statistics via a Google service account",
        version=__version__,
    )
    app.state.container = container
    app.add_exception_handler(YouTubeStatsError, _handle_domain_error)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint"""
        return {"status": "ok", "service": "youtube_stats"}

    @app.get(route_path or "/")
    async def channel_statistics(
        service: StatisticsService = Depends(_statistics_service),
    ) -> JSONResponse:
        """Statistics of the configured channel."""
        statistics = await service.get_statistics()
        return JSONResponse(
            content=statistics.to_response(),
            headers={"Cache-Control": cache_control},
        )

    @app.get(f"{route_path}/{{channel_id}}")
    async def channel_statistics_by_id(
        channel_id: str,
        service: StatisticsService = Depends(_statistics_service),
    ) -> JSONResponse:
        """Statistics of the channel named in the path."""
        statistics = await service.get_statistics(channel_id)
        return JSONResponse(
            content=statistics.to_response(),
            headers={"Cache-Control": cache_control},
        )

    return app
