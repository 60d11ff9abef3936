"""HTTP interface."""

from youtube_stats.web.app import create_app

__all__ = ["create_app"]
