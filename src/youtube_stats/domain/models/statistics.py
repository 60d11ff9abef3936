"""Channel statistics domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _parse_count(raw: Any) -> int:
    """Parse a count as returned by the API (a decimal string)."""
    if raw is None or raw == "":
        return 0
    return int(raw)


@dataclass(frozen=True)
class ChannelStatistics:
    """
    Aggregate counts for a YouTube channel.

    The YouTube Data API reports counts as strings; this value object holds
    them as integers.
    """

    channel_id: str
    subscriber_count: int
    view_count: int
    video_count: int = 0
    hidden_subscriber_count: bool = False

    def __post_init__(self) -> None:
        """Validate statistics after initialization."""
        if not self.channel_id:
            raise ValueError("Channel ID cannot be empty")
        for name in ("subscriber_count", "view_count", "video_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

    @classmethod
    def from_api_item(cls, item: dict[str, Any]) -> ChannelStatistics:
        """
        Build statistics from one item of a ``channels.list`` response.

        Args:
            item: Channel resource with the ``statistics`` part

        Returns:
            Parsed channel statistics

        Raises:
            ValueError: If the item has no statistics or a count is malformed
        """
        statistics = item.get("statistics")
        if statistics is None:
            raise ValueError("Channel resource has no statistics part")

        hidden = bool(statistics.get("hiddenSubscriberCount", False))
        return cls(
            channel_id=item.get("id", ""),
            subscriber_count=0 if hidden else _parse_count(statistics.get("subscriberCount")),
            view_count=_parse_count(statistics.get("viewCount")),
            video_count=_parse_count(statistics.get("videoCount")),
            hidden_subscriber_count=hidden,
        )

    def to_response(self) -> dict[str, int]:
        """JSON body served by the statistics route."""
        return {
            "subscribers": self.subscriber_count,
            "views": self.view_count,
        }

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"ChannelStatistics(id={self.channel_id}, "
            f"subscribers={self.subscriber_count}, views={self.view_count})"
        )
