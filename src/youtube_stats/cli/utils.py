"""Utility functions for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from youtube_stats.domain.models.statistics import ChannelStatistics

console = Console()


def display_error_summary(errors: list[str]) -> None:
    """Display configuration errors."""
    if not errors:
        return

    console.print(Panel(
        "\n".join(f"• {error}" for error in errors),
        title="[red]❌ Errors Found[/red]",
        border_style="red"
    ))


def display_success_message(message: str) -> None:
    """Display a success message."""
    console.print(Panel(
        f"[green]{message}[/green]",
        title="[green]✅ Success[/green]",
        border_style="green"
    ))


def format_count(count: int | None) -> str:
    """Format a count in human-readable format."""
    if count is None:
        return "0"

    if count < 1000:
        return str(count)
    elif count < 1000000:
        return f"{count / 1000:.1f}K"
    elif count < 1000000000:
        return f"{count / 1000000:.1f}M"
    else:
        return f"{count / 1000000000:.1f}B"


def create_statistics_table(statistics: ChannelStatistics) -> Table:
    """Create a table displaying channel statistics."""
    table = Table(title=f"📺 {statistics.channel_id}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_column("Exact", justify="right", style="dim")

    subscribers = "hidden" if statistics.hidden_subscriber_count else format_count(
        statistics.subscriber_count
    )
    table.add_row("Subscribers", subscribers, str(statistics.subscriber_count))
    table.add_row("Views", format_count(statistics.view_count), str(statistics.view_count))
    table.add_row("Videos", format_count(statistics.video_count), str(statistics.video_count))

    return table
