"""
CLI command for listing a channel's streams.

This module provides the `ytstreams streams` command, which walks the
channel's Streams tab and prints every stream as a rich table or as JSON
lines. SIGINT/SIGTERM stop the listing between requests.
"""

from __future__ import annotations

import asyncio
import datetime as _dt
import logging
from collections.abc import AsyncIterator
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ytstreams.config.settings import settings
from ytstreams.exceptions import (
    EXIT_CODE_EXTRACTION_FAILED,
    EXIT_CODE_INTERRUPTED,
    EXIT_CODE_INVALID_ARGS,
    EXIT_CODE_NETWORK_ERROR,
    ExtractionError,
    OperationCancelledError,
    TransportError,
)
from ytstreams.models.stream import ChannelStream, StreamStatus
from ytstreams.models.youtube_types import parse_channel_id
from ytstreams.services.channel_streams_service import ChannelStreamsService, collect
from ytstreams.utils.cancellation import CancellationToken

console = Console()

_STATUS_STYLES = {
    StreamStatus.LIVE: "[bold red]LIVE[/bold red]",
    StreamStatus.UPCOMING: "[yellow]upcoming[/yellow]",
    StreamStatus.PAST: "[dim]past[/dim]",
}


class StatusFilter(str, Enum):
    """Which streams to list."""

    ALL = "all"
    LIVE = "live"
    UPCOMING = "upcoming"
    PAST = "past"


def _setup_logging(verbose: bool) -> None:
    """
    Configure console logging for the ytstreams package.

    Parameters
    ----------
    verbose : bool
        If True, log at DEBUG; otherwise use ``settings.log_level``.
    """
    log_level = logging.DEBUG if verbose else getattr(logging, settings.log_level)

    package_logger = logging.getLogger("ytstreams")
    package_logger.setLevel(log_level)

    if not package_logger.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)


def _format_duration(duration: Optional[_dt.timedelta]) -> str:
    """Render a duration as ``h:mm:ss`` or ``m:ss``; ``-`` when unknown."""
    if duration is None:
        return "-"

    total = int(duration.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def _select_streams(
    service: ChannelStreamsService,
    channel_id: str,
    status: StatusFilter,
    cancellation: CancellationToken,
) -> AsyncIterator[ChannelStream]:
    if status is StatusFilter.LIVE:
        return service.get_live_streams(channel_id, cancellation)
    if status is StatusFilter.UPCOMING:
        return service.get_upcoming_streams(channel_id, cancellation)
    if status is StatusFilter.PAST:
        return service.get_past_streams(channel_id, cancellation)
    return service.get_streams(channel_id, cancellation)


async def _fetch_streams(
    channel_id: str,
    status: StatusFilter,
    limit: Optional[int],
    cancellation: CancellationToken,
) -> list[ChannelStream]:
    service = ChannelStreamsService()
    return await collect(
        _select_streams(service, channel_id, status, cancellation), limit=limit
    )


def _display_table(streams: list[ChannelStream], channel_id: str) -> None:
    """Print streams as a rich table."""
    channel_title = streams[0].author.channel_title if streams else channel_id

    table = Table(title=f"Streams: {escape(channel_title)}")
    table.add_column("Status", no_wrap=True)
    table.add_column("Video ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Duration", justify="right", no_wrap=True)

    for stream in streams:
        table.add_row(
            _STATUS_STYLES[stream.status],
            stream.id,
            escape(stream.title) if stream.title else "[dim](untitled)[/dim]",
            _format_duration(stream.duration),
        )

    console.print(table)
    console.print(f"[dim]{len(streams)} stream(s)[/dim]")


def _display_json_lines(streams: list[ChannelStream]) -> None:
    """Print one JSON object per stream."""
    for stream in streams:
        typer.echo(stream.model_dump_json())


def streams_command(
    channel: str = typer.Argument(
        ...,
        help="Channel ID (UC...) or channel URL",
    ),
    status: StatusFilter = typer.Option(
        StatusFilter.ALL,
        "--status",
        "-s",
        help="Only list streams with this status",
        case_sensitive=False,
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        help="Maximum number of streams to list",
        min=1,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print JSON lines instead of a table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
) -> None:
    """
    List the live, upcoming and past streams of a YouTube channel.

    Examples:
        ytstreams streams UCuAXFkgsw1L7xaCfnd5JJOw
        ytstreams streams https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw --status live
        ytstreams streams UCuAXFkgsw1L7xaCfnd5JJOw --status past --limit 20 --json
    """
    _setup_logging(verbose)

    channel_id = parse_channel_id(channel)
    if channel_id is None:
        console.print(f"[red]Error: '{escape(channel)}' is not a channel ID or channel URL[/red]")
        raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)

    cancellation = CancellationToken()
    cancellation.install()
    try:
        streams = asyncio.run(_fetch_streams(channel_id, status, limit, cancellation))
    except OperationCancelledError as e:
        console.print(f"[yellow]{escape(e.message)}[/yellow]")
        raise typer.Exit(code=EXIT_CODE_INTERRUPTED)
    except ExtractionError as e:
        console.print(f"[red]Extraction error: {escape(e.message)}[/red]")
        raise typer.Exit(code=EXIT_CODE_EXTRACTION_FAILED)
    except TransportError as e:
        console.print(f"[red]Network error: {escape(e.message)}[/red]")
        raise typer.Exit(code=EXIT_CODE_NETWORK_ERROR)
    finally:
        cancellation.uninstall()

    if json_output:
        _display_json_lines(streams)
    else:
        _display_table(streams, channel_id)
