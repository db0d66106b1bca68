"""
Pagination over a channel's Streams tab.

``ChannelStreamsService.get_streams`` walks the listing page by page: the
first page comes from the channel's HTML, every following page from an
InnerTube continuation request. Each run keeps its own ``PaginationState``
(seen video IDs, seen continuation tokens, running channel title), so
concurrent runs never share anything.

A run ends when a page brings no new streams, when no continuation token
is returned, or when the returned token was already used in the run. The
last two guard against upstream responses that echo the same page forever.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from ytstreams.config.settings import Settings, settings as default_settings
from ytstreams.exceptions import ExtractionError
from ytstreams.models.stream import Author, ChannelStream, StreamStatus, Thumbnail
from ytstreams.models.youtube_types import validate_channel_id, validate_video_id
from ytstreams.parsers.stream_item import ChannelStreamData, ThumbnailData
from ytstreams.services.streams_controller import ChannelStreamsController
from ytstreams.utils.cancellation import CancellationToken
from ytstreams.utils.json_tree import null_if_blank

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginationPhase(str, Enum):
    """Phase of a listing run."""

    FETCH_FIRST_PAGE = "fetch_first_page"
    FETCH_CONTINUATION = "fetch_continuation"
    DONE = "done"


@dataclass
class PaginationState:
    """
    Mutable state of a single listing run.

    Attributes
    ----------
    channel_id : str
        The channel being listed.
    phase : PaginationPhase
        Current phase.
    continuation_token : str | None
        Token for the next request; None while on the first page.
    channel_title : str | None
        Last known channel title, used for streams without an author.
    seen_video_ids : set[str]
        IDs already handled in this run.
    seen_continuation_tokens : set[str]
        Tokens already requested in this run.
    pages_fetched : int
        Number of responses processed.
    streams_yielded : int
        Number of streams handed to the caller.
    stop_reason : str | None
        Why the run ended, once ``phase`` is DONE.
    """

    channel_id: str
    phase: PaginationPhase = PaginationPhase.FETCH_FIRST_PAGE
    continuation_token: str | None = None
    channel_title: str | None = None
    seen_video_ids: set[str] = field(default_factory=set)
    seen_continuation_tokens: set[str] = field(default_factory=set)
    pages_fetched: int = 0
    streams_yielded: int = 0
    stop_reason: str | None = None

    def advance(self, new_streams: int, next_token: str | None) -> None:
        """
        Decide the next phase after a page has been consumed.

        Parameters
        ----------
        new_streams : int
            Number of streams from the page that were yielded.
        next_token : str | None
            Continuation token reported by the page.
        """
        token = null_if_blank(next_token)

        if new_streams == 0:
            self._finish("page contained no new streams")
        elif token is None:
            self._finish("no continuation token")
        elif token in self.seen_continuation_tokens:
            self._finish("continuation token repeated")
        else:
            self.seen_continuation_tokens.add(token)
            self.continuation_token = token
            self.phase = PaginationPhase.FETCH_CONTINUATION

    def _finish(self, reason: str) -> None:
        self.phase = PaginationPhase.DONE
        self.stop_reason = reason


class ChannelStreamsService:
    """
    Enumerates the streams listed on a YouTube channel.

    Parameters
    ----------
    controller : ChannelStreamsController | None, optional
        Page fetcher (default: a new ``ChannelStreamsController``).
    settings : Settings | None, optional
        Settings (default: global settings).

    Examples
    --------
    >>> service = ChannelStreamsService()
    >>> async for stream in service.get_streams("UCuAXFkgsw1L7xaCfnd5JJOw"):
    ...     print(stream.status.value, stream.title)
    """

    def __init__(
        self,
        controller: ChannelStreamsController | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._controller = controller or ChannelStreamsController(settings=self._settings)

    async def get_streams(
        self,
        channel_id: str,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[ChannelStream]:
        """
        Yield every stream of the channel, page by page.

        Streams are yielded in listing order (upcoming, then live, then past
        on the current layout). Duplicates and streams belonging to other
        channels are skipped.

        Parameters
        ----------
        channel_id : str
            YouTube channel ID.
        cancellation : CancellationToken | None, optional
            Checked before every request.

        Yields
        ------
        ChannelStream
            Each new stream.

        Raises
        ------
        ValueError
            If ``channel_id`` is not a valid channel ID.
        ExtractionError
            If a required field is missing or the first page is broken.
        TransportError
            On HTTP or network failure.
        OperationCancelledError
            If cancellation is requested.
        """
        channel_id = validate_channel_id(channel_id)
        state = PaginationState(channel_id=channel_id)

        while state.phase is not PaginationPhase.DONE:
            response = await self._controller.get_response(
                channel_id, state.continuation_token, cancellation
            )
            state.pages_fetched += 1

            if state.channel_title is None:
                state.channel_title = null_if_blank(response.channel_title)

            new_streams = 0
            for data in response.streams:
                stream = self._build_stream(data, state)
                if stream is None:
                    continue

                new_streams += 1
                state.streams_yielded += 1
                yield stream

            logger.debug(
                "Channel %s page %d: %d listed, %d new",
                channel_id,
                state.pages_fetched,
                len(response.streams),
                new_streams,
            )
            state.advance(new_streams, response.continuation_token)

        logger.info(
            "Listed %d streams for channel %s over %d pages (%s)",
            state.streams_yielded,
            channel_id,
            state.pages_fetched,
            state.stop_reason,
        )

    def _build_stream(
        self, data: ChannelStreamData, state: PaginationState
    ) -> ChannelStream | None:
        """Turn an item into a ``ChannelStream``, or None if it must be skipped."""
        raw_id = data.id
        if raw_id is None:
            raise ExtractionError.missing_field("video ID")
        try:
            video_id = validate_video_id(raw_id)
        except ValueError as e:
            raise ExtractionError(
                message=f"Failed to extract the video ID: {e}", field_name="video ID"
            ) from e

        if video_id in state.seen_video_ids:
            return None
        state.seen_video_ids.add(video_id)

        item_channel_id = null_if_blank(data.channel_id)
        if item_channel_id is not None and item_channel_id != state.channel_id:
            logger.warning(
                "Skipping stream %s from channel %s while listing %s",
                video_id,
                item_channel_id,
                state.channel_id,
            )
            return None

        # Untitled videos are legal
        title = data.title or ""

        author = null_if_blank(data.author)
        if state.channel_title is None:
            state.channel_title = author
        channel_title = author or state.channel_title
        if channel_title is None:
            raise ExtractionError.missing_field("video author")

        thumbnails = [self._build_thumbnail(t) for t in data.thumbnails]
        thumbnails.extend(Thumbnail.default_set(video_id))

        return ChannelStream(
            id=video_id,
            title=title,
            author=Author(
                channel_id=item_channel_id or state.channel_id,
                channel_title=channel_title,
            ),
            duration=data.duration,
            thumbnails=thumbnails,
            status=data.status,
        )

    @staticmethod
    def _build_thumbnail(data: ThumbnailData) -> Thumbnail:
        if data.url is None:
            raise ExtractionError.missing_field("thumbnail URL")
        if data.width is None or data.width < 0:
            raise ExtractionError.missing_field("thumbnail width")
        if data.height is None or data.height < 0:
            raise ExtractionError.missing_field("thumbnail height")
        return Thumbnail(url=data.url, width=data.width, height=data.height)

    async def get_live_streams(
        self,
        channel_id: str,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[ChannelStream]:
        """
        Yield streams that are currently live.

        With ``assume_grouped_status_order`` enabled, the listing is assumed
        to be grouped as upcoming -> live -> past, and the run stops at the
        first past stream.
        """
        async with aclosing(self.get_streams(channel_id, cancellation)) as streams:
            async for stream in streams:
                if stream.status is StreamStatus.LIVE:
                    yield stream
                elif (
                    stream.status is StreamStatus.PAST
                    and self._settings.assume_grouped_status_order
                ):
                    return

    async def get_upcoming_streams(
        self,
        channel_id: str,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[ChannelStream]:
        """Yield scheduled streams; same early stop as ``get_live_streams``."""
        async with aclosing(self.get_streams(channel_id, cancellation)) as streams:
            async for stream in streams:
                if stream.status is StreamStatus.UPCOMING:
                    yield stream
                elif (
                    stream.status is StreamStatus.PAST
                    and self._settings.assume_grouped_status_order
                ):
                    return

    async def get_past_streams(
        self,
        channel_id: str,
        cancellation: CancellationToken | None = None,
    ) -> AsyncIterator[ChannelStream]:
        """Yield streams that have ended."""
        async with aclosing(self.get_streams(channel_id, cancellation)) as streams:
            async for stream in streams:
                if stream.status is StreamStatus.PAST:
                    yield stream


async def collect(items: AsyncIterator[T], limit: int | None = None) -> list[T]:
    """
    Drain an async iterator into a list, stopping after ``limit`` items.

    The iterator is closed as soon as the limit is reached, so no further
    pages are requested.

    Parameters
    ----------
    items : AsyncIterator[T]
        Source iterator, typically one of the service's generators.
    limit : int | None, optional
        Maximum number of items to collect (default: no limit).

    Returns
    -------
    list[T]
        Collected items.
    """
    result: list[T] = []
    if limit is not None and limit <= 0:
        return result

    async with aclosing(items) as source:  # type: ignore[type-var]
        async for item in source:
            result.append(item)
            if limit is not None and len(result) >= limit:
                break

    return result
