"""
Parsers for YouTube Streams tab pages and InnerTube responses.

Modules
-------
streams_page
    Extracts the embedded ``ytInitialData`` from the first page's HTML.
streams_response
    Derives streams, continuation token and channel title from an envelope.
stream_item
    Per-stream view deriving title, author, duration, thumbnails and status.
"""

from __future__ import annotations

from ytstreams.parsers.stream_item import ChannelStreamData, ThumbnailData, parse_duration
from ytstreams.parsers.streams_page import ChannelStreamsPage
from ytstreams.parsers.streams_response import ChannelStreamsResponse

__all__ = [
    "ChannelStreamData",
    "ChannelStreamsPage",
    "ChannelStreamsResponse",
    "ThumbnailData",
    "parse_duration",
]
