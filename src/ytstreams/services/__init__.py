"""
Services for fetching and paginating a channel's Streams tab.
"""

from __future__ import annotations

from ytstreams.services.channel_streams_service import (
    ChannelStreamsService,
    PaginationPhase,
    PaginationState,
    collect,
)
from ytstreams.services.http_client import YouTubeHttpClient
from ytstreams.services.streams_controller import ChannelStreamsController

__all__ = [
    "ChannelStreamsController",
    "ChannelStreamsService",
    "PaginationPhase",
    "PaginationState",
    "YouTubeHttpClient",
    "collect",
]
