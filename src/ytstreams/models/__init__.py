"""
Data models for ytstreams.
"""

from __future__ import annotations

from ytstreams.models.stream import Author, ChannelStream, StreamStatus, Thumbnail
from ytstreams.models.youtube_types import (
    ChannelId,
    VideoId,
    parse_channel_id,
    parse_video_id,
)

__all__ = [
    "Author",
    "ChannelStream",
    "StreamStatus",
    "Thumbnail",
    "ChannelId",
    "VideoId",
    "parse_channel_id",
    "parse_video_id",
]
