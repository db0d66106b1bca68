"""
Pydantic models for channel stream listings.

Models
------
StreamStatus
    Lifecycle status of a stream on a channel.
Thumbnail
    A thumbnail image with its resolution.
Author
    The channel a stream belongs to.
ChannelStream
    Metadata for one stream listed on a channel's Streams tab.
"""

from __future__ import annotations

import datetime as _dt
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ytstreams.models.youtube_types import ChannelId, VideoId


class StreamStatus(str, Enum):
    """Status of a stream on a channel."""

    LIVE = "live"  # Currently broadcasting
    UPCOMING = "upcoming"  # Scheduled for a future time
    PAST = "past"  # Ended, available as a recording


class Thumbnail(BaseModel):
    """
    A thumbnail image.

    Attributes
    ----------
    url : str
        Image URL.
    width : int
        Image width in pixels.
    height : int
        Image height in pixels.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    width: int = Field(ge=0)
    height: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def area(self) -> int:
        """Pixel area, used to rank thumbnails by resolution."""
        return self.width * self.height

    @classmethod
    def default_set(cls, video_id: str) -> list[Thumbnail]:
        """
        Build the standard thumbnails YouTube serves for every video.

        These are derived purely from the video ID and exist even when the
        listing carries no thumbnail data.

        Parameters
        ----------
        video_id : str
            YouTube video ID.

        Returns
        -------
        list[Thumbnail]
            Thumbnails from lowest to highest resolution.
        """
        base = f"https://img.youtube.com/vi/{video_id}"
        return [
            cls(url=f"{base}/default.jpg", width=120, height=90),
            cls(url=f"{base}/mqdefault.jpg", width=320, height=180),
            cls(url=f"{base}/hqdefault.jpg", width=480, height=360),
            cls(url=f"{base}/sddefault.jpg", width=640, height=480),
            cls(url=f"{base}/maxresdefault.jpg", width=1280, height=720),
        ]

    @staticmethod
    def highest_resolution(thumbnails: Sequence[Thumbnail]) -> Thumbnail | None:
        """Return the thumbnail with the largest area, or None if empty."""
        if not thumbnails:
            return None
        return max(thumbnails, key=lambda t: t.area)


class Author(BaseModel):
    """
    The channel that published a stream.

    Attributes
    ----------
    channel_id : ChannelId
        YouTube channel ID.
    channel_title : str
        Channel display name.
    """

    model_config = ConfigDict(frozen=True)

    channel_id: ChannelId
    channel_title: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def channel_url(self) -> str:
        """Channel page URL."""
        return f"https://www.youtube.com/channel/{self.channel_id}"


class ChannelStream(BaseModel):
    """
    Metadata for a stream listed on a channel's Streams tab.

    Instances are created once per listed item and never mutated.

    Attributes
    ----------
    id : VideoId
        YouTube video ID of the stream.
    title : str
        Stream title. May be empty; YouTube allows untitled videos.
    author : Author
        Channel that published the stream.
    duration : datetime.timedelta | None
        Recording length. Usually None for live and upcoming streams.
    thumbnails : list[Thumbnail]
        Thumbnails from the listing followed by the default set for the ID.
    status : StreamStatus
        Whether the stream is live, upcoming or past.
    """

    model_config = ConfigDict(frozen=True)

    id: VideoId
    title: str = ""
    author: Author
    duration: _dt.timedelta | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)
    status: StreamStatus

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Watch page URL."""
        return f"https://www.youtube.com/watch?v={self.id}"

    def __str__(self) -> str:
        return f"Stream ({self.title})"
