"""
Factory definitions for stream models.

Provides factory-boy factories for ``Thumbnail``, ``Author`` and
``ChannelStream`` with realistic, consistent test data.
"""

from __future__ import annotations

import datetime as _dt

import factory

from tests.factories.id_factory import CHANNEL_ID, YouTubeIdFactory
from ytstreams.models.stream import Author, ChannelStream, StreamStatus, Thumbnail


class ThumbnailFactory(factory.Factory):
    """Factory for Thumbnail models."""

    class Meta:
        model = Thumbnail

    url = factory.Sequence(lambda n: f"https://i.ytimg.com/vi/thumb{n}/hqdefault.jpg")
    width = factory.LazyFunction(lambda: 480)
    height = factory.LazyFunction(lambda: 270)


class AuthorFactory(factory.Factory):
    """Factory for Author models."""

    class Meta:
        model = Author

    channel_id = factory.LazyFunction(lambda: CHANNEL_ID)
    channel_title = factory.LazyFunction(lambda: "Rick Astley")


class ChannelStreamFactory(factory.Factory):
    """Factory for ChannelStream models."""

    class Meta:
        model = ChannelStream

    id = factory.Sequence(lambda n: YouTubeIdFactory.create_video_id(f"stream-{n}"))
    title = factory.Sequence(lambda n: f"Late night stream #{n}")
    author = factory.SubFactory(AuthorFactory)
    duration = factory.LazyFunction(lambda: _dt.timedelta(hours=1, minutes=2, seconds=3))
    thumbnails = factory.LazyAttribute(
        lambda o: [ThumbnailFactory()] + Thumbnail.default_set(o.id)
    )
    status = StreamStatus.PAST
