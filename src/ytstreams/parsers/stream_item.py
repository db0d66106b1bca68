"""
Per-item extraction for the channel Streams tab.

Each listed stream is a ``videoRenderer`` node. ``ChannelStreamData`` is a
read-only view over one such node that derives title, author, duration,
thumbnails and live/upcoming/past status from the heterogeneous text, badge
and overlay structures YouTube uses. Every field is optional here; the
pagination service decides which absences are fatal.
"""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from ytstreams.models.stream import StreamStatus
from ytstreams.utils.json_tree import (
    first_or_none,
    get_array,
    get_int,
    get_path,
    get_property,
    get_string,
    get_text,
)

# m:ss, mm:ss, h:mm:ss, hh:mm:ss; ASCII digits only, whole label
_DURATION_PATTERNS = [
    re.compile(r"(?P<m>[0-9]):(?P<s>[0-5][0-9])"),
    re.compile(r"(?P<m>[0-9]{2}):(?P<s>[0-5][0-9])"),
    re.compile(r"(?P<h>[0-9]):(?P<m>[0-5][0-9]):(?P<s>[0-5][0-9])"),
    re.compile(r"(?P<h>[0-9]{2}):(?P<m>[0-5][0-9]):(?P<s>[0-5][0-9])"),
]

_LIVE_STYLES = {"LIVE", "LIVE_NOW"}
_UPCOMING_STYLE = "UPCOMING"


def parse_duration(text: str | None) -> _dt.timedelta | None:
    """
    Parse a listing duration label such as ``"1:05"`` or ``"1:02:03"``.

    Parameters
    ----------
    text : str | None
        Duration label from ``lengthText``.

    Returns
    -------
    datetime.timedelta | None
        The parsed duration, or None if ``text`` is missing or does not
        match one of ``m:ss``, ``mm:ss``, ``h:mm:ss``, ``hh:mm:ss``.
    """
    if text is None:
        return None

    for pattern in _DURATION_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            parts = match.groupdict()
            return _dt.timedelta(
                hours=int(parts.get("h") or 0),
                minutes=int(parts["m"]),
                seconds=int(parts["s"]),
            )

    return None


@dataclass(frozen=True)
class ThumbnailData:
    """Raw thumbnail descriptor; any field may be missing."""

    url: str | None
    width: int | None
    height: int | None

    @classmethod
    def from_node(cls, node: Any) -> ThumbnailData:
        return cls(
            url=get_string(node, "url"),
            width=get_int(node, "width"),
            height=get_int(node, "height"),
        )


class ChannelStreamData:
    """
    Read-only view over a ``videoRenderer`` node.

    Fields are computed on first access and cached; the underlying tree is
    never modified.

    Parameters
    ----------
    content : Any
        The ``videoRenderer`` value from a parsed response.
    """

    def __init__(self, content: Any) -> None:
        self._content = content

    @cached_property
    def id(self) -> str | None:
        return get_string(self._content, "videoId")

    @cached_property
    def title(self) -> str | None:
        return get_text(get_property(self._content, "title"))

    @cached_property
    def _author_details(self) -> Any | None:
        for key in ("longBylineText", "shortBylineText"):
            runs = get_array(get_property(self._content, key), "runs")
            if runs:
                return runs[0]
        return None

    @cached_property
    def author(self) -> str | None:
        return get_string(self._author_details, "text")

    @cached_property
    def channel_id(self) -> str | None:
        browse_id = get_string(
            get_path(self._author_details, "navigationEndpoint", "browseEndpoint"),
            "browseId",
        )
        if browse_id is not None:
            return browse_id

        return get_string(
            get_path(
                self._content,
                "channelThumbnailSupportedRenderers",
                "channelThumbnailWithLinkRenderer",
                "navigationEndpoint",
                "browseEndpoint",
            ),
            "browseId",
        )

    @cached_property
    def duration(self) -> _dt.timedelta | None:
        length_text = get_property(self._content, "lengthText")

        # simpleText and runs are tried independently; an unparseable
        # simpleText still lets the runs form win.
        duration = parse_duration(get_string(length_text, "simpleText"))
        if duration is not None:
            return duration

        runs = get_array(length_text, "runs")
        if runs is None:
            return None
        return parse_duration(
            "".join(t for t in (get_string(r, "text") for r in runs) if t is not None)
        )

    @cached_property
    def thumbnails(self) -> list[ThumbnailData]:
        nodes = get_array(get_property(self._content, "thumbnail"), "thumbnails") or []
        return [ThumbnailData.from_node(node) for node in nodes]

    @cached_property
    def time_status_style(self) -> str | None:
        overlays = get_array(self._content, "thumbnailOverlays") or []
        return first_or_none(
            style
            for style in (
                get_string(
                    get_property(overlay, "thumbnailOverlayTimeStatusRenderer"), "style"
                )
                for overlay in overlays
            )
            if style is not None
        )

    @cached_property
    def has_live_badge(self) -> bool:
        badges = get_array(self._content, "badges") or []
        for badge in badges:
            style = get_string(get_property(badge, "metadataBadgeRenderer"), "style")
            if style is not None and style.upper() in _LIVE_STYLES:
                return True
        return False

    @cached_property
    def is_live(self) -> bool:
        style = self.time_status_style
        return (style is not None and style.upper() in _LIVE_STYLES) or self.has_live_badge

    @cached_property
    def is_upcoming(self) -> bool:
        style = self.time_status_style
        return (style is not None and style.upper() == _UPCOMING_STYLE) or (
            get_property(self._content, "upcomingEventData") is not None
        )

    @property
    def status(self) -> StreamStatus:
        """Live wins over upcoming when both signals are present."""
        if self.is_live:
            return StreamStatus.LIVE
        if self.is_upcoming:
            return StreamStatus.UPCOMING
        return StreamStatus.PAST

    def __repr__(self) -> str:
        return f"ChannelStreamData(id={self.id!r}, title={self.title!r})"
