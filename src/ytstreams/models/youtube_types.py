"""
Custom validated types for YouTube identifiers.

Provides strongly-typed wrappers for YouTube IDs that enforce format and length
constraints at the type level, plus helpers that normalize IDs given as URLs.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BeforeValidator, Field

_CHANNEL_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]{22}$")
_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")

_CHANNEL_URL_PATTERNS = [
    re.compile(r"youtube\..+?/channel/(.*?)(?:\?|&|/|$)"),
]

_VIDEO_URL_PATTERNS = [
    re.compile(r"youtube\..+?/watch.*?v=(.*?)(?:&|/|#|$)"),
    re.compile(r"youtu\.be/(.*?)(?:\?|&|/|#|$)"),
    re.compile(r"youtube\..+?/embed/(.*?)(?:\?|&|/|#|$)"),
    re.compile(r"youtube\..+?/shorts/(.*?)(?:\?|&|/|#|$)"),
    re.compile(r"youtube\..+?/live/(.*?)(?:\?|&|/|#|$)"),
]


def validate_channel_id(v: str) -> str:
    """Validate YouTube Channel ID format."""
    if not isinstance(v, str):
        raise TypeError("ChannelId must be a string")

    # Check length
    if len(v) != 24:
        raise ValueError(
            f"ChannelId must be exactly 24 characters long, got {len(v)}: {v}"
        )

    # Check prefix
    if not v.startswith("UC"):
        raise ValueError(f'ChannelId must start with "UC", got: {v}')

    # Check valid characters (alphanumeric, hyphens, underscores)
    if not _CHANNEL_ID_RE.match(v):
        raise ValueError(f"ChannelId contains invalid characters: {v}")

    return v


def validate_video_id(v: str) -> str:
    """Validate YouTube Video ID format."""
    if not isinstance(v, str):
        raise TypeError("VideoId must be a string")

    # Check length
    if len(v) != 11:
        raise ValueError(
            f"VideoId must be exactly 11 characters long, got {len(v)}: {v}"
        )

    # Check valid characters (alphanumeric, hyphens, underscores)
    if not _VIDEO_ID_RE.match(v):
        raise ValueError(f"VideoId contains invalid characters: {v}")

    return v


def parse_channel_id(value: str) -> str | None:
    """
    Normalize a channel ID or channel URL into a bare channel ID.

    Parameters
    ----------
    value : str
        Either a channel ID (``UC...``) or a URL such as
        ``https://www.youtube.com/channel/UC.../streams``.

    Returns
    -------
    str | None
        The channel ID, or None if ``value`` contains no valid channel ID.
    """
    value = value.strip()
    if _CHANNEL_ID_RE.match(value):
        return value

    for pattern in _CHANNEL_URL_PATTERNS:
        match = pattern.search(value)
        if match and _CHANNEL_ID_RE.match(match.group(1)):
            return match.group(1)

    return None


def parse_video_id(value: str) -> str | None:
    """
    Normalize a video ID or video URL into a bare video ID.

    Supports ``watch?v=``, ``youtu.be/``, ``/embed/``, ``/shorts/`` and
    ``/live/`` URL forms.

    Parameters
    ----------
    value : str
        Either an 11-character video ID or a YouTube video URL.

    Returns
    -------
    str | None
        The video ID, or None if ``value`` contains no valid video ID.
    """
    value = value.strip()
    if _VIDEO_ID_RE.match(value):
        return value

    for pattern in _VIDEO_URL_PATTERNS:
        match = pattern.search(value)
        if match and _VIDEO_ID_RE.match(match.group(1)):
            return match.group(1)

    return None


# Type aliases for use in Pydantic models
ChannelId = Annotated[
    str,
    BeforeValidator(validate_channel_id),
    Field(description="YouTube Channel ID (24 chars, starts with UC)"),
]

VideoId = Annotated[
    str,
    BeforeValidator(validate_video_id),
    Field(description="YouTube Video ID (11 chars, alphanumeric)"),
]
