"""
Envelope-level extraction for Streams tab responses.

The same logical listing arrives in several envelope shapes: the initial
page data (``contents``), and continuation responses wrapped in
``onResponseReceivedActions`` or ``onResponseReceivedCommands``. This module
resolves the effective content root and derives, independently of each
other, the listed streams, the next continuation token and the channel
title.

Continuation token sources, in priority order:

1. ``richGridRenderer.contents[*].continuationItemRenderer``
2. ``appendContinuationItemsAction.continuationItems[*]`` (renderer, then
   ``nextContinuationData``)
3. any ``nextContinuationData.continuation``
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from typing import Any

from ytstreams.exceptions import ExtractionError
from ytstreams.parsers.stream_item import ChannelStreamData
from ytstreams.utils.json_tree import (
    concat_text_runs,
    first_or_none,
    get_array,
    get_path,
    get_property,
    get_string,
    iter_descendant_properties,
    null_if_blank,
)

logger = logging.getLogger(__name__)

_CONTENT_ROOT_KEYS = (
    "contents",
    "onResponseReceivedActions",
    "onResponseReceivedCommands",
)

_HEADER_RENDERER_KEYS = (
    "pageHeaderRenderer",
    "c4TabbedHeaderRenderer",
    "channelMetadataRenderer",
)


def _token_from_continuation_renderer(renderer: Any) -> str | None:
    """Read the token from a ``continuationItemRenderer`` in either known shape."""
    token = null_if_blank(
        get_string(
            get_path(renderer, "continuationEndpoint", "continuationCommand"), "token"
        )
    )
    if token is not None:
        return token

    return null_if_blank(get_string(get_property(renderer, "continuationCommand"), "token"))


class ChannelStreamsResponse:
    """
    Parsed Streams tab response (initial page data or continuation).

    Parameters
    ----------
    content : Any
        The parsed JSON envelope.

    Examples
    --------
    >>> response = ChannelStreamsResponse.parse(body)
    >>> [s.id for s in response.streams]
    ['dQw4w9WgXcQ', ...]
    >>> response.continuation_token
    '4qmFsgKrCBIY...'
    """

    def __init__(self, content: Any) -> None:
        self._content = content

    @classmethod
    def parse(cls, raw: str) -> ChannelStreamsResponse:
        """
        Parse a raw JSON response body.

        Raises
        ------
        ExtractionError
            If ``raw`` is not valid JSON.
        """
        try:
            content = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as e:
            raise ExtractionError(
                message=f"Streams response is not valid JSON: {e}",
                field_name="response body",
            ) from e
        return cls(content)

    @classmethod
    def from_data(cls, content: Any) -> ChannelStreamsResponse:
        """Wrap an already-parsed envelope."""
        return cls(content)

    @cached_property
    def content_root(self) -> Any:
        """The first present of the known root keys, else the whole envelope."""
        for key in _CONTENT_ROOT_KEYS:
            value = get_property(self._content, key)
            if value is not None:
                return value
        return self._content

    @cached_property
    def streams(self) -> list[ChannelStreamData]:
        """Every ``videoRenderer`` under the content root, in tree order."""
        return [
            ChannelStreamData(node)
            for node in iter_descendant_properties(self.content_root, "videoRenderer")
        ]

    @cached_property
    def continuation_token(self) -> str | None:
        """Token for the next page, or None when the listing ends here."""
        root = self.content_root

        # Prefer tokens that belong to the streams grid itself
        for grid in iter_descendant_properties(root, "richGridRenderer"):
            for item in get_array(grid, "contents") or []:
                token = _token_from_continuation_renderer(
                    get_property(item, "continuationItemRenderer")
                )
                if token is not None:
                    logger.debug("Continuation token found in richGridRenderer")
                    return token

        for action in iter_descendant_properties(root, "appendContinuationItemsAction"):
            for item in get_array(action, "continuationItems") or []:
                token = _token_from_continuation_renderer(
                    get_property(item, "continuationItemRenderer")
                )
                if token is not None:
                    logger.debug("Continuation token found in appendContinuationItemsAction")
                    return token

                token = null_if_blank(
                    get_string(get_property(item, "nextContinuationData"), "continuation")
                )
                if token is not None:
                    logger.debug("Continuation token found in continuationItems")
                    return token

        # Formats that only expose nextContinuationData
        for next_data in iter_descendant_properties(root, "nextContinuationData"):
            token = null_if_blank(get_string(next_data, "continuation"))
            if token is not None:
                logger.debug("Continuation token found in nextContinuationData")
                return token

        return None

    @cached_property
    def _header_renderer(self) -> Any | None:
        # Headers sit outside the content root, so search the whole envelope
        for key in _HEADER_RENDERER_KEYS:
            header = first_or_none(iter_descendant_properties(self._content, key))
            if header is not None:
                return header
        return None

    @cached_property
    def channel_title(self) -> str | None:
        """Channel display name from the page header, if present."""
        header = self._header_renderer
        if header is None:
            return None

        title = get_property(header, "title")
        candidates = (
            get_string(header, "pageTitle"),
            get_string(title),
            get_string(title, "simpleText"),
            concat_text_runs(title),
        )
        return first_or_none(c for c in candidates if null_if_blank(c) is not None)
