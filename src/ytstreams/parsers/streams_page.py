"""
Initial page data extraction for a channel's Streams tab.

The first page of the listing is not served as JSON; it is embedded in the
HTML document as a ``ytInitialData`` JavaScript assignment inside one of the
page's ``<script>`` elements.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any

from bs4 import BeautifulSoup

from ytstreams.utils.json_text import extract_json_object, try_parse_json

logger = logging.getLogger(__name__)

INITIAL_DATA_MARKER = "ytInitialData"


def _extract_initial_data_text(script: str) -> str | None:
    """
    Cut the ``ytInitialData`` JSON object out of a script body.

    Parameters
    ----------
    script : str
        Text content of a ``<script>`` element.

    Returns
    -------
    str | None
        The balanced JSON object text, or None if the marker or an opening
        brace after it is missing, or the braces never balance.
    """
    index = script.find(INITIAL_DATA_MARKER)
    if index < 0:
        return None

    json_start = script.find("{", index)
    if json_start < 0:
        return None

    return extract_json_object(script, json_start)


class ChannelStreamsPage:
    """
    Parsed HTML of a channel's Streams tab.

    Use ``try_parse`` rather than the constructor: it skips HTML parsing
    altogether for documents that cannot contain the initial data.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed HTML document.
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def try_parse(cls, raw: str) -> ChannelStreamsPage | None:
        """
        Parse the page HTML if it mentions ``ytInitialData`` at all.

        Parameters
        ----------
        raw : str
            Raw HTML of the Streams tab.

        Returns
        -------
        ChannelStreamsPage | None
            The parsed page, or None when the marker is absent.
        """
        if INITIAL_DATA_MARKER not in raw:
            logger.debug("Page has no %s marker (%d chars)", INITIAL_DATA_MARKER, len(raw))
            return None

        return cls(BeautifulSoup(raw, "html.parser"))

    @cached_property
    def initial_data(self) -> Any | None:
        """
        The parsed ``ytInitialData`` tree, or None if it cannot be recovered.

        Scripts are scanned in document order; the first one yielding a
        non-blank JSON object is parsed.
        """
        for script in self._soup.find_all("script"):
            content = script.string or script.get_text()
            json_text = _extract_initial_data_text(content)
            if json_text is not None and json_text.strip():
                return try_parse_json(json_text)

        return None
