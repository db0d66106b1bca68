"""
Request layer for a channel's Streams tab.

Fetches either the first page (HTML with embedded initial data) or a
continuation page (InnerTube ``browse`` JSON) and hands back a parsed
``ChannelStreamsResponse``.
"""

from __future__ import annotations

import logging
from typing import Any

from ytstreams.config.settings import Settings, settings as default_settings
from ytstreams.exceptions import ExtractionError
from ytstreams.parsers.streams_page import ChannelStreamsPage
from ytstreams.parsers.streams_response import ChannelStreamsResponse
from ytstreams.services.http_client import YouTubeHttpClient
from ytstreams.utils.cancellation import CancellationToken
from ytstreams.utils.json_tree import null_if_blank

logger = logging.getLogger(__name__)

STREAMS_PAGE_URL = "https://www.youtube.com/channel/{channel_id}/streams"
BROWSE_URL = "https://www.youtube.com/youtubei/v1/browse"


class ChannelStreamsController:
    """
    Fetches Streams tab pages for a channel.

    Parameters
    ----------
    http_client : YouTubeHttpClient | None, optional
        Transport used for requests (default: a new ``YouTubeHttpClient``).
    settings : Settings | None, optional
        Settings providing retry count and InnerTube context
        (default: global settings).
    """

    def __init__(
        self,
        http_client: YouTubeHttpClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._http = http_client or YouTubeHttpClient(settings=self._settings)

    def build_continuation_body(self, continuation_token: str) -> dict[str, Any]:
        """Build the ``browse`` request body; the token is passed through untouched."""
        return {
            "continuation": continuation_token,
            "context": self._settings.innertube_context(),
        }

    async def get_response(
        self,
        channel_id: str,
        continuation_token: str | None = None,
        cancellation: CancellationToken | None = None,
    ) -> ChannelStreamsResponse:
        """
        Fetch one page of the channel's Streams tab.

        Parameters
        ----------
        channel_id : str
            YouTube channel ID.
        continuation_token : str | None, optional
            Token from the previous page; None fetches the first page.
        cancellation : CancellationToken | None, optional
            Checked before every outbound request.

        Returns
        -------
        ChannelStreamsResponse
            The parsed response.

        Raises
        ------
        ExtractionError
            If the first page never yields initial data, or a continuation
            body is not valid JSON.
        TransportError
            On HTTP or network failure.
        OperationCancelledError
            If cancellation was requested before a request.
        """
        token = null_if_blank(continuation_token)
        if token is None:
            return await self._get_first_page(channel_id, cancellation)

        if cancellation is not None:
            cancellation.check_cancelled()

        raw = await self._http.post_json(
            BROWSE_URL, self.build_continuation_body(token), cancellation=cancellation
        )
        return ChannelStreamsResponse.parse(raw)

    async def _get_first_page(
        self,
        channel_id: str,
        cancellation: CancellationToken | None,
    ) -> ChannelStreamsResponse:
        url = STREAMS_PAGE_URL.format(channel_id=channel_id)
        max_retries = self._settings.initial_page_retries

        for attempt in range(max_retries + 1):
            if cancellation is not None:
                cancellation.check_cancelled()

            html = await self._http.fetch_text(url, cancellation=cancellation)
            page = ChannelStreamsPage.try_parse(html)
            initial_data = page.initial_data if page is not None else None
            if initial_data is not None:
                return ChannelStreamsResponse.from_data(initial_data)

            if attempt < max_retries:
                logger.warning(
                    "Streams page for channel %s had no initial data "
                    "(attempt %d/%d), retrying",
                    channel_id,
                    attempt + 1,
                    max_retries + 1,
                )

        raise ExtractionError(
            message="Channel streams page is broken. Please try again in a few minutes.",
            field_name="initial data",
        )
