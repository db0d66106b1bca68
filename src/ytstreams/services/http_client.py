"""
HTTP transport for YouTube page and InnerTube requests.

Each request runs in its own ``httpx.AsyncClient`` context so connections are
released on every exit path, including task cancellation and parse failures.
An optional ``CancellationToken`` is checked before a request is sent; once a
request is in flight, cancelling the awaiting asyncio task aborts it and the
client context closes the connection.
Failures are not retried here; they surface as ``TransportError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ytstreams.config.settings import Settings, settings as default_settings
from ytstreams.exceptions import TransportError
from ytstreams.utils.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class YouTubeHttpClient:
    """
    Minimal async HTTP client for YouTube.

    Parameters
    ----------
    settings : Settings | None, optional
        Settings providing timeout and header values (default: global settings).
    transport : httpx.AsyncBaseTransport | None, optional
        Custom transport, e.g. ``httpx.MockTransport`` in tests (default: None).

    Examples
    --------
    >>> client = YouTubeHttpClient()
    >>> html = await client.fetch_text("https://www.youtube.com/channel/UC.../streams")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "User-Agent": self._settings.user_agent,
            "Accept-Language": self._settings.accept_language,
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            follow_redirects=True,
            timeout=self._settings.request_timeout,
            headers=self.headers,
            transport=self._transport,
        )

    async def fetch_text(
        self, url: str, cancellation: CancellationToken | None = None
    ) -> str:
        """
        GET ``url`` and return the response body as text.

        Raises
        ------
        TransportError
            On a network failure or a non-2xx status code.
        OperationCancelledError
            If ``cancellation`` was tripped before the request was sent.
        """
        if cancellation is not None:
            cancellation.check_cancelled()

        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(
                message=f"GET {url} failed: {type(e).__name__}: {e}",
                url=url,
                original_error=e,
            ) from e

        self._ensure_success(response, "GET", url)
        return response.text

    async def post_json(
        self,
        url: str,
        body: dict[str, Any],
        cancellation: CancellationToken | None = None,
    ) -> str:
        """
        POST ``body`` as JSON to ``url`` and return the response body as text.

        Raises
        ------
        TransportError
            On a network failure or a non-2xx status code.
        OperationCancelledError
            If ``cancellation`` was tripped before the request was sent.
        """
        if cancellation is not None:
            cancellation.check_cancelled()

        try:
            async with self._client() as client:
                response = await client.post(url, json=body)
        except httpx.HTTPError as e:
            raise TransportError(
                message=f"POST {url} failed: {type(e).__name__}: {e}",
                url=url,
                original_error=e,
            ) from e

        self._ensure_success(response, "POST", url)
        return response.text

    @staticmethod
    def _ensure_success(response: httpx.Response, method: str, url: str) -> None:
        if response.is_success:
            return

        logger.warning("%s %s returned HTTP %d", method, url, response.status_code)
        raise TransportError(
            message=f"{method} {url} returned unexpected status {response.status_code}",
            url=url,
            status_code=response.status_code,
        )
