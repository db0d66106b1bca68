"""
Builders for raw YouTube payloads.

Produces ``videoRenderer`` nodes, the three envelope shapes a Streams tab
listing can arrive in, and the HTML page embedding ``ytInitialData``. The
shapes follow what YouTube serves, trimmed to the keys the extractors read.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from tests.factories.id_factory import CHANNEL_ID

_STATUS_OVERLAY_STYLES = {
    "live": "LIVE",
    "upcoming": "UPCOMING",
    "past": "DEFAULT",
}

_DEFAULT = object()


def make_video_renderer(
    video_id: Optional[str],
    *,
    title: Optional[str] = "Stream title",
    author: Optional[str] = "Rick Astley",
    channel_id: Optional[str] = CHANNEL_ID,
    length: Optional[str] = "1:02:03",
    status: str = "past",
    thumbnails: Any = _DEFAULT,
    title_as_runs: bool = False,
) -> dict[str, Any]:
    """
    Build a ``videoRenderer`` node.

    Passing None for an optional argument leaves the corresponding key out.
    ``status`` is one of ``"live"``, ``"upcoming"`` or ``"past"``.
    """
    node: dict[str, Any] = {}

    if video_id is not None:
        node["videoId"] = video_id

    if title is not None:
        node["title"] = (
            {
                "runs": [
                    {"text": title[: len(title) // 2]},
                    {"text": title[len(title) // 2 :]},
                ]
            }
            if title_as_runs
            else {"simpleText": title}
        )

    if author is not None:
        run: dict[str, Any] = {"text": author}
        if channel_id is not None:
            run["navigationEndpoint"] = {"browseEndpoint": {"browseId": channel_id}}
        node["longBylineText"] = {"runs": [run]}

    if length is not None:
        node["lengthText"] = {"simpleText": length}

    if thumbnails is _DEFAULT:
        thumbnails = [
            {
                "url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
                "width": 480,
                "height": 270,
            }
        ]
    node["thumbnail"] = {"thumbnails": thumbnails}

    node["thumbnailOverlays"] = [
        {"thumbnailOverlayTimeStatusRenderer": {"style": _STATUS_OVERLAY_STYLES[status]}}
    ]
    if status == "live":
        node["badges"] = [{"metadataBadgeRenderer": {"style": "LIVE_NOW"}}]
    if status == "upcoming":
        node["upcomingEventData"] = {"startTime": "1893456000"}

    return node


def _grid_items(
    renderers: list[dict[str, Any]], continuation_token: Optional[str]
) -> list[dict[str, Any]]:
    items: list[dict[str, Any]] = [
        {"richItemRenderer": {"content": {"videoRenderer": renderer}}}
        for renderer in renderers
    ]
    if continuation_token is not None:
        items.append(
            {
                "continuationItemRenderer": {
                    "continuationEndpoint": {
                        "continuationCommand": {"token": continuation_token}
                    }
                }
            }
        )
    return items


def make_initial_data(
    renderers: list[dict[str, Any]],
    continuation_token: Optional[str] = None,
    channel_title: Optional[str] = "Rick Astley",
) -> dict[str, Any]:
    """Build first-page ``ytInitialData`` with a ``richGridRenderer``."""
    data: dict[str, Any] = {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "title": "Live",
                            "content": {
                                "richGridRenderer": {
                                    "contents": _grid_items(renderers, continuation_token)
                                }
                            },
                        }
                    }
                ]
            }
        }
    }
    if channel_title is not None:
        data["header"] = {"pageHeaderRenderer": {"pageTitle": channel_title}}
    return data


def make_continuation_actions(
    renderers: list[dict[str, Any]], continuation_token: Optional[str] = None
) -> dict[str, Any]:
    """Build a continuation response wrapped in ``onResponseReceivedActions``."""
    return {
        "onResponseReceivedActions": [
            {
                "appendContinuationItemsAction": {
                    "continuationItems": _grid_items(renderers, continuation_token)
                }
            }
        ]
    }


def make_continuation_commands(
    renderers: list[dict[str, Any]], continuation_token: Optional[str] = None
) -> dict[str, Any]:
    """Build a continuation response wrapped in ``onResponseReceivedCommands``."""
    return {
        "onResponseReceivedCommands": [
            {
                "appendContinuationItemsAction": {
                    "continuationItems": _grid_items(renderers, continuation_token)
                }
            }
        ]
    }


def make_streams_page_html(initial_data: Any) -> str:
    """Embed ``initial_data`` in a Streams tab HTML document."""
    return (
        "<!DOCTYPE html><html><head><title>Rick Astley - YouTube</title>"
        '<script nonce="abc">var ytcfg = {"INNERTUBE_CONTEXT": {}};</script>'
        "</head><body>"
        f'<script nonce="abc">var ytInitialData = {json.dumps(initial_data)};</script>'
        "</body></html>"
    )
