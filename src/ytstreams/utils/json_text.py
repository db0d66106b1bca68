"""
Helpers for pulling JSON values out of surrounding text.

Page scripts assign the initial data to a JavaScript variable followed by
more code, so the JSON has to be cut out by balancing braces rather than by
a regular expression.
"""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

# Upper bound on how far the brace scanner walks from the opening brace
_MAX_SCAN_LENGTH = 10_000_000


def extract_json_object(text: str, start: int = 0) -> str | None:
    """
    Extract a balanced JSON object from ``text`` starting at ``start``.

    Uses brace-counting that is aware of string literals and backslash
    escapes, so braces inside strings do not affect the depth.

    Parameters
    ----------
    text : str
        Source text, typically the body of a ``<script>`` element.
    start : int, optional
        Position of the opening ``{`` (default: 0).

    Returns
    -------
    str | None
        The shortest balanced ``{...}`` substring, or None if ``text`` has no
        opening brace at ``start`` or the braces never balance.
    """
    if start >= len(text) or text[start] != "{":
        return None

    depth = 0
    in_string = False
    escape = False
    limit = min(len(text), start + _MAX_SCAN_LENGTH)

    for i in range(start, limit):
        ch = text[i]

        if escape:
            escape = False
            continue

        if ch == "\\":
            if in_string:
                escape = True
            continue

        if ch == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]

    return None


def try_parse_json(raw: str) -> Any | None:
    """
    Parse ``raw`` as JSON, returning None instead of raising on bad input.

    Parameters
    ----------
    raw : str
        JSON text.

    Returns
    -------
    Any | None
        The parsed tree, or None when ``raw`` is not valid JSON.
    """
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, ValueError) as e:
        logger.debug("Discarding malformed JSON (%d chars): %s", len(raw), e)
        return None
