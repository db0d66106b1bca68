"""
Schema-agnostic queries over parsed JSON trees.

YouTube responses wrap the same data in several envelope shapes, so the
extractors never walk fixed paths from the root. Instead they look up
semantically named keys (``videoRenderer``, ``nextContinuationData``, ...)
wherever they appear, then read short, well-known paths relative to them.

A tree is whatever ``json.loads`` returns: ``dict``, ``list``, ``str``,
``int``, ``float``, ``bool`` or ``None``. Every helper here tolerates any of
those types and returns ``None`` (or an empty sequence) instead of raising
when the shape does not match.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


def iter_descendant_properties(node: Any, name: str) -> Iterator[Any]:
    """
    Yield every value stored under ``name`` anywhere in ``node``.

    Traversal is depth-first and pre-order: at each object the value of its
    own ``name`` key (if any) is yielded before any child is descended into,
    children are visited in document order, and matched values are searched
    as well. An explicit stack keeps deeply nested payloads clear of the
    recursion limit.

    Parameters
    ----------
    node : Any
        Root of the parsed JSON tree.
    name : str
        Exact, case-sensitive property name to look for.

    Yields
    ------
    Any
        Each matching property value, in tree order.
    """
    stack: list[Any] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            if name in current:
                yield current[name]
            children = list(current.values())
        elif isinstance(current, list):
            children = current
        else:
            continue
        # Reversed so the first child is popped first
        stack.extend(reversed(children))


def get_property(node: Any, name: str) -> Any | None:
    """Return ``node[name]`` if ``node`` is an object, otherwise None."""
    if isinstance(node, dict):
        return node.get(name)
    return None


def get_path(node: Any, *names: str) -> Any | None:
    """Follow a chain of property names, returning None at the first miss."""
    current = node
    for name in names:
        current = get_property(current, name)
        if current is None:
            return None
    return current


def get_array(node: Any, name: str | None = None) -> list[Any] | None:
    """Return the array at ``node`` (or ``node[name]``), or None if not an array."""
    value = node if name is None else get_property(node, name)
    return value if isinstance(value, list) else None


def get_string(node: Any, name: str | None = None) -> str | None:
    """Return the string at ``node`` (or ``node[name]``), or None if not a string."""
    value = node if name is None else get_property(node, name)
    return value if isinstance(value, str) else None


def get_int(node: Any, name: str | None = None) -> int | None:
    """Return the integer at ``node`` (or ``node[name]``), or None."""
    value = node if name is None else get_property(node, name)
    # bool is an int subclass but never a valid size
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def first_or_none(items: Iterable[T]) -> T | None:
    """Return the first item of ``items``, or None if it is empty."""
    for item in items:
        return item
    return None


def null_if_blank(value: str | None) -> str | None:
    """Return None for None or whitespace-only strings, else the value."""
    if value is None or not value.strip():
        return None
    return value


def concat_text_runs(node: Any) -> str | None:
    """
    Concatenate the ``text`` of every run in ``node["runs"]``.

    YouTube expresses rich text as ``{"runs": [{"text": ...}, ...]}``. Runs
    without a string ``text`` are skipped.

    Returns
    -------
    str | None
        The joined text, or None when ``node`` has no ``runs`` array.
    """
    runs = get_array(node, "runs")
    if runs is None:
        return None
    return "".join(
        text for text in (get_string(run, "text") for run in runs) if text is not None
    )


def get_text(node: Any) -> str | None:
    """Read a text node in either ``simpleText`` or ``runs`` form."""
    simple = get_string(node, "simpleText")
    if simple is not None:
        return simple
    return concat_text_runs(node)
