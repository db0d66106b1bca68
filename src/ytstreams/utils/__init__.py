"""
Utility helpers for ytstreams: JSON tree queries, JSON text extraction and
cancellation tokens.
"""

from __future__ import annotations

__all__: list[str] = []
