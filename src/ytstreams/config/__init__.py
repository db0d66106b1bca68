"""
Configuration management module for ytstreams.

Handles application settings loaded from environment variables, including
HTTP behaviour and the static InnerTube client context.
"""

from __future__ import annotations

from ytstreams.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
