"""
Pytest configuration and fixtures for ytstreams tests.
"""

from __future__ import annotations

import pytest

from ytstreams.config.settings import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a short retry budget and default InnerTube context."""
    return Settings(
        initial_page_retries=2,
        request_timeout=5.0,
        assume_grouped_status_order=True,
    )
