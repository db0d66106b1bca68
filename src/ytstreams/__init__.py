"""
ytstreams - YouTube channel streams listing.

Extracts live, upcoming and past stream metadata from a channel's
"Streams" tab by scraping the embedded page data and following the
InnerTube continuation tokens until the listing is exhausted.
"""

from __future__ import annotations

__version__ = "0.3.0"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__license__"]
