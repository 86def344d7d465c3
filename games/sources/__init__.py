# games/sources/__init__.py
"""
External scrape sources for game data.
"""

from .google_search import (
    PublisherSource,
    NullPublisherSource,
    GoogleSearchPublisherSource,
    parse_publisher,
)

__all__ = [
    "PublisherSource",
    "NullPublisherSource",
    "GoogleSearchPublisherSource",
    "parse_publisher"
]
