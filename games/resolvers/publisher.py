# games/resolvers/publisher.py
"""
Publisher name from a text-extraction source keyed by game name.
"""

from typing import Optional

from ..sources import PublisherSource


async def resolve_publisher(source: PublisherSource, name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    return await source.lookup(name)
