# games/models/__init__.py
"""
Data models for the game catalog crawler.
"""

from .game import GameRecord, EnrichedGame, EXPORT_COLUMNS
from .crawl_state import CrawlState

__all__ = [
    "GameRecord",
    "EnrichedGame",
    "EXPORT_COLUMNS",
    "CrawlState"
]
