# games/pipeline/__init__.py
"""
Core pipeline components for the game catalog crawl.
"""

from .enricher import GameEnricher
from .exporter import CatalogExporter
from .crawler import CatalogCrawler

__all__ = [
    "GameEnricher",
    "CatalogExporter",
    "CatalogCrawler"
]
