# games/__init__.py
"""
IGDB game catalog crawler with per-game enrichment.

Primary interfaces:
- CatalogCrawler: Paginated crawl loop with incremental export
- GameEnricher: Core single-game enrichment
- CatalogExporter: JSON + Excel output

Supporting components:
- IGDBClient: Async IGDB v4 client
- CrawlConfig: Crawl parameters and credentials
- BatchRateLimiter: Fixed delay between batches
"""

from .config import CrawlConfig
from .errors import (
    CatalogError,
    ConfigurationError,
    IGDBRequestError,
    FatalFetchError,
    FatalLookupError,
    DegradedResolution,
    PersistenceError,
)
from .models import GameRecord, EnrichedGame, CrawlState, EXPORT_COLUMNS
from .api_caller import IGDBClient
from .rate_limiter import BatchRateLimiter
from .sources import PublisherSource, NullPublisherSource, GoogleSearchPublisherSource
from .pipeline import GameEnricher, CatalogExporter, CatalogCrawler

__all__ = [
    # Primary interface
    "CatalogCrawler",
    "GameEnricher",
    "CatalogExporter",
    "GameRecord",
    "EnrichedGame",
    "CrawlState",
    "EXPORT_COLUMNS",

    # Supporting components
    "CrawlConfig",
    "IGDBClient",
    "BatchRateLimiter",
    "PublisherSource",
    "NullPublisherSource",
    "GoogleSearchPublisherSource",

    # Errors
    "CatalogError",
    "ConfigurationError",
    "IGDBRequestError",
    "FatalFetchError",
    "FatalLookupError",
    "DegradedResolution",
    "PersistenceError"
]
