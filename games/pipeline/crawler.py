# games/pipeline/crawler.py
"""
Pagination driver for the IGDB games catalog.

Fetches one page at a time, enriches its games sequentially, rewrites the
output files after every page and pauses before asking for the next one.
"""

import asyncio
import logging
import time
from typing import List, Optional

from ..config import CrawlConfig
from ..errors import FatalFetchError, IGDBRequestError, PersistenceError
from ..models import CrawlState, GameRecord
from ..query import games_query
from ..rate_limiter import BatchRateLimiter
from ..utils import estimate_batch_duration, format_duration
from .enricher import GameEnricher
from .exporter import CatalogExporter


class CatalogCrawler:
    """
    Drives the crawl until the catalog runs dry, the batch cap is reached
    or a stop is requested.

    Progress lives in a CrawlState value that each step returns; nothing is
    shared between runs. Fetch errors end the run, export errors do not.
    """

    def __init__(
        self,
        client,
        enricher: GameEnricher,
        exporter: CatalogExporter,
        config: CrawlConfig,
        rate_limiter: Optional[BatchRateLimiter] = None,
        stop_event: Optional[asyncio.Event] = None,
    ):
        self.client = client
        self.enricher = enricher
        self.exporter = exporter
        self.config = config
        self.rate_limiter = rate_limiter or BatchRateLimiter(config.batch_delay)
        self.stop_event = stop_event
        self.fetch_count = 0
        self.persistence_failures: List[PersistenceError] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    async def run(self) -> CrawlState:
        """
        Crawl every page.

        Returns:
            Final CrawlState holding every enriched game

        Raises:
            FatalFetchError: a catalog page could not be fetched or parsed
            FatalLookupError: a developer lookup failed while the enricher
                treats that as fatal
        """
        state = CrawlState()

        while not self._stop_requested():
            batch = await self.fetch_next_batch(state)

            if batch:
                state = await self.process_batch(state, batch)
            else:
                self.logger.info("✨ Found 0 titles matching your query")
                self.logger.info(f"✅ Completed - added {state.total} titles")

            self.persist(state)

            if not batch:
                break
            if self.config.max_batches is not None and state.batches_completed >= self.config.max_batches:
                self.logger.info(
                    f"✅ Reached the limit of {self.config.max_batches} batches - added {state.total} titles"
                )
                break
            if not await self.rate_limiter.wait(self.stop_event):
                break

        if self._stop_requested():
            self.logger.info(f"🛑 Stopped after {state.batches_completed} batches - added {state.total} titles")
        if self.enricher.degradations:
            self.logger.warning(f"{len(self.enricher.degradations)} fields could not be resolved")

        return state

    async def fetch_next_batch(self, state: CrawlState) -> List[GameRecord]:
        """
        Fetch the page of games at the state's offset.

        Returns:
            GameRecords in response order, empty when the catalog is exhausted

        Raises:
            FatalFetchError: request failed or the payload is malformed
        """
        limit = self.config.page_size
        self.logger.info(
            f"🔎 Index {state.batch_index} - Fetching {limit} titles with an offset of {state.offset}"
        )
        body = games_query(
            limit=limit,
            offset=state.offset,
            release_date_floor=self.config.release_date_floor,
            rating_floor=self.config.rating_floor,
        )

        self.fetch_count += 1
        try:
            rows = await self.client.query("games", body)
            return [GameRecord.from_api(row) for row in rows]
        except (IGDBRequestError, ValueError, TypeError) as e:
            self.logger.error(f"Fetching index {state.batch_index} failed: {e}")
            raise FatalFetchError(state.offset, e) from e

    async def process_batch(self, state: CrawlState, batch: List[GameRecord]) -> CrawlState:
        """Enrich a non-empty batch in order and return the advanced state"""
        self.logger.info(
            f"✨ Found {len(batch)} titles matching your query. "
            f"Approx. time to complete is {estimate_batch_duration(len(batch))}"
        )
        start_time = time.time()

        enriched = await self.enricher.enrich_batch(batch, start_count=state.total)

        elapsed = time.time() - start_time
        self.logger.info(f"🏁 Index {state.batch_index} finished in {format_duration(elapsed)}")
        return state.advance(enriched, self.config.page_size)

    def persist(self, state: CrawlState) -> None:
        """Rewrite the output files; failures are logged and the crawl goes on"""
        try:
            self.exporter.write(state.records)
        except PersistenceError as e:
            self.persistence_failures.append(e)
            self.logger.error(f"Error writing to the output file: {e}")

    def _stop_requested(self) -> bool:
        return self.stop_event is not None and self.stop_event.is_set()
