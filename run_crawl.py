#!/usr/bin/env python3
"""
IGDB catalog crawl.

Pages through every game matching the release date and rating floors,
enriches each one and keeps gameData.json / gameData.xlsx up to date after
every page. Ctrl+C stops cleanly after the current batch.

Credentials: CLIENT_ID plus API_KEY (access token) or CLIENT_SECRET, from
the environment or a .env file.
"""

import argparse
import asyncio
import logging
import signal
import time
from typing import Optional

from games import (
    CatalogCrawler,
    CatalogError,
    CatalogExporter,
    CrawlConfig,
    GameEnricher,
    GoogleSearchPublisherSource,
    IGDBClient,
    NullPublisherSource,
)
from games.utils import format_duration

logger = logging.getLogger("run_crawl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crawl the IGDB games catalog into JSON and Excel")
    parser.add_argument("--page-size", type=int, help="Games per query (max 500)")
    parser.add_argument("--max-batches", type=int, help="Stop after this many queries")
    parser.add_argument("--release-date-floor", type=int,
                        help="Only games released after this unix timestamp")
    parser.add_argument("--rating-floor", type=float, help="Only games with a higher total rating")
    parser.add_argument("--delay", dest="batch_delay", type=float, help="Seconds to wait between batches")
    parser.add_argument("--timeout", dest="request_timeout", type=float,
                        help="Per-request timeout in seconds (default: none)")
    parser.add_argument("--json-out", dest="json_path", help="JSON output path")
    parser.add_argument("--xlsx-out", dest="workbook_path", help="Workbook output path")
    parser.add_argument("--strict-developer", dest="fatal_developer_errors", action="store_true",
                        default=None, help="Abort the crawl when a developer lookup fails")
    parser.add_argument("--utc-dates", dest="release_dates_utc", action="store_true", default=None,
                        help="Format release dates in UTC instead of local time")
    parser.add_argument("--skip-publisher", action="store_true",
                        help="Do not scrape web search results for publishers")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


async def crawl(config: CrawlConfig, skip_publisher: bool = False,
                stop_event: Optional[asyncio.Event] = None) -> int:
    """Run one crawl and return the number of games saved"""
    async with IGDBClient(config) as client:
        if skip_publisher:
            publisher_source = NullPublisherSource()
        else:
            publisher_source = GoogleSearchPublisherSource(client.session, config.search_url)

        crawler = CatalogCrawler(
            client,
            GameEnricher.from_config(client, publisher_source, config),
            CatalogExporter.from_config(config),
            config,
            stop_event=stop_event,
        )
        state = await crawler.run()

    logger.info(f"📡 {client.request_count} IGDB requests")
    return state.total


def _install_stop_handlers(stop_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except (NotImplementedError, RuntimeError):
            # Windows event loops have no signal handler support
            pass


async def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    overrides = {
        key: getattr(args, key)
        for key in (
            "page_size", "max_batches", "release_date_floor", "rating_floor", "batch_delay",
            "request_timeout", "json_path", "workbook_path", "fatal_developer_errors",
            "release_dates_utc",
        )
    }

    start_time = time.time()
    try:
        config = CrawlConfig.from_env(**overrides)
        config.require_credentials()

        stop_event = asyncio.Event()
        _install_stop_handlers(stop_event)

        total = await crawl(config, skip_publisher=args.skip_publisher, stop_event=stop_event)
    except CatalogError as e:
        logger.error(f"❌ Crawl failed after {format_duration(time.time() - start_time)}: {e}")
        return 1

    logger.info(f"🎉 Saved {total} games in {format_duration(time.time() - start_time)}")
    logger.info(f"📄 {config.json_path}, {config.workbook_path}")
    return 0


def cli() -> int:
    return asyncio.run(main())


if __name__ == "__main__":
    raise SystemExit(cli())
