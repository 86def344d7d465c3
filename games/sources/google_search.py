# games/sources/google_search.py
"""
Publisher lookup by scraping a Google search results page.

Best-effort only: the selectors below track Google's no-JavaScript result
markup, which is not versioned and changes without notice. Expect a share of
lookups to come back empty.
"""

import logging
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup

SEARCH_URL = "https://www.google.com/search"
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"

# Knowledge-panel row labelled "Publisher:" and the linked value inside it
PUBLISHER_ROW_SELECTOR = 'div.BNeawe.s3v9rd.AP7Wnd:-soup-contains("Publisher:")'
PUBLISHER_VALUE_SELECTOR = "span.BNeawe.tAd8D.AP7Wnd a span.XLloXe.AP7Wnd"

logger = logging.getLogger(__name__)


class PublisherSource:
    """Maps a game name to its publisher, or None"""

    async def lookup(self, name: str) -> Optional[str]:
        raise NotImplementedError


class NullPublisherSource(PublisherSource):
    """Source that never finds a publisher; used when scraping is disabled"""

    async def lookup(self, name: str) -> Optional[str]:
        return None


class GoogleSearchPublisherSource(PublisherSource):
    """
    Searches the game name and reads the "Publisher:" row of the first result.

    Network and HTTP errors propagate; the enricher downgrades them.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        search_url: str = SEARCH_URL,
        user_agent: str = USER_AGENT,
    ):
        self.session = session
        self.search_url = search_url
        self.headers = {"User-Agent": user_agent}

    async def lookup(self, name: str) -> Optional[str]:
        async with self.session.get(self.search_url, params={"q": name}, headers=self.headers) as response:
            if response.status != 200:
                logger.debug(f"Search for {name!r}: status {response.status}")
                return None
            html = await response.text()

        publisher = parse_publisher(html)
        if publisher is None:
            logger.debug(f"Search for {name!r}: no publisher row in HTML")
        return publisher


def parse_publisher(html: str) -> Optional[str]:
    """
    Extract the publisher from search result HTML.

    Args:
        html: Raw HTML of the results page

    Returns:
        Publisher name, or None when the labelled row is missing or empty
    """
    soup = BeautifulSoup(html, "lxml")

    row = soup.select_one(PUBLISHER_ROW_SELECTOR)
    if row is None:
        return None

    value = " ".join(el.get_text(strip=True) for el in row.select(PUBLISHER_VALUE_SELECTOR))
    return value.strip() or None
