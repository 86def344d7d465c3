# games/rate_limiter.py
"""
Fixed pause between catalog batches.
"""

import asyncio
import logging
from typing import Optional


class BatchRateLimiter:
    """
    Constant delay between finishing one batch and fetching the next.

    IGDB allows four requests per second; the default pause keeps the next
    page request a quarter second behind the last lookup of the batch.
    No adaptive backoff.
    """

    def __init__(self, delay_seconds: float = 0.25):
        self.delay_seconds = delay_seconds
        self.wait_count = 0
        self.logger = logging.getLogger(self.__class__.__name__)

    async def wait(self, stop_event: Optional[asyncio.Event] = None) -> bool:
        """
        Sleep for the configured delay.

        Returns:
            False if stop_event was set before or during the delay, else True
        """
        self.wait_count += 1
        if stop_event is None:
            await asyncio.sleep(self.delay_seconds)
            return True

        if stop_event.is_set():
            return False
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=self.delay_seconds)
        except asyncio.TimeoutError:
            return True

        self.logger.info("Stop requested during batch delay")
        return False
