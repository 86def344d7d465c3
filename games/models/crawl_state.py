# games/models/crawl_state.py
"""
Crawl progress threaded through the pagination loop.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .game import EnrichedGame


@dataclass(frozen=True)
class CrawlState:
    """
    Offset, batch index and the accumulated games of one crawl.

    Each step returns a new state; records only ever grow.
    """
    offset: int = 0
    batch_index: int = 1
    records: Tuple[EnrichedGame, ...] = ()

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def batches_completed(self) -> int:
        return self.batch_index - 1

    def advance(self, new_records: Iterable[EnrichedGame], page_size: int) -> "CrawlState":
        """State after a non-empty batch: next page, next index, records appended"""
        return CrawlState(
            offset=self.offset + page_size,
            batch_index=self.batch_index + 1,
            records=self.records + tuple(new_records),
        )
