# games/pipeline/enricher.py
"""
Single-game enrichment.

Provides GameEnricher, which turns one GameRecord into an EnrichedGame by
running every attribute resolver in a fixed order, one at a time.
"""

import logging
from datetime import timezone, tzinfo
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from ..errors import DegradedResolution, FatalLookupError
from ..models import EnrichedGame, GameRecord
from ..resolvers import (
    format_release_date,
    resolve_age_rating,
    resolve_developer,
    resolve_genre_names,
    resolve_platform_names,
    resolve_publisher,
)
from ..sources import PublisherSource

T = TypeVar("T")


class GameEnricher:
    """
    Core enrichment engine that takes a single GameRecord and returns an
    EnrichedGame.

    Resolver order is fixed: age rating, developer, publisher, platforms,
    genres, release date, description. Each network lookup is awaited
    before the next starts.

    A failing resolver leaves its field as None and is recorded in
    `degradations`. Developer failures are re-raised instead when
    fatal_developer_errors is set.
    """

    def __init__(
        self,
        client,
        publisher_source: PublisherSource,
        fatal_developer_errors: bool = False,
        release_date_tz: Optional[tzinfo] = None,
    ):
        self.client = client
        self.publisher_source = publisher_source
        self.fatal_developer_errors = fatal_developer_errors
        self.release_date_tz = release_date_tz
        self.degradations: List[DegradedResolution] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, client, publisher_source: PublisherSource, config) -> "GameEnricher":
        return cls(
            client,
            publisher_source,
            fatal_developer_errors=config.fatal_developer_errors,
            release_date_tz=timezone.utc if config.release_dates_utc else None,
        )

    async def enrich(self, game: GameRecord) -> EnrichedGame:
        """
        Enrich a single game.

        Args:
            game: GameRecord from the catalog query

        Returns:
            EnrichedGame with every resolvable field populated

        Raises:
            FatalLookupError: developer lookup failed and
                fatal_developer_errors is set
        """
        age_rating = await self._resolve_async(
            "age_rating", game, lambda: resolve_age_rating(self.client, game.age_ratings)
        )
        developer = await self._resolve_developer(game)
        publisher = await self._resolve_async(
            "publisher", game, lambda: resolve_publisher(self.publisher_source, game.name)
        )
        platforms = self._resolve("platforms", game, lambda: resolve_platform_names(game.platforms))
        genres = self._resolve("genres", game, lambda: resolve_genre_names(game.genres))
        release_date = self._resolve(
            "release_date", game,
            lambda: format_release_date(game.first_release_date, self.release_date_tz),
        )

        return EnrichedGame(
            name=game.name,
            age_rating=age_rating,
            developer=developer,
            publisher=publisher,
            platforms=platforms,
            genres=genres,
            release_date=release_date,
            description=game.summary,
        )

    async def enrich_batch(self, games: Sequence[GameRecord], start_count: int = 0) -> List[EnrichedGame]:
        """
        Enrich a batch one game at a time, preserving order.

        Args:
            games: GameRecords of one catalog page
            start_count: Games already added before this batch, for progress lines

        Returns:
            List of EnrichedGame in input order
        """
        enriched_games = []
        for game in games:
            enriched_games.append(await self.enrich(game))
            self.logger.info(
                f"🎮 [{start_count + len(enriched_games)}] Added game data for [{game.id}] {game.name}"
            )
        return enriched_games

    async def _resolve_developer(self, game: GameRecord) -> Optional[str]:
        try:
            return await resolve_developer(self.client, game.involved_companies)
        except FatalLookupError as e:
            if self.fatal_developer_errors:
                self.logger.error(f"Developer lookup failed for [{game.id}] {game.name}: {e}")
                raise
            self._degrade("developer", game, e)
            return None

    async def _resolve_async(
        self, field_name: str, game: GameRecord, call: Callable[[], Awaitable[Optional[T]]]
    ) -> Optional[T]:
        try:
            return await call()
        except Exception as e:
            self._degrade(field_name, game, e)
            return None

    def _resolve(self, field_name: str, game: GameRecord, call: Callable[[], Optional[T]]) -> Optional[T]:
        try:
            return call()
        except Exception as e:
            self._degrade(field_name, game, e)
            return None

    def _degrade(self, field_name: str, game: GameRecord, error: Exception) -> None:
        degradation = DegradedResolution(field_name, game.id, error)
        self.degradations.append(degradation)
        self.logger.warning(str(degradation))
