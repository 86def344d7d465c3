# games/models/game.py
"""
Data models for the game catalog crawler.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional


def _id_list(value: Any, field_name: str) -> List[int]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{field_name}' should be an array, got {type(value).__name__}")
    return [int(item) for item in value]


@dataclass
class GameRecord:
    """One entry of the paginated games query, before enrichment"""
    id: int
    name: str
    platforms: List[int] = field(default_factory=list)
    genres: List[int] = field(default_factory=list)
    total_rating: Optional[float] = None
    first_release_date: Optional[int] = None
    involved_companies: List[int] = field(default_factory=list)
    summary: Optional[str] = None
    age_ratings: List[int] = field(default_factory=list)
    url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "GameRecord":
        """
        Build a GameRecord from one object of the games response.

        Raises:
            ValueError: payload is not an object or lacks an id or name
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a game object, got {type(payload).__name__}")

        game_id = payload.get("id")
        if not isinstance(game_id, int):
            raise ValueError(f"Game without integer id: {payload!r:.200}")

        name = payload.get("name")
        if not name:
            raise ValueError(f"Game {game_id} has no name")

        return cls(
            id=game_id,
            name=str(name),
            platforms=_id_list(payload.get("platforms"), "platforms"),
            genres=_id_list(payload.get("genres"), "genres"),
            total_rating=payload.get("total_rating"),
            first_release_date=payload.get("first_release_date"),
            involved_companies=_id_list(payload.get("involved_companies"), "involved_companies"),
            summary=payload.get("summary"),
            age_ratings=_id_list(payload.get("age_ratings"), "age_ratings"),
            url=payload.get("url"),
        )


@dataclass(frozen=True)
class EnrichedGame:
    """
    A game after every resolver ran. Fields other than name are None
    when their resolver found nothing or failed.
    """
    name: str
    age_rating: Optional[str] = None
    developer: Optional[str] = None
    publisher: Optional[str] = None
    platforms: Optional[str] = None
    genres: Optional[str] = None
    release_date: Optional[str] = None
    description: Optional[str] = None

    def to_export_dict(self) -> Dict[str, Optional[str]]:
        """Row for the JSON file, keyed by field name in declaration order"""
        return asdict(self)


# Workbook header, also the key order of every JSON row
EXPORT_COLUMNS = [f.name for f in fields(EnrichedGame)]
