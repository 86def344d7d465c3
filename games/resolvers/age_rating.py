# games/resolvers/age_rating.py
"""
Age rating label from the first age rating id of a game.
"""

from typing import Optional, Sequence

from ..query import age_rating_query
from ..tables import AGE_RATING_LABELS, UNKNOWN_RATING


async def resolve_age_rating(client, age_rating_ids: Optional[Sequence[int]]) -> Optional[str]:
    """
    Look up the first age rating and map its numeric rating to a label.

    Args:
        client: IGDBClient (anything with an async query(endpoint, body))
        age_rating_ids: The game's age_ratings ids

    Returns:
        Label such as "PEGI 16", "Unknown" for an unmapped rating, or None
        when the game has no age ratings (no request is made) or the
        rating entry carries no rating
    """
    if not age_rating_ids:
        return None

    rows = await client.query("age_ratings", age_rating_query(age_rating_ids[0]))
    if not rows:
        return None

    rating = rows[0].get("rating")
    if not rating:
        return None

    return AGE_RATING_LABELS.get(rating, UNKNOWN_RATING)
