# games/query.py
"""
Apicalypse query bodies for the IGDB v4 endpoints.
"""

from typing import Sequence

GAME_FIELDS = (
    "id", "name", "platforms", "total_rating", "first_release_date", "genres",
    "involved_companies", "summary", "url", "age_ratings",
)


def _number(value) -> str:
    # IGDB rejects "85.0"-style floats for integer comparisons
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def games_query(
    limit: int,
    offset: int,
    release_date_floor: int,
    rating_floor: float,
    fields: Sequence[str] = GAME_FIELDS,
) -> str:
    """
    Build one page of the filtered games query.

    Only named, platform-tagged games released after the floor with a total
    rating above the floor are returned.
    """
    return (
        f"fields {', '.join(fields)}; "
        f"where first_release_date > {_number(release_date_floor)} "
        f"& total_rating > {_number(rating_floor)} "
        f"& name != null & platforms != null; "
        f"limit {limit}; "
        f"offset {offset};"
    )


def age_rating_query(age_rating_id: int) -> str:
    return f"fields id, category, rating; where id = {int(age_rating_id)};"


def involved_company_query(involved_company_id: int) -> str:
    return f"fields id, company; where id = {int(involved_company_id)};"


def company_query(company_id: int) -> str:
    return f"fields id, name; where id = {int(company_id)};"
