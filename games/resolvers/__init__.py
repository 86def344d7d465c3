# games/resolvers/__init__.py
"""
Attribute resolvers: raw ids/text -> display values.
"""

from .local import resolve_platform_names, resolve_genre_names, format_release_date
from .age_rating import resolve_age_rating
from .developer import resolve_developer, resolve_company_name
from .publisher import resolve_publisher

__all__ = [
    "resolve_platform_names",
    "resolve_genre_names",
    "format_release_date",
    "resolve_age_rating",
    "resolve_developer",
    "resolve_company_name",
    "resolve_publisher"
]
