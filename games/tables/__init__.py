# games/tables/__init__.py
"""
Static IGDB lookup tables. Read-only after import.
"""

from .platforms import PLATFORM_NAMES
from .genres import GENRE_NAMES
from .age_ratings import AGE_RATING_LABELS, UNKNOWN_RATING

__all__ = [
    "PLATFORM_NAMES",
    "GENRE_NAMES",
    "AGE_RATING_LABELS",
    "UNKNOWN_RATING"
]
