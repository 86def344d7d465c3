# games/resolvers/local.py
"""
Resolvers that need no network: table lookups and date formatting.
"""

from datetime import datetime, tzinfo
from typing import Mapping, Optional, Sequence

from ..tables import GENRE_NAMES, PLATFORM_NAMES


def join_names(ids: Optional[Sequence[int]], table: Mapping[int, str]) -> Optional[str]:
    """
    Join the table names of ids in input order.

    Unknown ids are skipped. Returns None for empty input or when no id
    is known.
    """
    if not ids:
        return None
    names = [table[i] for i in ids if i in table]
    return ", ".join(names) or None


def resolve_platform_names(ids: Optional[Sequence[int]]) -> Optional[str]:
    return join_names(ids, PLATFORM_NAMES)


def resolve_genre_names(ids: Optional[Sequence[int]]) -> Optional[str]:
    return join_names(ids, GENRE_NAMES)


def format_release_date(timestamp: Optional[int], tz: Optional[tzinfo] = None) -> Optional[str]:
    """
    Format a unix timestamp as unpadded month/day/year.

    Uses the host's local time zone unless tz is given, so the same timestamp
    can render as different days on different machines.
    """
    if timestamp is None:
        return None
    moment = datetime.fromtimestamp(timestamp, tz)
    return f"{moment.month}/{moment.day}/{moment.year}"
