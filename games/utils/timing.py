# games/utils/timing.py
"""
Duration helpers for progress logging.
"""

import math

# Observed average of the per-game lookups plus the search scrape
ESTIMATED_SECONDS_PER_GAME = 2.1


def format_duration(seconds: float) -> str:
    """Round up to whole seconds and render as 'M minutes S seconds'"""
    total = math.ceil(max(seconds, 0))
    minutes, secs = divmod(total, 60)
    return f"{minutes} minutes {secs} seconds"


def estimate_batch_duration(game_count: int) -> str:
    return format_duration(game_count * ESTIMATED_SECONDS_PER_GAME)
