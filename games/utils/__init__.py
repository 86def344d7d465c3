# games/utils/__init__.py
"""
Utility functions for the game catalog crawler.
"""

from .timing import format_duration, estimate_batch_duration

__all__ = [
    "format_duration",
    "estimate_batch_duration"
]
