"""Spotlight: rotating "package of the week" video selection.

Public exports:
- Spotlight: The public interface owning the video pool
- SpotlightConfig: Configuration for Spotlight
- PkgOfWeekVideo: Video descriptor returned by Spotlight.get_top_videos()
- select_random_videos: The selection algorithm
"""

from spotlight.config import SpotlightConfig
from spotlight.engine import Spotlight
from spotlight.schemas import PkgOfWeekVideo
from spotlight.selection import InvalidSelectionError, select_random_videos

__all__ = [
    "Spotlight",
    "SpotlightConfig",
    "PkgOfWeekVideo",
    "InvalidSelectionError",
    "select_random_videos",
]
