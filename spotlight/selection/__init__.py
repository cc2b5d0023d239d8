"""Featured video selection for Spotlight."""

from spotlight.selection.base import InvalidSelectionError
from spotlight.selection.picker import select_random_videos
from spotlight.selection.random_source import (
    build_random_source,
    seeded_random_source,
    system_random_source,
)

__all__ = [
    "select_random_videos",
    "InvalidSelectionError",
    "build_random_source",
    "seeded_random_source",
    "system_random_source",
]
