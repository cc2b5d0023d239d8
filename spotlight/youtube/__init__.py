"""YouTube Data API module."""

from spotlight.youtube.client import YouTubeAPIError, YouTubeClient
from spotlight.youtube.parsing import fetch_playlist_videos, parse_playlist_item

__all__ = [
    "YouTubeAPIError",
    "YouTubeClient",
    "fetch_playlist_videos",
    "parse_playlist_item",
]
