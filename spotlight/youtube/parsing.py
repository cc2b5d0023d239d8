"""Map raw playlist items to video descriptors."""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from spotlight.schemas import PkgOfWeekVideo
from spotlight.youtube.client import YouTubeAPIError, YouTubeClient

logger = logging.getLogger(__name__)

# Thumbnail sizes in order of preference
THUMBNAIL_PREFERENCE = ("high", "default", "maxres", "standard", "medium")


def _first_line(text: str) -> str:
    return text.strip().split("\n")[0].strip()


def pick_thumbnail_url(thumbnails: Optional[dict[str, Any]]) -> Optional[str]:
    """Return the URL of the preferred thumbnail present, if any."""
    if not thumbnails:
        return None
    for size in THUMBNAIL_PREFERENCE:
        thumbnail = thumbnails.get(size)
        if thumbnail and thumbnail.get("url"):
            return thumbnail["url"]
    return None


def parse_playlist_item(item: dict[str, Any]) -> Optional[PkgOfWeekVideo]:
    """Convert one playlistItems resource into a PkgOfWeekVideo.

    Returns None for items without a video ID or thumbnail (deleted or
    private videos show up this way).
    """
    try:
        video_id = (item.get("contentDetails") or {}).get("videoId")
        if not video_id:
            return None
        snippet = item.get("snippet") or {}
        thumbnail_url = pick_thumbnail_url(snippet.get("thumbnails"))
        if not thumbnail_url:
            return None
        return PkgOfWeekVideo(
            video_id=video_id,
            title=snippet.get("title") or "",
            description=_first_line(snippet.get("description") or ""),
            thumbnail_url=thumbnail_url,
        )
    except (AttributeError, TypeError, ValidationError) as e:
        logger.warning(f"Skipping malformed playlist item: {e}")
        return None


async def fetch_playlist_videos(
    client: YouTubeClient,
    playlist_id: str,
    max_videos: int = 50,
) -> list[PkgOfWeekVideo]:
    """Read playlist pages until max_videos are collected or pages run out.

    Args:
        client: YouTube API client
        playlist_id: Playlist to read
        max_videos: Stop requesting pages once this many videos are collected

    Returns:
        Videos in playlist order (may exceed max_videos by up to one page)

    Raises:
        YouTubeAPIError: If any page request fails or a page is malformed
    """
    videos: list[PkgOfWeekVideo] = []
    page_token: Optional[str] = None

    while len(videos) < max_videos:
        page = await client.list_playlist_items(playlist_id, page_token=page_token)
        items = page.get("items") or []
        if not isinstance(items, list):
            raise YouTubeAPIError(
                f"Malformed response: items must be a list, got {type(items).__name__}"
            )
        for item in items:
            video = parse_playlist_item(item)
            if video is not None:
                videos.append(video)

        page_token = page.get("nextPageToken")
        if not page_token:
            break

    return videos
