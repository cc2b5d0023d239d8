"""Playlist refresh for the video store."""

import asyncio
import logging
from typing import Optional

from spotlight.config import SpotlightConfig
from spotlight.store import VideoStore
from spotlight.youtube.client import YouTubeAPIError, YouTubeClient
from spotlight.youtube.parsing import fetch_playlist_videos

logger = logging.getLogger(__name__)


class VideoUpdater:
    """Keep a VideoStore in sync with the package of the week playlist.

    A refresh that fails leaves the previous pool in place. Without a
    client (no API key configured) refreshes do nothing.
    """

    def __init__(
        self,
        store: VideoStore,
        config: SpotlightConfig,
        client: Optional[YouTubeClient] = None,
    ):
        self._store = store
        self._config = config
        self._client = client
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh(self) -> bool:
        """Fetch the playlist once and replace the store pool.

        Returns:
            True if the pool was replaced, False if skipped or failed
        """
        if self._client is None:
            logger.debug("No YouTube API key configured; skipping playlist refresh")
            return False

        try:
            videos = await fetch_playlist_videos(
                self._client,
                self._config.playlist_id,
                max_videos=self._config.max_videos,
            )
        except YouTubeAPIError as e:
            logger.warning(
                f"Playlist refresh failed for {self._config.playlist_id}: {e}. "
                f"Keeping {len(self._store.pool)} cached videos."
            )
            return False

        self._store.set_pool(videos)
        logger.info(f"Loaded {len(videos)} package of the week videos")
        return True

    async def start(self) -> None:
        """Refresh now, then keep refreshing every refresh_interval seconds."""
        if self.running:
            return
        await self.refresh()
        if self._client is not None:
            self._task = asyncio.create_task(self._run_periodically())

    async def _run_periodically(self) -> None:
        while True:
            await asyncio.sleep(self._config.refresh_interval)
            try:
                await self.refresh()
            except Exception as e:
                # CancelledError is not an Exception subclass and still stops the loop
                logger.warning(
                    f"Playlist refresh raised {type(e).__name__}: {e}. "
                    f"Retrying in {self._config.refresh_interval}s."
                )

    async def close(self) -> None:
        """Stop the background refresh task."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
