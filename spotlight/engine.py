"""Spotlight public adapter."""

import asyncio
from collections.abc import Iterable
from typing import Optional

from spotlight.config import RandomSource, SpotlightConfig
from spotlight.schemas import PkgOfWeekVideo
from spotlight.selection.random_source import build_random_source
from spotlight.store import VideoStore
from spotlight.updater import VideoUpdater
from spotlight.youtube.client import YouTubeClient


class Spotlight:
    """Public interface to the package of the week rotation.

    Owns the video store, the playlist updater and the YouTube client.
    External code should use this class rather than the components.

    Usage:
        from spotlight import Spotlight, SpotlightConfig

        spotlight = Spotlight(config=SpotlightConfig(youtube_api_key="AIza..."))
        await spotlight.start()

        videos = spotlight.get_top_videos()
        print(videos[0].title)

        await spotlight.close()
    """

    def __init__(
        self,
        config: SpotlightConfig,
        client: Optional[YouTubeClient] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """Initialize Spotlight with configuration.

        Args:
            config: SpotlightConfig with API key and rotation settings
            client: Optional YouTube client. Built from the config's API key
                when omitted and a key is available.
            random_source: Optional random source overriding config.random_mode
        """
        self._config = config
        if client is None and config.has_api_key:
            client = YouTubeClient(config.youtube_api_key)
        self._client = client
        self._store = VideoStore(
            random_source=random_source or build_random_source(config),
            default_count=config.featured_count,
        )
        self._updater = VideoUpdater(self._store, config, client=client)

    @property
    def store(self) -> VideoStore:
        return self._store

    async def start(self) -> None:
        """Load the playlist and schedule background refreshes."""
        await self._updater.start()

    async def refresh(self) -> bool:
        """Reload the playlist once. Returns True if the pool was replaced."""
        return await self._updater.refresh()

    def refresh_sync(self) -> bool:
        """Synchronous wrapper for refresh()."""
        return asyncio.run(self._refresh_and_close_client())

    async def _refresh_and_close_client(self) -> bool:
        # The client is bound to the event loop asyncio.run() tears down
        try:
            return await self._updater.refresh()
        finally:
            if self._client is not None:
                await self._client.close()

    def get_top_videos(self, count: Optional[int] = None) -> list[PkgOfWeekVideo]:
        """Return the featured selection (newest video first)."""
        return self._store.get_featured(count)

    def set_videos(self, videos: Iterable[PkgOfWeekVideo]) -> None:
        """Replace the video pool directly (admin and test override)."""
        self._store.set_pool(videos)

    def reset(self) -> None:
        """Clear the video pool."""
        self._store.reset()

    async def close(self) -> None:
        """Stop background refreshes and release the HTTP client."""
        await self._updater.close()
        if self._client is not None:
            await self._client.close()
