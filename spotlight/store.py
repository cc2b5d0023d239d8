"""In-memory store for the current package of the week videos."""

import logging
import threading
from collections.abc import Iterable
from typing import Optional

from spotlight.config import RandomSource
from spotlight.schemas import PkgOfWeekVideo
from spotlight.selection import InvalidSelectionError, select_random_videos
from spotlight.selection.random_source import system_random_source

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_COUNT = 4


class VideoStore:
    """Owns the video pool and serves featured selections from it.

    The pool is held as a tuple and replaced in a single assignment, so a
    reader sees either the old or the new pool in full. Draws from the
    random source are serialized, which keeps a shared seeded source safe
    when queries arrive from several threads.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        default_count: int = DEFAULT_FEATURED_COUNT,
    ):
        """Initialize the store.

        Args:
            random_source: Source for selections. Defaults to SystemRandom.
            default_count: Count used by get_featured() when none is given.
        """
        if default_count < 1:
            raise ValueError("default_count must be at least 1")
        self._random_source = random_source or system_random_source()
        self._default_count = default_count
        self._pool: tuple[PkgOfWeekVideo, ...] = ()
        self._lock = threading.Lock()

    @property
    def pool(self) -> tuple[PkgOfWeekVideo, ...]:
        return self._pool

    def set_pool(self, pool: Iterable[PkgOfWeekVideo]) -> None:
        """Replace the stored pool."""
        self._pool = tuple(pool)
        logger.debug(f"Video pool replaced with {len(self._pool)} videos")

    def get_featured(self, count: Optional[int] = None) -> list[PkgOfWeekVideo]:
        """Return a featured selection from the current pool.

        An empty pool means no featured content. When the pool holds no
        more than count videos, all of them are returned in stored order.

        Args:
            count: Number of videos wanted. Defaults to default_count.

        Returns:
            Selection with pool[0] first, or an empty list

        Raises:
            InvalidSelectionError: If count is less than 1
        """
        if count is None:
            count = self._default_count
        if count < 1:
            raise InvalidSelectionError(f"count must be at least 1, got {count}")

        pool = self._pool
        if not pool:
            return []
        if len(pool) <= count:
            return list(pool)

        with self._lock:
            return select_random_videos(self._random_source, pool, count)

    def reset(self) -> None:
        """Drop the stored pool."""
        self._pool = ()
