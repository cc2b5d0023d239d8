"""Rotating selection: fixed first video, bounded-random remainder."""

from collections.abc import Sequence
from typing import TypeVar

from spotlight.config import RandomSource
from spotlight.selection.base import validate_selection_args, window_end

T = TypeVar("T")


def select_random_videos(
    random_source: RandomSource,
    pool: Sequence[T],
    count: int,
) -> list[T]:
    """Select count items from pool, always starting with pool[0].

    Strategy:
    1. Keep pool[0] (the newest video) at the front
    2. For draw i, take a uniform pick among the unchosen positions
       in 1..min(len(pool) - 1, 3 * i)
    3. Append picks in draw order

    Args:
        random_source: Source of uniform integers (seeded in tests)
        pool: Ordered candidates, newest first
        count: Number of items to return, 1 <= count <= len(pool)

    Returns:
        List of count items from distinct pool positions

    Raises:
        InvalidSelectionError: If pool is empty or count is out of range
    """
    validate_selection_args(pool, count)

    selected = [pool[0]]
    chosen = {0}
    for draw in range(1, count):
        # count <= len(pool) keeps at least one unchosen position in the window
        candidates = [
            position
            for position in range(1, window_end(draw, len(pool)) + 1)
            if position not in chosen
        ]
        position = candidates[random_source.randrange(len(candidates))]
        chosen.add(position)
        selected.append(pool[position])

    return selected
