"""Base utilities for selection implementations."""

from collections.abc import Sequence

# Each draw widens the eligible window by this many positions
WINDOW_STEP = 3


class InvalidSelectionError(ValueError):
    """Selection requested with an empty pool or an out-of-range count."""

    pass


def validate_selection_args(pool: Sequence, count: int) -> None:
    """Raise InvalidSelectionError unless 1 <= count <= len(pool)."""
    if not pool:
        raise InvalidSelectionError("pool cannot be empty")
    if count < 1:
        raise InvalidSelectionError(f"count must be at least 1, got {count}")
    if count > len(pool):
        raise InvalidSelectionError(
            f"count {count} exceeds pool size {len(pool)}"
        )


def window_end(draw: int, pool_size: int) -> int:
    """Return the last pool position eligible for the given draw.

    Examples:
        window_end(1, 10) -> 3
        window_end(2, 10) -> 6
        window_end(4, 10) -> 9
    """
    return min(pool_size - 1, draw * WINDOW_STEP)
