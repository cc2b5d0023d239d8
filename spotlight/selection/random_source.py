"""Random source construction."""

import random
from typing import Optional

from spotlight.config import RandomMode, RandomSource, SpotlightConfig


def seeded_random_source(seed: int) -> RandomSource:
    """Deterministic source: identical seed -> identical draw sequence."""
    return random.Random(seed)


def system_random_source() -> RandomSource:
    """Non-deterministic source backed by the OS entropy pool."""
    return random.SystemRandom()


def build_random_source(config: Optional[SpotlightConfig] = None) -> RandomSource:
    """Build the random source selected by config.

    Falls back to the system source when no config is given.
    """
    if config is not None and config.random_mode == RandomMode.SEEDED:
        return seeded_random_source(config.seed)
    return system_random_source()
