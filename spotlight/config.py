"""Spotlight configuration and enums."""

import os
from enum import Enum
from typing import Optional, Protocol

from pydantic import BaseModel, Field, model_validator

# Flutter/Dart "Package of the Week" playlist
DEFAULT_PLAYLIST_ID = "PLjxrf2q8roU1quF6ny8oFHJ2gBdrYN_AK"


class RandomMode(str, Enum):
    """Random source used for featured selections."""

    SYSTEM = "system"
    SEEDED = "seeded"


class RandomSource(Protocol):
    """Protocol for the randomness consumed by the picker.

    ``random.Random`` and ``random.SystemRandom`` satisfy it structurally.
    Production code uses a non-deterministic source; tests inject a seeded
    one so draw sequences are reproducible.
    """

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""
        ...


class SpotlightConfig(BaseModel):
    """Configuration for the Spotlight service."""

    youtube_api_key: Optional[str] = None
    playlist_id: str = DEFAULT_PLAYLIST_ID
    featured_count: int = Field(
        default=4,
        ge=1,
        description="Number of videos returned by a featured query when no count is given",
    )
    max_videos: int = Field(
        default=50,
        ge=1,
        description="Stop paging the playlist once this many videos are collected",
    )
    refresh_interval: float = Field(
        default=6 * 60 * 60,
        gt=0,
        description="Seconds between background playlist refreshes",
    )

    random_mode: RandomMode = Field(
        default=RandomMode.SYSTEM,
        description="SYSTEM (non-deterministic) or SEEDED (reproducible)",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the random source. Required if random_mode is SEEDED.",
    )

    @model_validator(mode="after")
    def resolve_api_key(self) -> "SpotlightConfig":
        """Resolve API key from explicit value or YOUTUBE_API_KEY environment variable.

        A missing key is allowed; playlist refreshes are skipped without one.
        """
        if self.youtube_api_key and self.youtube_api_key.strip():
            return self
        env_key = os.environ.get("YOUTUBE_API_KEY")
        if env_key and env_key.strip():
            object.__setattr__(self, "youtube_api_key", env_key)
        else:
            object.__setattr__(self, "youtube_api_key", None)
        return self

    @model_validator(mode="after")
    def validate_seed(self) -> "SpotlightConfig":
        """Validate that seed is provided when random_mode is SEEDED."""
        if self.random_mode == RandomMode.SEEDED and self.seed is None:
            raise ValueError("seed required when random_mode is SEEDED")
        return self

    @property
    def has_api_key(self) -> bool:
        return self.youtube_api_key is not None
