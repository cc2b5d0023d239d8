"""Shared pytest fixtures for the Spotlight test suite."""

import random

import pytest

from spotlight.schemas import PkgOfWeekVideo
from spotlight.store import VideoStore


def _build_videos(count: int) -> list[PkgOfWeekVideo]:
    return [
        PkgOfWeekVideo(
            video_id=f"v{index}",
            title="title",
            description="description",
            thumbnail_url="https://youtube.com/thumbnailUrl",
        )
        for index in range(count)
    ]


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Keep tests independent of a YOUTUBE_API_KEY set in the environment."""
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)


@pytest.fixture
def make_videos():
    """Factory building videos v0..v{count-1}, newest first."""
    return _build_videos


@pytest.fixture
def videos() -> list[PkgOfWeekVideo]:
    return _build_videos(10)


@pytest.fixture
def store():
    """Store with a seeded random source, reset after each test."""
    video_store = VideoStore(random_source=random.Random(123))
    yield video_store
    video_store.reset()
