"""Tests for SpotlightConfig and PkgOfWeekVideo."""

import pytest
from pydantic import ValidationError

from spotlight import PkgOfWeekVideo, SpotlightConfig
from spotlight.config import DEFAULT_PLAYLIST_ID, RandomMode


class TestSpotlightConfig:
    """Tests for configuration validation."""

    def test_defaults(self):
        """Test default rotation settings."""
        config = SpotlightConfig()

        assert config.playlist_id == DEFAULT_PLAYLIST_ID
        assert config.featured_count == 4
        assert config.max_videos == 50
        assert config.refresh_interval == 6 * 60 * 60
        assert config.random_mode == RandomMode.SYSTEM
        assert config.youtube_api_key is None
        assert not config.has_api_key

    def test_api_key_from_env(self, monkeypatch):
        """Test the API key is resolved from YOUTUBE_API_KEY."""
        monkeypatch.setenv("YOUTUBE_API_KEY", "env-key")
        config = SpotlightConfig()
        assert config.youtube_api_key == "env-key"
        assert config.has_api_key

    def test_explicit_key_wins(self, monkeypatch):
        """Test an explicit key takes precedence over the environment."""
        monkeypatch.setenv("YOUTUBE_API_KEY", "env-key")
        config = SpotlightConfig(youtube_api_key="explicit")
        assert config.youtube_api_key == "explicit"

    def test_blank_key_treated_as_missing(self):
        """Test a whitespace-only key counts as no key."""
        config = SpotlightConfig(youtube_api_key="   ")
        assert config.youtube_api_key is None

    def test_seeded_mode_requires_seed(self):
        """Test that SEEDED mode requires seed."""
        with pytest.raises(ValueError, match="seed required"):
            SpotlightConfig(random_mode=RandomMode.SEEDED)

    def test_seeded_mode_with_seed(self):
        """Test that SEEDED mode works with a seed provided."""
        config = SpotlightConfig(random_mode=RandomMode.SEEDED, seed=0)
        assert config.seed == 0

    def test_featured_count_must_be_positive(self):
        """Test featured_count below 1 is rejected."""
        with pytest.raises(ValidationError):
            SpotlightConfig(featured_count=0)

    def test_refresh_interval_must_be_positive(self):
        """Test refresh_interval of zero is rejected."""
        with pytest.raises(ValidationError):
            SpotlightConfig(refresh_interval=0)


class TestPkgOfWeekVideo:
    """Tests for the video descriptor."""

    def test_video_url(self):
        """Test the watch URL is built from the video ID."""
        video = PkgOfWeekVideo(video_id="abc", thumbnail_url="https://t/x.jpg")
        assert video.video_url == "https://youtube.com/watch?v=abc"

    def test_frozen(self):
        """Test videos are immutable and hashable."""
        video = PkgOfWeekVideo(video_id="abc", thumbnail_url="https://t/x.jpg")
        with pytest.raises(ValidationError):
            video.title = "changed"
        assert len({video, video}) == 1

    def test_requires_id_and_thumbnail(self):
        """Test empty video ID or thumbnail URL is rejected."""
        with pytest.raises(ValidationError):
            PkgOfWeekVideo(video_id="", thumbnail_url="https://t/x.jpg")
        with pytest.raises(ValidationError):
            PkgOfWeekVideo(video_id="abc", thumbnail_url="")
