"""Data structures for Spotlight."""

from pydantic import BaseModel, ConfigDict, Field

YOUTUBE_WATCH_URL = "https://youtube.com/watch?v="


class PkgOfWeekVideo(BaseModel):
    """A single "package of the week" video descriptor."""

    model_config = ConfigDict(frozen=True)

    video_id: str = Field(min_length=1)
    title: str = ""
    description: str = Field(
        default="",
        description="First line of the video description",
    )
    thumbnail_url: str = Field(min_length=1)

    @property
    def video_url(self) -> str:
        """Watch page URL for this video."""
        return f"{YOUTUBE_WATCH_URL}{self.video_id}"
