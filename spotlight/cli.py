"""CLI for inspecting the package of the week rotation.

Prints the featured selection from a JSON file of videos or from the live
playlist (requires YOUTUBE_API_KEY).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from spotlight import PkgOfWeekVideo, Spotlight, SpotlightConfig
from spotlight.config import RandomMode

MAX_PREVIEW_LEN = 80

_VIDEO_LIST = TypeAdapter(list[PkgOfWeekVideo])


def _truncate(text: str, max_len: int = MAX_PREVIEW_LEN) -> str:
    """Truncate text with ellipsis if too long."""
    text = text.replace("\n", " ").strip()
    if len(text) <= max_len:
        return text
    return text[:max_len] + "..."


def load_videos(path: Path) -> list[PkgOfWeekVideo]:
    """Load a JSON array of video objects.

    Raises:
        ValueError: If the file is not a valid list of videos
    """
    try:
        return _VIDEO_LIST.validate_json(path.read_bytes())
    except ValidationError as e:
        raise ValueError(f"Invalid videos file {path}: {e}") from e


def _print_videos(videos: list[PkgOfWeekVideo], pool_size: int) -> None:
    """Print the featured selection."""
    print("=" * 60)
    print(f"FEATURED VIDEOS ({len(videos)} of {pool_size})")
    print("=" * 60)
    if not videos:
        print("No featured videos.")
        return
    for position, video in enumerate(videos, start=1):
        print(f"{position}. {video.title or video.video_id}")
        print(f"   {video.video_url}")
        if video.description:
            print(f"   {_truncate(video.description)}")
    print()


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Spotlight CLI - package of the week video rotation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--videos-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="JSON array of videos to use instead of the YouTube playlist",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        metavar="N",
        help="Number of videos to feature (default: 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible selection",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the Spotlight CLI."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SpotlightConfig(
            random_mode=RandomMode.SEEDED if args.seed is not None else RandomMode.SYSTEM,
            seed=args.seed,
        )
    except ValidationError as e:
        print(f"Error: {e}")
        return 1

    spotlight = Spotlight(config=config)

    if args.videos_file is not None:
        try:
            spotlight.set_videos(load_videos(args.videos_file))
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    elif config.has_api_key:
        if not spotlight.refresh_sync():
            print("Error: could not load the package of the week playlist")
            return 1
    else:
        print("Error: YOUTUBE_API_KEY environment variable not set")
        print("Set it with: export YOUTUBE_API_KEY=your-api-key")
        print("Or pass --videos-file PATH")
        return 1

    try:
        videos = spotlight.get_top_videos(args.count)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    _print_videos(videos, len(spotlight.store.pool))
    return 0


if __name__ == "__main__":
    sys.exit(main())
