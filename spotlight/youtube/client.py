"""YouTube Data API HTTP client (transport only)."""

import asyncio
from typing import Any, Optional

import httpx

PLAYLIST_ITEMS_URL = "https://www.googleapis.com/youtube/v3/playlistItems"
PAGE_SIZE = 50  # API maximum for maxResults
MAX_RETRIES = 3
BASE_DELAY = 1.0  # seconds
REQUEST_TIMEOUT = 30.0  # seconds


class YouTubeAPIError(Exception):
    """Error from the YouTube Data API."""

    pass


class YouTubeClient:
    """Async client for the YouTube Data API playlistItems endpoint.

    Responsibilities:
    - Request construction (parts, paging, API key)
    - Retry logic with exponential backoff
    - Error normalization

    Not responsible for:
    - Mapping items to videos
    - Deciding how many pages to read
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            api_key: YouTube Data API key
            http_client: Optional preconfigured client (e.g. with a mock transport).
                The caller owns it: close() leaves it open and it is never replaced.
        """
        if not api_key or not api_key.strip():
            raise ValueError("api_key cannot be empty")
        self._api_key = api_key
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._owns_client and (self._client is None or self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=REQUEST_TIMEOUT)
        return self._client

    async def list_playlist_items(
        self,
        playlist_id: str,
        page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """Fetch one page of playlist items.

        Args:
            playlist_id: YouTube playlist ID
            page_token: nextPageToken from the previous page, or None for the first

        Returns:
            Decoded response body with "items" and optional "nextPageToken"

        Raises:
            YouTubeAPIError: On API errors after retries exhausted
        """
        params = {
            "part": "snippet,contentDetails",
            "playlistId": playlist_id,
            "maxResults": PAGE_SIZE,
            "key": self._api_key,
        }
        if page_token:
            params["pageToken"] = page_token

        last_error: Optional[Exception] = None
        client = self._get_client()

        for attempt in range(MAX_RETRIES):
            try:
                response = await client.get(PLAYLIST_ITEMS_URL, params=params)

                if response.status_code == 200:
                    try:
                        data = response.json()
                    except ValueError as e:
                        raise YouTubeAPIError(f"Malformed response: {e}") from e
                    if not isinstance(data, dict):
                        raise YouTubeAPIError(
                            f"Malformed response: expected object, got {type(data).__name__}"
                        )
                    return data

                # Rate limit or server error - retry
                if response.status_code in (429, 500, 502, 503, 504):
                    last_error = YouTubeAPIError(
                        f"HTTP {response.status_code}: {response.text}"
                    )
                    delay = BASE_DELAY * (2**attempt)
                    await asyncio.sleep(delay)
                    continue

                # Client error - don't retry
                raise YouTubeAPIError(
                    f"HTTP {response.status_code}: {response.text}"
                )

            except httpx.RequestError as e:
                last_error = YouTubeAPIError(f"Request failed: {e}")
                last_error.__cause__ = e  # Preserve exception chain
                delay = BASE_DELAY * (2**attempt)
                await asyncio.sleep(delay)
                continue

        raise last_error or YouTubeAPIError("Max retries exceeded")

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
