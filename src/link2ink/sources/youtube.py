"""YouTube reference parsing and best-effort metadata lookup."""

from __future__ import annotations

import logging
import re

import httpx

from ..constants import OEMBED_TIMEOUT_SECONDS
from .models import VideoMetadata

_logger = logging.getLogger("link2ink.sources")

_URL_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts|live)/|.*[?&]v=)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})",
    re.IGNORECASE,
)
_BARE_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{11}$")


def extract_video_id(value: str) -> str | None:
    """Extract the 11-character video id from a URL or a bare id.

    Accepts watch?v=, youtu.be/, /embed/, /shorts/, /live/ and /v/ URLs as
    well as the bare token. Returns None for anything else.
    """
    if not value:
        return None

    text = value.strip()
    match = _URL_PATTERN.search(text)
    if match:
        return match.group(1)

    if _BARE_ID_PATTERN.match(text):
        return text

    return None


def canonical_video_url(video_id: str) -> str:
    """Build the canonical watch URL for a video id."""
    return f"https://www.youtube.com/watch?v={video_id}"


class VideoMetadataResolver:
    """Looks up a video's public title via an oEmbed endpoint.

    Failures never propagate: the metadata only enriches the analysis prompt,
    so a missing title just degrades prompt quality.
    """

    def __init__(
        self,
        oembed_url: str = "https://www.youtube.com/oembed",
        timeout: float = OEMBED_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.oembed_url = oembed_url
        self.timeout = timeout
        self._transport = transport

    async def resolve(self, video_id: str) -> VideoMetadata | None:
        """Return metadata for the video, or None if the lookup fails."""
        params = {"url": canonical_video_url(video_id), "format": "json"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.oembed_url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            _logger.info(f"OEMBED | video:{video_id} | unavailable:{e}")
            return None

        if not isinstance(data, dict):
            return None

        metadata = VideoMetadata(
            video_id=video_id,
            title=data.get("title"),
            author_name=data.get("author_name"),
            description=data.get("description"),
        )
        _logger.info(f"OEMBED | video:{video_id} | title:{metadata.title}")
        return metadata
