"""
VideoURL Pydantic model for YouTube URL parsing and validation.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, Field, field_validator, model_validator

YOUTUBE_DOMAINS = frozenset(
    {
        "youtube.com",
        "www.youtube.com",
        "m.youtube.com",
        "music.youtube.com",
        "youtube-nocookie.com",
        "www.youtube-nocookie.com",
        "youtu.be",
    }
)

# watch?v=, embed/, v/, shorts/, live/ and youtu.be short links
_YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtube(?:-nocookie)?\.com/(?:watch\?(?:.*&)?v=|embed/|v/|shorts/|live/)"
    r"|youtu\.be/)(?P<video_id>[a-zA-Z0-9_-]{11})",
    re.IGNORECASE,
)
_VIDEO_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")


class VideoURL(BaseModel):
    """Parsed and validated YouTube URL with the extracted video ID."""

    url: str = Field(..., description="Original URL (normalized)")
    video_id: str | None = Field(None, description="11-character YouTube video ID")

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, v: str) -> str:
        """Normalize URL - strip whitespace, ensure scheme."""
        v = v.strip()
        if not v:
            raise ValueError("URL cannot be empty")
        if not v.startswith(("http://", "https://")):
            v = "https://" + v
        return v

    @model_validator(mode="after")
    def extract_ids(self) -> VideoURL:
        """Extract video_id from the URL after validation."""
        parsed = urlparse(self.url)
        host = parsed.netloc.lower()
        if host not in YOUTUBE_DOMAINS:
            return self

        match = _YOUTUBE_ID_PATTERN.search(self.url)
        if match:
            self.video_id = match.group("video_id")
        else:
            vid = parse_qs(parsed.query).get("v", [None])[0]
            if vid and _VIDEO_ID_RE.match(vid):
                self.video_id = vid
        return self

    @classmethod
    def parse(cls, url: str) -> VideoURL:
        """Parse a URL.

        Raises:
            ValueError: If the URL is empty
        """
        return cls(url=url)

    @classmethod
    def try_parse(cls, url: str) -> VideoURL | None:
        """Try to parse a URL, returning None on failure instead of raising."""
        try:
            return cls.parse(url)
        except ValueError:
            return None


def extract_video_id(url: str) -> str | None:
    """Extract the YouTube video ID from a URL.

    Args:
        url: YouTube watch, short, embed, shorts or live URL

    Returns:
        The 11-character video ID, or None if the input is not a YouTube URL
    """
    if not isinstance(url, str):
        return None
    parsed = VideoURL.try_parse(url)
    return parsed.video_id if parsed else None
