"""
Tiered video metadata extraction.

Tiers are tried in order; each runs only if the previous one raised:

1. Structured source (yt-dlp JSON). Native chapters are used directly;
   without them the description is parsed for timestamps.
2. Summary source (oEmbed-style). Not wired by default, so this tier fails
   until a source is injected.
3. Placeholder. Always succeeds.

The extractor holds no per-call state and never raises to its caller
(cancellation excepted).
"""

from __future__ import annotations

import logging
import math
import time
from typing import Any

from chaptertrack.config.defaults import FALLBACK_VIDEO_ID
from chaptertrack.config.loader import ExtractorConfig, get_config
from chaptertrack.exceptions import MetadataError
from chaptertrack.models.chapter import Chapter
from chaptertrack.models.video_info import VideoInfo
from chaptertrack.models.video_url import extract_video_id
from chaptertrack.operations.chapters import (
    chapters_from_structured,
    parse_chapters_from_description,
)
from chaptertrack.tools.base import MetadataSource
from chaptertrack.tools.yt_dlp import YtDlpTool
from chaptertrack.utils.logging import log_timed

logger = logging.getLogger(__name__)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _duration_seconds(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0
    return math.floor(value)


def video_info_from_metadata(
    data: dict[str, Any], parse_description: bool = True
) -> VideoInfo:
    """Normalize one yt-dlp JSON document into a VideoInfo.

    Args:
        data: yt-dlp metadata (``--dump-single-json`` output)
        parse_description: Parse the description for timestamps when
            the document has no native chapters

    Returns:
        VideoInfo. ``chapters`` is empty when neither native chapters nor
        description timestamps were found.

    Raises:
        MetadataError: If ``data`` is not a mapping or its chapters field is malformed
    """
    if not isinstance(data, dict):
        raise MetadataError(
            f"Expected metadata mapping, got {type(data).__name__}",
            category="malformed_output",
        )

    duration = _duration_seconds(data.get("duration"))
    description = _as_str(data.get("description"))

    raw_chapters = data.get("chapters") or []
    if not isinstance(raw_chapters, list) or not all(
        isinstance(ch, dict) for ch in raw_chapters
    ):
        raise MetadataError("Malformed chapters field", category="malformed_output")

    chapters = chapters_from_structured(raw_chapters, duration)
    if chapters:
        logger.info(f"Found {len(chapters)} native chapters")
    elif parse_description and description.strip():
        chapters = parse_chapters_from_description(description, duration)
        if chapters:
            logger.info(f"Parsed {len(chapters)} chapters from description")

    if not chapters:
        logger.info("No chapters found; manual entry expected")

    return VideoInfo(
        id=_as_str(data.get("id")) or FALLBACK_VIDEO_ID,
        title=_as_str(data.get("title")),
        description=description,
        thumbnail_url=_as_str(data.get("thumbnail")),
        duration_seconds=duration,
        chapters=chapters,
    )


def video_info_from_summary(url: str, data: dict[str, Any]) -> VideoInfo:
    """Normalize an oEmbed-style payload into a chapterless VideoInfo.

    oEmbed carries no description or duration, so those stay empty.

    Raises:
        MetadataError: If ``data`` is not a mapping
    """
    if not isinstance(data, dict):
        raise MetadataError(
            f"Expected summary mapping, got {type(data).__name__}",
            category="malformed_output",
        )
    return VideoInfo(
        id=extract_video_id(url) or FALLBACK_VIDEO_ID,
        title=_as_str(data.get("title")),
        thumbnail_url=_as_str(data.get("thumbnail_url")),
    )


def fallback_video_info(url: str) -> VideoInfo:
    """Minimal placeholder used when every metadata tier fails.

    Pure and total; ``url`` is not inspected.
    """
    return VideoInfo(
        id=FALLBACK_VIDEO_ID,
        title="",
        description="",
        thumbnail_url="",
        duration_seconds=0,
        chapters=[],
    )


class VideoInfoExtractor:
    """Resolve a video URL to a VideoInfo through ordered fallback tiers.

    Args:
        structured_source: Tier 1 source. Defaults to a YtDlpTool built
            from ``config``.
        summary_source: Tier 2 source. None leaves the tier unimplemented.
        config: Extractor settings. Defaults to ``get_config()``.
    """

    def __init__(
        self,
        structured_source: MetadataSource | None = None,
        summary_source: MetadataSource | None = None,
        config: ExtractorConfig | None = None,
    ):
        self.config = config or get_config()
        self.structured_source = structured_source or YtDlpTool(
            path=self.config.yt_dlp_path,
            timeout=self.config.metadata_timeout,
        )
        self.summary_source = summary_source

    async def extract_info(self, url: str) -> VideoInfo:
        """Extract metadata and chapters for ``url``.

        Always returns a VideoInfo; tier failures are logged, not raised.
        """
        try:
            return await self._extract_structured(url)
        except Exception as e:
            logger.warning(f"Structured metadata failed for {url}, trying summary: {e}")

        try:
            return await self._extract_summary(url)
        except Exception as e:
            logger.warning(f"Summary metadata failed for {url}, using fallback: {e}")

        return fallback_video_info(url)

    async def _extract_structured(self, url: str) -> VideoInfo:
        start = time.time()
        log_timed(f"Fetching structured metadata for {url}")
        data = await self.structured_source.fetch_metadata(url)
        info = video_info_from_metadata(
            data, parse_description=self.config.parse_description
        )
        log_timed(f"Structured metadata for {info.id}: {len(info.chapters)} chapters", start)
        return info

    async def _extract_summary(self, url: str) -> VideoInfo:
        if self.summary_source is None:
            raise MetadataError(
                "oEmbed lookup not implemented", category="not_implemented"
            )
        data = await self.summary_source.fetch_metadata(url)
        return video_info_from_summary(url, data)

    def parse_chapters_from_description(
        self, description: str | None, total_duration: int | float | None
    ) -> list[Chapter]:
        """Parse manually supplied chapter text (preview step)."""
        return parse_chapters_from_description(description, total_duration)
