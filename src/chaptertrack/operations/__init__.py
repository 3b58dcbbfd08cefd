"""
Chapter parsing and metadata extraction operations.
"""

from chaptertrack.operations.chapters import (
    chapters_from_structured,
    parse_chapters,
    parse_chapters_from_description,
)
from chaptertrack.operations.extractor import (
    VideoInfoExtractor,
    fallback_video_info,
    video_info_from_metadata,
    video_info_from_summary,
)

__all__ = [
    "VideoInfoExtractor",
    "chapters_from_structured",
    "fallback_video_info",
    "parse_chapters",
    "parse_chapters_from_description",
    "video_info_from_metadata",
    "video_info_from_summary",
]
