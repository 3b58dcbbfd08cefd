"""
chaptertrack - Chapter extraction for a video watch-progress tracker.

Turns a video's metadata into a numbered, gapless chapter list:
1. Ask yt-dlp for structured metadata (native chapters when present)
2. Otherwise parse timestamps out of the description text
3. Fall back to a placeholder result when metadata is unavailable
"""

# Config
from chaptertrack.config.loader import ExtractorConfig, get_config

# Exceptions
from chaptertrack.exceptions import (
    ChaptertrackError,
    MetadataError,
    MetadataTimeoutError,
    ToolNotFoundError,
)

# Models
from chaptertrack.models.chapter import Chapter, TimestampMatch
from chaptertrack.models.video_info import VideoInfo
from chaptertrack.models.video_url import VideoURL, extract_video_id

# Core operations
from chaptertrack.operations.chapters import (
    parse_chapters,
    parse_chapters_from_description,
)
from chaptertrack.operations.extractor import VideoInfoExtractor, fallback_video_info

# Parsing utilities
from chaptertrack.parsing.timestamps import (
    format_timestamp,
    match_timestamp,
    parse_timestamp,
)
from chaptertrack.parsing.titles import clean_title

__version__ = "0.1.0"

__all__ = [
    # Core functions
    "VideoInfoExtractor",
    "fallback_video_info",
    "parse_chapters",
    "parse_chapters_from_description",
    # Models
    "Chapter",
    "TimestampMatch",
    "VideoInfo",
    "VideoURL",
    # Parsing
    "clean_title",
    "extract_video_id",
    "format_timestamp",
    "match_timestamp",
    "parse_timestamp",
    # Config
    "ExtractorConfig",
    "get_config",
    # Exceptions
    "ChaptertrackError",
    "MetadataError",
    "MetadataTimeoutError",
    "ToolNotFoundError",
]
