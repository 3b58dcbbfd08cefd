"""
Data models for chaptertrack.

Provides dataclasses for chapters and extracted video metadata, and a
Pydantic model for YouTube URL parsing.
"""

from chaptertrack.models.chapter import Chapter, TimestampMatch
from chaptertrack.models.video_info import VideoInfo
from chaptertrack.models.video_url import VideoURL, extract_video_id

__all__ = [
    "Chapter",
    "TimestampMatch",
    "VideoInfo",
    "VideoURL",
    "extract_video_id",
]
