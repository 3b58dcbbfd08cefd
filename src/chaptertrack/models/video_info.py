"""
VideoInfo dataclass - the normalized result of metadata extraction.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chaptertrack.models.chapter import Chapter


@dataclass
class VideoInfo:
    """Normalized video metadata with an ordered chapter list.

    ``chapters`` is never None; an empty list means no chapters were found
    and the caller should offer manual chapter entry.
    """

    id: str
    title: str = ""
    description: str = ""
    thumbnail_url: str = ""
    duration_seconds: int = 0
    chapters: list[Chapter] = field(default_factory=list)

    @property
    def has_chapters(self) -> bool:
        return bool(self.chapters)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "thumbnail_url": self.thumbnail_url,
            "duration_seconds": self.duration_seconds,
            "chapters": [ch.to_dict() for ch in self.chapters],
        }

    @classmethod
    def from_dict(cls, data: dict) -> VideoInfo:
        """Create from dictionary (JSON deserialization)."""
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            description=data.get("description", ""),
            thumbnail_url=data.get("thumbnail_url", ""),
            duration_seconds=data.get("duration_seconds", 0),
            chapters=[Chapter.from_dict(ch) for ch in data.get("chapters") or []],
        )
