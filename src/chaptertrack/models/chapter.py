"""
Chapter dataclasses for video chapter/segment information.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimestampMatch:
    """A timestamp token found in one line of text.

    Attributes:
        matched_text: Exact substring that matched, parentheses included
        line_text: The full line the token was found in
        seconds: Decoded elapsed seconds
    """

    matched_text: str
    line_text: str
    seconds: int


@dataclass
class Chapter:
    """A numbered, time-bounded segment of a video.

    Attributes:
        chapter_number: 1-based position in the chapter list
        title: Chapter title (never empty)
        start_time_seconds: Start time in whole seconds
        end_time_seconds: End time in whole seconds (None until derived)
    """

    chapter_number: int
    title: str
    start_time_seconds: int
    end_time_seconds: int | None = None

    @property
    def duration_seconds(self) -> int | None:
        """Length of the chapter, or None when the end is unknown."""
        if self.end_time_seconds is None:
            return None
        return self.end_time_seconds - self.start_time_seconds

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "chapter_number": self.chapter_number,
            "title": self.title,
            "start_time_seconds": self.start_time_seconds,
            "end_time_seconds": self.end_time_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Chapter":
        """Create from dictionary (JSON deserialization)."""
        return cls(
            chapter_number=data.get("chapter_number", 1),
            title=data.get("title", ""),
            start_time_seconds=data.get("start_time_seconds", 0),
            end_time_seconds=data.get("end_time_seconds"),
        )
