"""
Chapter extraction operations for video metadata.

Builds numbered chapter lists from freeform description text and from
yt-dlp's structured ``chapters`` field.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from chaptertrack.models.chapter import Chapter
from chaptertrack.parsing.timestamps import match_timestamp
from chaptertrack.parsing.titles import clean_title

logger = logging.getLogger(__name__)


def _floor_seconds(value) -> int | None:
    """Floor a numeric seconds value to int. None and non-numbers give None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return math.floor(number)


def parse_chapters(text: str | None) -> list[Chapter]:
    """Parse chapter lines out of a block of text.

    Each line with a timestamp token becomes one chapter; lines without one
    are skipped and do not advance the chapter number. End times are left
    unset.

    Args:
        text: Line-separated text, e.g. a video description

    Returns:
        Chapters in source line order. Empty list if nothing matched.
    """
    if not text:
        return []

    chapters: list[Chapter] = []
    chapter_number = 1
    for line in text.split("\n"):
        match = match_timestamp(line)
        if match is None:
            continue
        chapters.append(
            Chapter(
                chapter_number=chapter_number,
                title=clean_title(line, match.matched_text, chapter_number + 1),
                start_time_seconds=match.seconds,
            )
        )
        chapter_number += 1
    return chapters


def parse_chapters_from_description(
    description: str | None, total_duration: int | float | None
) -> list[Chapter]:
    """Parse chapters from description text and derive their end times.

    Every chapter ends where the next one starts; the last chapter ends at
    ``total_duration``. Start times are not checked for order, so timestamps
    that go backwards in the text produce negative-length chapters.

    Args:
        description: Line-separated text
        total_duration: Video length in seconds. 0 or None when unknown.

    Returns:
        Chapters with end times set. Empty list if no line matched.
    """
    chapters = parse_chapters(description)

    last_end = _floor_seconds(total_duration)
    if last_end is None and total_duration is not None:
        logger.debug(f"Ignoring non-numeric duration: {total_duration!r}")

    for i, chapter in enumerate(chapters):
        if i + 1 < len(chapters):
            chapter.end_time_seconds = chapters[i + 1].start_time_seconds
        else:
            chapter.end_time_seconds = last_end

    if chapters:
        logger.debug(f"Parsed {len(chapters)} chapters from description")
    return chapters


def chapters_from_structured(
    entries: Iterable[dict] | None, duration: int | float | None = None
) -> list[Chapter]:
    """Map yt-dlp chapter entries to numbered chapters.

    Entries carry ``title``, ``start_time`` and ``end_time`` in (possibly
    fractional) seconds; times are floored. An entry without an end time
    ends at the next entry's start, or at ``duration`` for the last one.

    Args:
        entries: The ``chapters`` list from yt-dlp JSON
        duration: Video length in seconds

    Returns:
        Chapters numbered by position, 1-based.
    """
    if not entries:
        return []

    chapters: list[Chapter] = []
    for index, entry in enumerate(entries):
        start = max(_floor_seconds(entry.get("start_time")) or 0, 0)
        title = (entry.get("title") or "").strip()
        chapters.append(
            Chapter(
                chapter_number=index + 1,
                title=title or f"Chapter {index + 1}",
                start_time_seconds=start,
                end_time_seconds=_floor_seconds(entry.get("end_time")),
            )
        )

    last_end = _floor_seconds(duration)
    for i, chapter in enumerate(chapters):
        if chapter.end_time_seconds is not None:
            continue
        if i + 1 < len(chapters):
            chapter.end_time_seconds = chapters[i + 1].start_time_seconds
        else:
            chapter.end_time_seconds = last_end

    logger.debug(f"Mapped {len(chapters)} structured chapters")
    return chapters
