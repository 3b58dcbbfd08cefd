"""
Timestamp token recognition for chapter lines.

A token is ``M:SS``, ``MM:SS``, ``H:MM:SS`` or ``HH:MM:SS``, optionally wrapped
in parentheses. Two-group tokens are always minutes:seconds, never hours:minutes.
"""

from __future__ import annotations

import re

from chaptertrack.models.chapter import TimestampMatch

TIMESTAMP_PATTERN = re.compile(r"\(?(\d{1,2}):(\d{2})(?::(\d{2}))?\)?", re.ASCII)

_BARE_TIMESTAMP = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$", re.ASCII)


def _to_seconds(first: str, second: str, third: str | None) -> int:
    if third is not None:
        return int(first) * 3600 + int(second) * 60 + int(third)
    return int(first) * 60 + int(second)


def match_timestamp(line: str) -> TimestampMatch | None:
    """Find the first timestamp token in a line.

    Only the leftmost token is used; any later tokens on the same line are
    ignored.

    Args:
        line: One line of text

    Returns:
        TimestampMatch with the matched substring and decoded seconds,
        or None if the line has no timestamp-shaped substring.
    """
    match = TIMESTAMP_PATTERN.search(line)
    if not match:
        return None
    return TimestampMatch(
        matched_text=match.group(0),
        line_text=line,
        seconds=_to_seconds(*match.groups()),
    )


def parse_timestamp(ts: str) -> int:
    """Convert a bare timestamp string to seconds.

    Supports formats:
    - "1:23" (minutes:seconds)
    - "1:23:45" (hours:minutes:seconds)

    Raises:
        ValueError: If the string is not a timestamp
    """
    match = _BARE_TIMESTAMP.match(ts)
    if not match:
        raise ValueError(f"Not a timestamp: {ts!r}")
    return _to_seconds(*match.groups())


def format_timestamp(seconds: int | float) -> str:
    """Format seconds as M:SS, or H:MM:SS for an hour and over."""
    total = max(int(seconds), 0)
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
