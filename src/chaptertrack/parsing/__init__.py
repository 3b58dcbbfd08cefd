"""
Timestamp and title parsing for chapter lines.
"""

from chaptertrack.parsing.timestamps import (
    TIMESTAMP_PATTERN,
    format_timestamp,
    match_timestamp,
    parse_timestamp,
)
from chaptertrack.parsing.titles import clean_title

__all__ = [
    "TIMESTAMP_PATTERN",
    "clean_title",
    "format_timestamp",
    "match_timestamp",
    "parse_timestamp",
]
