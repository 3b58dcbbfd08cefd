"""
Chapter title cleanup.
"""

from __future__ import annotations

import re

_LEADING_PUNCT = re.compile(r"^[-\s)(]+")

# Pictographs, misc symbols, dingbats, star and the emoji variation selector
_LEADING_SYMBOLS = re.compile("^[\U0001f300-\U0001f9ff\u2600-\u26ff\u2700-\u27bf\u2b50\ufe0f]+")


def clean_title(line: str, matched_text: str, next_number: int) -> str:
    """Build a chapter title from a line with its timestamp token removed.

    Args:
        line: Original line of text
        matched_text: Timestamp token found in the line
        next_number: Ordinal used for the placeholder when nothing is left.
            Callers pass the number after the current chapter's.

    Returns:
        Non-empty title
    """
    title = line.replace(matched_text, "", 1).strip()
    title = _LEADING_PUNCT.sub("", title).strip()
    title = _LEADING_SYMBOLS.sub("", title).strip()
    return title or f"Chapter {next_number}"
