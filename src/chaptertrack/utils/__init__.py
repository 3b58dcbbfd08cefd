"""
Utility functions for chaptertrack.
"""

from chaptertrack.utils.logging import configure_logging, log_timed
from chaptertrack.utils.system import find_tool

__all__ = [
    "configure_logging",
    "find_tool",
    "log_timed",
]
