"""
External tool wrappers for chaptertrack.
"""

from chaptertrack.tools.base import MetadataSource, MetadataTool, ToolResult
from chaptertrack.tools.yt_dlp import YtDlpError, YtDlpTool, parse_yt_dlp_error

__all__ = [
    "MetadataSource",
    "MetadataTool",
    "ToolResult",
    "YtDlpError",
    "YtDlpTool",
    "parse_yt_dlp_error",
]
