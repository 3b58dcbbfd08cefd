"""
Custom exceptions for chaptertrack.

All chaptertrack exceptions inherit from ChaptertrackError for easy catching.
"""

from __future__ import annotations

from typing import Any


class ChaptertrackError(Exception):
    """Base exception for all chaptertrack errors."""

    pass


class MetadataError(ChaptertrackError):
    """Error acquiring video metadata from a source tier.

    Attributes:
        message: Human-readable error message
        category: Error classification (e.g., "unavailable", "network")
        stderr: Full stderr output from the external tool, if any
        details: Additional diagnostic information
        suggestion: Recommended remediation steps
    """

    def __init__(
        self,
        message: str,
        *,
        category: str = "unknown",
        stderr: str = "",
        details: dict[str, Any] | None = None,
        suggestion: str = "",
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.stderr = stderr
        self.details = details or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for logging or API responses."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
            "category": self.category,
        }
        if self.details:
            result["details"] = self.details
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result


class MetadataTimeoutError(MetadataError):
    """The metadata tool did not answer within the configured timeout."""

    def __init__(self, message: str, *, timeout: float | None = None):
        details = {"timeout": timeout} if timeout is not None else None
        super().__init__(
            message,
            category="timeout",
            details=details,
            suggestion="Increase extractor.metadata_timeout or check your connection.",
        )
        self.timeout = timeout


class ToolNotFoundError(ChaptertrackError):
    """Required external tool (yt-dlp) not found."""

    def __init__(self, tool_name: str, message: str | None = None):
        self.tool_name = tool_name
        msg = message or f"Required tool '{tool_name}' not found in PATH"
        super().__init__(msg)
