"""
yt-dlp tool wrapper for video metadata.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any

from chaptertrack.config.defaults import DEFAULT_METADATA_TIMEOUT, DEFAULT_YT_DLP
from chaptertrack.exceptions import (
    MetadataError,
    MetadataTimeoutError,
    ToolNotFoundError,
)
from chaptertrack.tools.base import MetadataTool, ToolResult
from chaptertrack.utils.system import find_tool

logger = logging.getLogger(__name__)


@dataclass
class YtDlpError:
    """Structured error information parsed from yt-dlp stderr.

    Attributes:
        category: Error classification (e.g., "unavailable", "geo_restricted")
        message: The original error message from yt-dlp
        stderr: Full stderr output for debugging
        details: Additional parsed details (HTTP codes)
        warnings: Warning messages extracted from stderr
    """

    category: str
    message: str
    stderr: str
    details: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


# Each tuple: (pattern, category). First match wins.
_ERROR_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"Sign in to confirm your age|age.restricted", re.IGNORECASE), "age_restricted"),
    (re.compile(r"private video|video is private", re.IGNORECASE), "private"),
    (re.compile(r"members.only|subscriber.only", re.IGNORECASE), "members_only"),
    (
        re.compile(
            r"Video unavailable|This video is unavailable|removed by the uploader|"
            r"This video has been removed",
            re.IGNORECASE,
        ),
        "unavailable",
    ),
    (
        re.compile(
            r"not available in your country|geo.?restrict|blocked in your country",
            re.IGNORECASE,
        ),
        "geo_restricted",
    ),
    (
        re.compile(
            r"Connection reset|Connection refused|Connection timed out|"
            r"Name or service not known|getaddrinfo failed|Temporary failure in name resolution",
            re.IGNORECASE,
        ),
        "network",
    ),
    (re.compile(r"429|too many requests|rate.?limit", re.IGNORECASE), "rate_limited"),
    (re.compile(r"is not a valid URL|Unsupported URL", re.IGNORECASE), "invalid_url"),
]

_HTTP_ERROR_PATTERN = re.compile(r"HTTP Error (\d+)", re.IGNORECASE)
_WARNING_PATTERN = re.compile(r"WARNING:\s*(.+?)(?:\n|$)", re.IGNORECASE)

_SUGGESTIONS = {
    "age_restricted": "This video requires age verification; add chapters manually.",
    "private": "The video is private.",
    "members_only": "The video is limited to channel members.",
    "unavailable": "The video may have been removed or made private.",
    "geo_restricted": "This video is not available in your country.",
    "network": "Check your internet connection and try again.",
    "rate_limited": "Wait a few minutes before retrying.",
    "invalid_url": "Check that the URL points to a single video.",
}


def _extract_warnings(stderr: str) -> list[str]:
    """Extract unique warning messages from yt-dlp stderr."""
    warnings = []
    for match in _WARNING_PATTERN.finditer(stderr):
        warning_text = match.group(1).strip()
        if warning_text and warning_text not in warnings:
            warnings.append(warning_text)
    return warnings


def parse_yt_dlp_error(stderr: str) -> YtDlpError:
    """Parse yt-dlp stderr output into structured error information.

    Args:
        stderr: The stderr output from a failed yt-dlp command

    Returns:
        YtDlpError with category, message, details, and warnings
    """
    error_match = re.search(r"ERROR:\s*(.+?)(?:\n|$)", stderr)
    message = error_match.group(1).strip() if error_match else stderr.strip()
    warnings = _extract_warnings(stderr)

    details: dict[str, Any] = {}
    http_match = _HTTP_ERROR_PATTERN.search(stderr)
    if http_match:
        details["http_code"] = int(http_match.group(1))

    for pattern, category in _ERROR_PATTERNS:
        if pattern.search(stderr):
            return YtDlpError(
                category=category,
                message=message,
                stderr=stderr,
                details=details,
                warnings=warnings,
            )

    return YtDlpError(
        category="http_error" if http_match else "unknown",
        message=message or "Unknown error",
        stderr=stderr,
        details=details,
        warnings=warnings,
    )


def yt_dlp_error_to_exception(error: YtDlpError) -> MetadataError:
    """Convert a YtDlpError to a MetadataError carrying its category."""
    details = dict(error.details)
    if error.warnings:
        details["warnings"] = error.warnings
    return MetadataError(
        error.message,
        category=error.category,
        stderr=error.stderr,
        details=details,
        suggestion=_SUGGESTIONS.get(error.category, ""),
    )


class YtDlpTool(MetadataTool):
    """Wrapper for the yt-dlp command line tool.

    Implements the MetadataSource protocol. Holds only its configuration,
    so one instance can serve concurrent extractions.
    """

    def __init__(self, path: str | None = None, timeout: float = DEFAULT_METADATA_TIMEOUT):
        self._path = path
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "yt-dlp"

    def get_path(self) -> str:
        """Get path to yt-dlp executable."""
        return find_tool(DEFAULT_YT_DLP, self._path)

    async def _run(self, args: list[str], timeout: float | None = None) -> ToolResult:
        """Run yt-dlp with given arguments.

        The child process is killed if it outlives ``timeout`` or if the
        awaiting task is cancelled.

        Raises:
            ToolNotFoundError: If the executable cannot be started
            MetadataTimeoutError: If the command does not finish in time
        """
        cmd = [self.get_path(), *args]
        start = time.monotonic()
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(self.name) from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            await self._kill(process)
            raise MetadataTimeoutError(
                f"{self.name} timed out after {timeout}s", timeout=timeout
            ) from None
        except asyncio.CancelledError:
            await self._kill(process)
            raise

        return ToolResult(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            elapsed=time.monotonic() - start,
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is not None:
            return
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()
        logger.debug(f"Killed yt-dlp process {process.pid}")

    async def get_metadata(self, url: str, timeout: float | None = None) -> dict:
        """Fetch video metadata without downloading.

        Returns:
            Dict with video metadata (yt-dlp JSON document)

        Raises:
            MetadataError: If metadata fetch fails or the output is not JSON
            ToolNotFoundError: If yt-dlp is not installed
        """
        result = await self._run(
            ["--dump-single-json", "--no-download", "--", url],
            timeout=timeout if timeout is not None else self.timeout,
        )
        logger.debug(f"yt-dlp exited {result.returncode} in {result.elapsed:.1f}s")

        if not result.success:
            raise yt_dlp_error_to_exception(parse_yt_dlp_error(result.stderr or ""))

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise MetadataError(
                f"Invalid JSON response: {e}", category="malformed_output"
            ) from e

        if not isinstance(data, dict):
            raise MetadataError(
                f"Expected a JSON object, got {type(data).__name__}",
                category="malformed_output",
            )
        return data

    async def fetch_metadata(self, url: str) -> dict[str, Any]:
        """MetadataSource entry point."""
        return await self.get_metadata(url)
