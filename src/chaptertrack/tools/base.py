"""
Base classes for metadata sources and the command line tools behind them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass
class ToolResult:
    """Captured output of one external tool run."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    elapsed: float = 0.0

    @property
    def success(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class MetadataSource(Protocol):
    """Anything that can resolve a video reference to raw metadata."""

    async def fetch_metadata(self, url: str) -> dict[str, Any]:
        """Return the raw metadata document for ``url``.

        Raises:
            Exception: Any failure; the extractor treats it as a tier failure.
        """
        ...


class MetadataTool(ABC):
    """Metadata source backed by an executable on this machine."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name for logging and error messages."""

    @abstractmethod
    def get_path(self) -> str:
        """Get the path to the tool executable."""

    @abstractmethod
    async def fetch_metadata(self, url: str) -> dict[str, Any]:
        """Return the raw metadata document for ``url``."""
