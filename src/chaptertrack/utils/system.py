"""
Executable lookup.
"""

import os
import shutil
import sys
from pathlib import Path


def find_tool(name: str, configured: str | None = None) -> str:
    """Resolve the executable to launch for ``name``.

    Lookup order: the configured path, the active environment's ``bin``,
    then ``PATH``.

    Args:
        name: Tool name (e.g., "yt-dlp")
        configured: Explicit path from config, ``~`` allowed

    Returns:
        Path to the executable. Falls back to the bare ``name`` so the
        launch error names the missing tool.
    """
    if configured:
        return str(Path(configured).expanduser())

    candidate = Path(sys.prefix) / "bin" / name
    if candidate.is_file() and os.access(candidate, os.X_OK):
        return str(candidate)

    return shutil.which(name) or name
