"""
Configuration for chaptertrack.
"""

from chaptertrack.config.defaults import (
    DEFAULT_METADATA_TIMEOUT,
    DEFAULT_PARSE_DESCRIPTION,
    FALLBACK_VIDEO_ID,
)
from chaptertrack.config.loader import (
    ConfigSource,
    ExtractorConfig,
    clear_config_cache,
    get_config,
)

__all__ = [
    "DEFAULT_METADATA_TIMEOUT",
    "DEFAULT_PARSE_DESCRIPTION",
    "FALLBACK_VIDEO_ID",
    "ConfigSource",
    "ExtractorConfig",
    "clear_config_cache",
    "get_config",
]
