"""
Default configuration values.
"""

# Seconds to wait for yt-dlp to print metadata before giving up
DEFAULT_METADATA_TIMEOUT = 30

# Parse chapters from the description when yt-dlp reports none
DEFAULT_PARSE_DESCRIPTION = True

DEFAULT_YT_DLP = "yt-dlp"

# Sentinel id returned when every metadata tier fails
FALLBACK_VIDEO_ID = "unknown"
