"""
Logging utilities.
"""

import logging
import time

logger = logging.getLogger("chaptertrack")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_timed(msg: str, start_time: float | None = None) -> None:
    """Log timestamped message.

    Args:
        msg: Message to log
        start_time: Start time from time.time(), or None for [START]
    """
    elapsed = f"[{time.time() - start_time:.1f}s]" if start_time else "[START]"
    logger.info(f"{elapsed} {msg}")


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    if verbose:
        logger.setLevel(logging.DEBUG)
