"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_region_skipped(region: str, reason: str) -> None:
    """Log a region that produces no content for this résumé."""
    _log_debug(f"Region '{region}' skipped: {reason}")
