"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_document_loaded(location: str, kind: str) -> None:
    """Log a successful document load."""
    _log_debug(f"Loaded {kind} document from {location}")


def log_section_skipped(section: str, error: Exception) -> None:
    """Log a résumé section that will not be rendered because a required field is missing."""
    _log_warning(f"Skipping section '{section}': {error}")
