"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, data_location: str) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        data_location: Base location documents are read from

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, "data")
        _log_info("Starting site build...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Data location": data_location},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(data_location: str, output_dir: Path, root_path: str) -> None:
    """Log start of a site build with context."""
    _log_info(f"Building site from {data_location}")
    _log_info(f"Output: {output_dir}")
    _log_debug(f"Site root path: {root_path}")


def log_build_result(result, elapsed_time: float) -> None:  # SiteBuildResult
    """
    Log site build result.

    Args:
        result: SiteBuildResult from build_site()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"Site built: {len(result.pages_written)} pages ({elapsed_time:.2f}s)")
    else:
        _log_error(f"Site build finished with failures ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
        for resume_id in result.failed_resumes:
            _log_error(f"  Failed: {resume_id}")
