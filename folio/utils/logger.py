"""
Generic logger setup utilities.

One log session = one directory holding a DEBUG-level file per context, mirrored
to the console at INFO. Context-specific wrappers live in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional, TextIO

from loguru import logger

from folio import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors per level; levels not listed keep loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console: Optional[TextIO] = None,
) -> Path:
    """
    Start a log session for a context.

    Replaces any previously configured sinks with a file sink
    ({log_dir}/{context_name}.log, DEBUG and up) and a colorized console sink
    (INFO and up), then writes the provenance header.

    Args:
        context_name: Context identifier ("render", "template", "intake")
        log_dir: Session directory, created if needed
        extra_provenance: Extra header lines, e.g. {"Data location": "data"}
        console: Console stream (default: sys.stdout at call time)

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger("render", Path("outs/logs/build_20251114_123456"))
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(console or sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Write the session header: how this run was started, then any extra context.
    """
    header = {
        "FOLIO": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
