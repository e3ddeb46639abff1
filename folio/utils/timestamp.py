"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, filesystem-safe timestamp.

    Used to name log session directories (e.g., outs/logs/build_20251114_123456).

    Returns:
        Timestamp string formatted as YYYYMMDD_HHMMSS
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
