"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup
- Text processing (URL display forms, title segments)
- Timestamps
"""

from folio.utils.timestamp import now

__all__ = ["now"]
