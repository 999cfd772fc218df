"""
Shared utilities for Portify.

Common functionality used across contexts:
- Logger setup
- Pipeline event logging
- Timestamps
"""

from portify.utils.timestamp import format_timestamp, now, now_exact

__all__ = ["format_timestamp", "now", "now_exact"]
