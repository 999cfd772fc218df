"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Compact timestamp for directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 timestamp with microseconds, used for event ordering."""
    return datetime.now().isoformat()


def format_timestamp(iso_timestamp: str) -> str:
    """
    Format ISO 8601 timestamp to readable format.

    Examples:
        format_timestamp("2025-11-13T18:45:40.572549")
        # "2025-11-13 18:45:40"
    """
    try:
        return datetime.fromisoformat(iso_timestamp).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, TypeError):
        # Return original if parsing fails
        return iso_timestamp
