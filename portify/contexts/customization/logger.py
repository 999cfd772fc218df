"""
Customization context logger.

Provides logging interface for customization context with automatic [customize] prefix.
All customization modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[customize]"


# Wrapper functions with automatic [customize] prefix


def _log_info(message: str) -> None:
    """Log info message with [customize] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [customize] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [customize] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level customization helpers


def log_loop_expansion(label: str, regions: int, items: int) -> None:
    """Log how many loop regions of one kind were expanded."""
    if regions == 0:
        return
    if items == 0:
        _log_debug(f"{label}: {regions} region(s) collapsed to fallback (no items)")
    else:
        _log_debug(f"{label}: {regions} region(s) expanded x{items}")


def log_unterminated_region(label: str, position: int) -> None:
    """Log a start marker that has no matching end marker."""
    _log_warning(f"{label}: start marker at offset {position} has no end marker; left as-is")


def log_template_loaded(template_name: str, template_dir: Path, cached: bool) -> None:
    """Log a template library lookup."""
    source = "cache" if cached else template_dir
    _log_debug(f"Loaded template '{template_name}' from {source}")
