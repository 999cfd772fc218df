"""
Publishing context logger.

Provides logging interface for publishing context with automatic [publish] prefix.
All publishing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from portify.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[publish]"


def setup_publishing_logger(log_dir: Path, subdomain: str) -> Path:
    """
    Setup logger for publishing context.

    Args:
        log_dir: Directory for this publishing session
        subdomain: Subdomain being published (recorded in provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="publish",
        log_dir=log_dir,
        extra_provenance={"Subdomain": subdomain},
    )


def _log_info(message: str) -> None:
    """Log info message with [publish] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [publish] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [publish] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [publish] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_publish_start(subdomain: str, publish_dir: Path, log_file: Path) -> None:
    """Log start of publishing with context."""
    _log_info(f"Starting to publish {subdomain}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Target: {publish_dir}")


def log_publish_result(subdomain: str, result, elapsed_time: float) -> None:
    """
    Log publishing result.

    Args:
        subdomain: Portfolio subdomain
        result: PublishResult from publish_portfolio()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"{subdomain}: publish succeeded ({elapsed_time:.2f}s)")
        _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to publish {subdomain} ({elapsed_time:.2f}s)")
        _log_error(f"  Error: {result.error}")
