"""
Tier 1 session logging.

A session gets its own directory with one `{context}.log` file (everything
from DEBUG up) plus colorized console output at INFO. The log opens with a
header recording how the session was started.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any previously configured sinks, so one session logs at a time.

    Args:
        context_name: Log file stem (e.g., "publish")
        log_dir: Session directory, created if missing
        extra_provenance: Extra header lines (e.g., {"Subdomain": "ada-123456"})

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    _log_session_header(extra_provenance or {})

    return log_file


def _log_session_header(extra: Dict[str, str]) -> None:
    header = {
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
        **extra,
    }

    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
