"""
Portfolio Publishing Module

Writes the assembled portfolio page to {publish_root}/{subdomain}/index.html,
the artifact served at the user's subdomain.
"""

import os
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from portify.contexts.customization.customizer import TemplateCustomizer
from portify.contexts.customization.exceptions import TemplateRenderError
from portify.contexts.customization.portfolio_data_structure import PortfolioData, TemplateSource
from portify.contexts.publishing.logger import (
    _log_debug,
    log_publish_result,
    log_publish_start,
    setup_publishing_logger,
)
from portify.utils.event_logging import log_pipeline_event
from portify.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
PUBLISH_PATH = Path(os.getenv("PUBLISH_PATH", "outs/sites"))

PAGE_FILENAME = "index.html"

# DNS label: lowercase letters, digits and inner hyphens
SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


@dataclass
class PublishResult:
    """
    Result of publishing a portfolio.

    Attributes:
        success: Whether the page was written
        subdomain: Subdomain the page was published under
        output_path: Path to the written page (None if failed)
        error: Error description (None if succeeded)
        time_s: Time taken in seconds
        log_dir: Directory containing the publish log
    """

    success: bool
    subdomain: str = ""
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def is_valid_subdomain(subdomain: Optional[str]) -> bool:
    """Check that a subdomain is a single lowercase DNS label."""
    return bool(subdomain) and SUBDOMAIN_PATTERN.match(subdomain) is not None


def publish_portfolio(
    source: TemplateSource,
    data: PortfolioData,
    publish_root: Optional[Path] = None,
    customizer: Optional[TemplateCustomizer] = None,
    template_name: str = "",
) -> PublishResult:
    """
    Assemble and write a portfolio page with logging and event tracking.

    On success, the page is written to {publish_root}/{subdomain}/index.html
    and a publish_completed event is logged. On failure nothing is written and
    a publish_failed event records the reason.

    Args:
        source: Template markup, style and script
        data: Portfolio data bundle (profile.subdomain is required)
        publish_root: Root of published sites (default: PUBLISH_PATH env variable)
        customizer: Engine instance (default: a new TemplateCustomizer)
        template_name: Template identifier, recorded in the event log

    Returns:
        PublishResult with success status and output path
    """
    subdomain = data.profile.subdomain or ""

    # Early validation before any logging setup
    if not is_valid_subdomain(subdomain):
        error = f"Invalid subdomain: {subdomain!r}"
        log_pipeline_event(
            event_type="publish_failed", subdomain=subdomain, source="publishing", error=error
        )
        return PublishResult(success=False, subdomain=subdomain, error=error)

    publish_root = Path(publish_root) if publish_root is not None else PUBLISH_PATH
    publish_dir = publish_root / subdomain

    log_dir = LOGS_PATH / f"publish_{now()}"
    log_file = setup_publishing_logger(log_dir, subdomain)
    log_publish_start(subdomain, publish_dir, log_file)

    start_time = time.time()
    customizer = customizer or TemplateCustomizer()

    try:
        page = customizer.generate_complete_page(source.html, source.css, source.js, data)
        publish_dir.mkdir(parents=True, exist_ok=True)
        output_path = publish_dir / PAGE_FILENAME
        output_path.write_text(page, encoding="utf-8")
        _log_debug(f"Wrote {len(page)} characters")
        result = PublishResult(success=True, subdomain=subdomain, output_path=output_path)
    except (TemplateRenderError, OSError) as e:
        result = PublishResult(success=False, subdomain=subdomain, error=str(e))

    result.time_s = time.time() - start_time
    result.log_dir = log_dir
    log_publish_result(subdomain, result, result.time_s)

    if result.success:
        log_pipeline_event(
            event_type="publish_completed",
            subdomain=subdomain,
            source="publishing",
            template=template_name,
            output_path=str(result.output_path),
            publish_time_s=round(result.time_s, 3),
        )
    else:
        log_pipeline_event(
            event_type="publish_failed",
            subdomain=subdomain,
            source="publishing",
            template=template_name,
            error=result.error,
        )

    return result
