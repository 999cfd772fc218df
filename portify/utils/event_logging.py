"""
Pipeline event logging utilities for Portify (Tier 2 logging).

Appends portfolio pipeline events (publishing, template uploads) to a JSON Lines
log so that other tools can follow what happened to each subdomain.

For detailed within-context logging (Tier 1), use portify.utils.logger instead.

Usage:
    from portify.utils.event_logging import log_pipeline_event, get_recent_events

    log_pipeline_event(
        event_type="publish_completed",
        subdomain="ada-123456",
        source="publishing",
        template="minimal_card",
    )
"""

import json
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from portify.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def get_events_file() -> Path:
    """Resolve the event log path, honoring PIPELINE_EVENTS_FILE when set."""
    configured = os.getenv("PIPELINE_EVENTS_FILE")
    if configured:
        return Path(configured)
    return LOGS_PATH / "portfolio_pipeline_events.log"


def log_pipeline_event(event_type: str, subdomain: str, source: str, **extra_fields) -> None:
    """
    Log an event to the master pipeline event log.

    Events are appended in JSON Lines format (one JSON object per line), which
    keeps filtering by event_type, subdomain, or source trivial.

    Args:
        event_type: Type of event (e.g., "publish_completed", "publish_failed")
        subdomain: Portfolio subdomain the event concerns ("" if unknown)
        source: Event source (e.g., "publishing", "cli")
        **extra_fields: Additional event-specific fields
    """
    events_file = get_events_file()
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "subdomain": subdomain,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10, subdomain: Optional[str] = None, event_type: Optional[str] = None
) -> List[dict]:
    """
    Get the last n events from the pipeline log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        subdomain: Filter to only events for this subdomain (optional)
        event_type: Filter to only events of this type (optional)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = get_events_file()
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                event = json.loads(line.strip())
            except json.JSONDecodeError:
                # Skip malformed lines
                continue
            if isinstance(event, dict):
                events.append(event)

    if subdomain:
        events = [e for e in events if e.get("subdomain") == subdomain]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
