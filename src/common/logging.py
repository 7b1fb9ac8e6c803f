"""
Logging setup for marker reports and engine diagnostics.
`LoggingSink` writes report lines to the `TimeMarker` logger (or `TIME_MARKER_TAG`), and the
engine emits debug records on `time_marker`; neither attaches handlers of its own.
Host scripts such as `scripts/demo_lifecycle.py` call `configure_logging` once so those records
reach stderr with timestamps at `LOG_LEVEL`. `resolve_level` also maps `TIME_MARKER_SINK_LEVEL`.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

_LOGGING_CONFIGURED = False


def resolve_level(level_name: str, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value, falling back to `default`."""

    level = getattr(logging, level_name.strip().upper(), None)
    return level if isinstance(level, int) else default


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    logging.basicConfig(
        level=resolve_level(settings.LOG_LEVEL),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
