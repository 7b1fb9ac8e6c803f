# This module defines where rendered report lines go.
# The engine only needs an object with `log(message)`, so any of these can be swapped in.
# LoggingSink is the default for applications and routes lines through stdlib logging.
# CaptureSink keeps lines in memory so tests can assert on exact report output.

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO, runtime_checkable

from src.common.logging import resolve_level
from src.common.settings import get_settings


@runtime_checkable
class Sink(Protocol):
    def log(self, message: str) -> None: ...


class LoggingSink:
    """Emit each report line as one log record on the marker logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int | str | None = None) -> None:
        settings = get_settings()
        self.logger = logger or logging.getLogger(settings.TIME_MARKER_TAG)
        if level is None:
            level = settings.TIME_MARKER_SINK_LEVEL
        self.level = resolve_level(level) if isinstance(level, str) else int(level)

    def log(self, message: str) -> None:
        self.logger.log(self.level, message)


class CaptureSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def log(self, message: str) -> None:
        self.lines.append(message)

    def clear(self) -> None:
        self.lines.clear()


class PrintSink:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def log(self, message: str) -> None:
        # sys.stdout may be swapped after construction.
        stream = self.stream if self.stream is not None else sys.stdout
        print(message, file=stream)
