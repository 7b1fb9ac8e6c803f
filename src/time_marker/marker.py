# This module exposes a process-wide default TimeMarker through plain functions.
# It lets application code call `mark("step")` anywhere without threading an instance around.
# The default instance can be replaced, which keeps tests isolated from each other.

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from src.time_marker.engine import TimeMarker
from src.time_marker.report import GroupReport
from src.time_marker.sinks import LoggingSink, Sink

_DEFAULT_MARKER: TimeMarker | None = None
_DEFAULT_LOCK = threading.Lock()


def get_default_marker() -> TimeMarker:
    """Return the shared marker, creating it on first use."""

    global _DEFAULT_MARKER
    with _DEFAULT_LOCK:
        if _DEFAULT_MARKER is None:
            _DEFAULT_MARKER = TimeMarker()
        return _DEFAULT_MARKER


def set_default_marker(marker: TimeMarker | None) -> TimeMarker | None:
    """Swap the shared marker and return the previous one. `None` means recreate lazily."""

    global _DEFAULT_MARKER
    with _DEFAULT_LOCK:
        previous = _DEFAULT_MARKER
        _DEFAULT_MARKER = marker
        return previous


def mark(key: str) -> None:
    get_default_marker().mark(key)


def begin_group() -> None:
    get_default_marker().begin_group()


def end_group() -> None:
    get_default_marker().end_group()


@contextmanager
def group() -> Iterator[TimeMarker]:
    with get_default_marker().group() as marker:
        yield marker


def report(sink: Sink | None = None) -> list[GroupReport]:
    return get_default_marker().report(sink if sink is not None else LoggingSink())


def report_sequentially(sink: Sink | None = None) -> list[GroupReport]:
    return get_default_marker().report_sequentially(sink if sink is not None else LoggingSink())
