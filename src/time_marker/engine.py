# This module implements the marker engine: named timestamps collected into groups and reported on demand.
# All state lives on one TimeMarker instance behind a single reentrant lock, so any thread may mark or report.
# Nested groups suspend the enclosing group on a stack and resume it when the inner group ends.
# Every report consumes the collected state, leaving the engine as if freshly created.

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from src.time_marker.models import MarkGroup
from src.time_marker.report import GroupReport, build_group_reports, render_report
from src.time_marker.sinks import Sink

LOGGER = logging.getLogger("time_marker")

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class TimeMarker:
    """
    Record marks and report the time spent between consecutive ones.

    Typical use::

        marker = TimeMarker()
        marker.mark("start")
        do_work()
        marker.mark("end")
        marker.report(LoggingSink())

    Marks can be split into groups with `begin_group` / `end_group` (or the
    `group()` context manager); each group is reported as its own block.

    Sinks run under the marker's lock. The lock is reentrant, so a sink (or a
    logging handler behind it) may call back into the same marker; anything it
    marks during a report is discarded with the reported state.
    """

    def __init__(self, clock: Clock = wall_clock_ms) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._current: MarkGroup | None = None
        self._completed: list[MarkGroup] = []
        self._stack: list[MarkGroup] = []

    def mark(self, key: str) -> None:
        """Make a mark. Repeated keys within a group are stored as ``key(1)``, ``key(2)``..."""

        if key is None:
            raise ValueError("mark key must not be None")
        if not isinstance(key, str):
            raise TypeError(f"mark key must be a str, got: {type(key).__name__}")

        with self._lock:
            timestamp_ms = self._clock()
            if self._current is None:
                self._current = MarkGroup()
            self._current.add(key, timestamp_ms)

    def begin_group(self) -> None:
        with self._lock:
            if self._current is not None:
                self._stack.append(self._current)
            self._current = MarkGroup()

    def end_group(self) -> None:
        """Close the current group and resume the enclosing one, if any."""

        with self._lock:
            # Unmatched calls still record an (empty) group; it is skipped at report time.
            self._completed.append(self._current if self._current is not None else MarkGroup())
            self._current = self._stack.pop() if self._stack else None
            LOGGER.debug("closed mark group depth=%d pending=%d", len(self._stack), len(self._completed))

    @contextmanager
    def group(self) -> Iterator[TimeMarker]:
        self.begin_group()
        try:
            yield self
        finally:
            self.end_group()

    def report(self, sink: Sink) -> list[GroupReport]:
        """Log the time distribution per group, largest segments first."""

        return self._report(sink, sequential=False)

    def report_sequentially(self, sink: Sink) -> list[GroupReport]:
        """Log the time distribution per group in recording order."""

        return self._report(sink, sequential=True)

    def _report(self, sink: Sink, *, sequential: bool) -> list[GroupReport]:
        with self._lock:
            try:
                groups = list(self._completed)
                if self._current is not None:
                    groups.append(self._current)
                reports = build_group_reports(groups, sequential=sequential)
                for line in render_report(reports):
                    sink.log(line)
                LOGGER.debug(
                    "reported mark groups rendered=%d collected=%d sequential=%s",
                    len(reports),
                    len(groups),
                    sequential,
                )
                return reports
            finally:
                self._reset()

    def _reset(self) -> None:
        self._current = None
        self._completed = []
        self._stack = []

    @property
    def pending_groups(self) -> int:
        """Closed groups waiting for a report, not counting the current one."""

        with self._lock:
            return len(self._completed)

    @property
    def depth(self) -> int:
        """Number of suspended groups on the nesting stack."""

        with self._lock:
            return len(self._stack)
