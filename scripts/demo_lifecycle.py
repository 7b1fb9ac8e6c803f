#!/usr/bin/env python3
"""
Instrument a simulated create/resume lifecycle and report where the time went.
It shows the intended usage: mark at each step, then report once at teardown.
Run it directly; report lines are written through the `TimeMarker` logger.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common.logging import configure_logging
from src.time_marker.engine import TimeMarker
from src.time_marker.sinks import LoggingSink, Sink


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report time spent in a simulated app lifecycle")
    parser.add_argument("--sequential", action="store_true", help="List segments in recording order")
    parser.add_argument("--create-delay-ms", type=int, default=500)
    parser.add_argument("--resume-delay-ms", type=int, default=1000)
    return parser.parse_args(argv)


def _simulate_work(delay_ms: int) -> None:
    time.sleep(max(delay_ms, 0) / 1000.0)


def run_lifecycle(marker: TimeMarker, *, create_delay_ms: int, resume_delay_ms: int) -> None:
    marker.mark("onCreate_start")
    marker.mark("onCreate_setContentView")
    _simulate_work(create_delay_ms)
    marker.mark("onCreate_finish")

    marker.mark("onResume_start")
    _simulate_work(resume_delay_ms)
    marker.mark("onResume_finish")


def main(argv: list[str] | None = None, *, marker: TimeMarker | None = None, sink: Sink | None = None) -> None:
    args = parse_args(argv)
    configure_logging()

    marker = marker or TimeMarker()
    run_lifecycle(marker, create_delay_ms=args.create_delay_ms, resume_delay_ms=args.resume_delay_ms)

    sink = sink or LoggingSink()
    if args.sequential:
        marker.report_sequentially(sink)
    else:
        marker.report(sink)


if __name__ == "__main__":
    main()
