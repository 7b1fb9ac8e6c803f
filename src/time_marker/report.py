# This module turns closed mark groups into segment reports and rendered text lines.
# It exists separately from the engine so report math can be inspected without a sink or a lock.
# Only groups with at least two marks yield segments; numbering counts rendered groups only.
# Cost ordering breaks ties by insertion index so identical inputs always render identically.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.time_marker.models import MarkGroup

NOTHING_TO_REPORT = "Nothing to report!"
SEPARATOR = "=" * 49
GROUP_HEADER_TEMPLATE = "/************** group {number} ****************/"
SEGMENT_ARROW = " ---> "


@dataclass(frozen=True)
class Segment:
    index: int
    from_key: str
    to_key: str
    cost_ms: int

    @property
    def label(self) -> str:
        return f"{self.from_key}{SEGMENT_ARROW}{self.to_key}"


@dataclass(frozen=True)
class GroupReport:
    number: int
    segments: tuple[Segment, ...]
    total_ms: int

    def percentage(self, segment: Segment) -> float:
        if self.total_ms == 0:
            return 0.0
        return segment.cost_ms * 100.0 / self.total_ms


def build_segments(group: MarkGroup) -> list[Segment]:
    """Pair consecutive marks in insertion order."""

    marks = group.marks
    return [
        Segment(index=idx, from_key=earlier.key, to_key=later.key, cost_ms=later.timestamp_ms - earlier.timestamp_ms)
        for idx, (earlier, later) in enumerate(zip(marks, marks[1:]))
    ]


def build_group_reports(groups: Iterable[MarkGroup], *, sequential: bool = False) -> list[GroupReport]:
    """
    Build one report per group that has more than one mark.

    With `sequential` the segments keep their recording order; otherwise they are
    sorted by descending cost, equal costs staying in recording order.
    """

    reports: list[GroupReport] = []
    for group in groups:
        if len(group) < 2:
            continue
        segments = build_segments(group)
        total_ms = sum(segment.cost_ms for segment in segments)
        if not sequential:
            segments = sorted(segments, key=lambda segment: (-segment.cost_ms, segment.index))
        reports.append(GroupReport(number=len(reports) + 1, segments=tuple(segments), total_ms=total_ms))
    return reports


def format_segment_line(report: GroupReport, segment: Segment) -> str:
    return f"{segment.label}  cost: {segment.cost_ms}  percentage: {report.percentage(segment):.2f}%"


def render_group_report(report: GroupReport) -> list[str]:
    lines = [GROUP_HEADER_TEMPLATE.format(number=report.number), SEPARATOR]
    lines.extend(format_segment_line(report, segment) for segment in report.segments)
    lines.append(SEPARATOR)
    return lines


def render_report(reports: list[GroupReport]) -> list[str]:
    if not reports:
        return [NOTHING_TO_REPORT]
    lines: list[str] = []
    for report in reports:
        lines.extend(render_group_report(report))
    return lines
