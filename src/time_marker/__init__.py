"""
Package marker for source code under `src.time_marker`.
It groups the marker engine, report rendering, and sinks under a stable import path.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""
