"""
Package marker for source code under `src`.
`src.time_marker` holds the marker engine; `src.common` holds settings and logging shared by it and the scripts.
"""
