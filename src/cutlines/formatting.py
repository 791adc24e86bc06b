"""
formatting.py
-------------

Bracketed text rendering of points and polylines for logs and debugging.

    (0, 5)
    [ (0, 5) (10, 5) ]
    [ [ (0, 5) (5, 5) ] [ (6, 0) (10, 4) ] ]

Numbers use the general ("g") format with six significant digits. This is a
diagnostic aid, not a serialization format.
"""

from __future__ import annotations

__all__ = ["format_point", "format_segment", "format_polyline", "format_polylines",]

from typing import Iterable, Sequence


def format_point(point: Sequence[float]) -> str:
    x, y = point
    return f"({x:g}, {y:g})"


def format_segment(start: Sequence[float], end: Sequence[float]) -> str:
    return f"[ {format_point(start)} {format_point(end)} ]"


def format_polyline(line: Iterable[Sequence[float]]) -> str:
    return "[ " + "".join(f"{format_point(p)} " for p in line) + "]"


def format_polylines(lines: Iterable[Iterable[Sequence[float]]]) -> str:
    return "[ " + "".join(f"{format_polyline(line)} " for line in lines) + "]"
