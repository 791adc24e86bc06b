"""
clipping.py
-----------

Cohen-Sutherland clipping of line segments and polylines against an
axis-aligned rectangle.

Core API:

    clip_segment(a: PointLike, b: PointLike, rect: RectLike) -> ClipOutcome | None

        Returns the visible part of segment a-b, tagging each endpoint with
        the window edge it was moved onto, or None when the segment lies
        entirely outside the window.


    clip_polyline(line: Sequence[PointLike], rect: RectLike) -> list[Polyline]

        Clips each consecutive pair of points and stitches the visible pieces
        into sub-polylines. A new sub-polyline starts after a fully rejected
        segment or after a visible piece whose end was clipped onto an edge,
        so a path that leaves the window and comes back is never joined by a
        straight jump across the excluded region.


    clip_polylines(lines: Iterable[Sequence[PointLike]], rect: RectLike) -> list[Polyline]

        clip_polyline over several inputs, results concatenated in input order.

Known limitation: outcode comparisons against NaN are always false, so a NaN
coordinate would read as "inside". clip_segment rejects non-finite input with
ValueError rather than passing it through.
"""

from __future__ import annotations

__all__ = ["Outcode", "compute_outcode", "outcode_to_edge",
           "clip_segment", "clip_polyline", "clip_polylines",]

import logging
import math
from enum import IntFlag
from typing import Iterable, Optional, Sequence

from .geometry import (
    ClipOutcome, Edge, Point, Polyline, Rect, RectLike,
    as_point, as_polyline, as_rect,
)

LOGGER_NAME = "cutlines"

PointLike = Sequence[float]


class Outcode(IntFlag):
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


_EDGE_BY_OUTCODE = {
    Outcode.LEFT:   Edge.LEFT,
    Outcode.RIGHT:  Edge.RIGHT,
    Outcode.BOTTOM: Edge.BOTTOM,
    Outcode.TOP:    Edge.TOP,
}


def compute_outcode(x: float, y: float, rect: Rect) -> Outcode:
    """Classify (x, y) against the four half-planes of `rect`.

    Comparisons are strict, so points on the boundary are INSIDE.
    """
    code = Outcode.INSIDE
    if x < rect.x_min:
        code |= Outcode.LEFT
    elif x > rect.x_max:
        code |= Outcode.RIGHT
    if y < rect.y_min:
        code |= Outcode.BOTTOM
    elif y > rect.y_max:
        code |= Outcode.TOP
    return code


def outcode_to_edge(code: int) -> Edge:
    """Single-bit outcodes map to their Edge; anything else (0, corners) to NONE."""
    return _EDGE_BY_OUTCODE.get(Outcode(code), Edge.NONE)


def _check_finite(point: Point) -> None:
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise ValueError(f"cannot clip non-finite point {tuple(point)!r}")


def clip_segment(a: PointLike, b: PointLike, rect: RectLike) -> Optional[ClipOutcome]:
    """Clip segment a-b to `rect`.

    Args:
        a, b: Segment endpoints as (x, y) pairs.
        rect: Clip window, a Rect or (x_min, x_max, y_min, y_max).

    Returns:
        ClipOutcome with the (possibly moved) endpoints, or None when the
        segment is entirely outside.

    Raises:
        ValueError: If any coordinate is NaN or infinite.
    """
    a, b = as_point(a), as_point(b)
    rect = as_rect(rect)
    _check_finite(a)
    _check_finite(b)

    x0, y0 = a
    x1, y1 = b
    outcode0 = compute_outcode(x0, y0, rect)
    outcode1 = compute_outcode(x1, y1, rect)

    # Last non-zero outcode seen per endpoint; survives the point becoming
    # inside so the result can report which edge it was moved onto.
    last_edge0 = outcode0
    last_edge1 = outcode1

    while True:
        if not (outcode0 | outcode1):
            return ClipOutcome(
                start=Point(x0, y0),
                end=Point(x1, y1),
                start_edge=outcode_to_edge(last_edge0),
                end_edge=outcode_to_edge(last_edge1),
            )
        if outcode0 & outcode1:
            return None

        # Numeric comparison of the bitmasks, ties go to the first endpoint.
        outcode_out = outcode1 if outcode1 > outcode0 else outcode0

        # The bit tested guarantees a non-zero denominator.
        if outcode_out & Outcode.TOP:
            x = x0 + (x1 - x0) * (rect.y_max - y0) / (y1 - y0)
            y = rect.y_max
        elif outcode_out & Outcode.BOTTOM:
            x = x0 + (x1 - x0) * (rect.y_min - y0) / (y1 - y0)
            y = rect.y_min
        elif outcode_out & Outcode.RIGHT:
            y = y0 + (y1 - y0) * (rect.x_max - x0) / (x1 - x0)
            x = rect.x_max
        else:
            y = y0 + (y1 - y0) * (rect.x_min - x0) / (x1 - x0)
            x = rect.x_min

        if outcode_out == outcode0:
            x0, y0 = x, y
            outcode0 = compute_outcode(x0, y0, rect)
            if outcode0:
                last_edge0 = outcode0
        else:
            x1, y1 = x, y
            outcode1 = compute_outcode(x1, y1, rect)
            if outcode1:
                last_edge1 = outcode1


def clip_polyline(line: Sequence[PointLike], rect: RectLike) -> list[Polyline]:
    """Clip a polyline to `rect`, splitting it where it leaves the window.

    Args:
        line: Sequence of (x, y) pairs or an (N, 2) array.
        rect: Clip window, a Rect or (x_min, x_max, y_min, y_max).

    Returns:
        Visible sub-polylines in input order. Empty for inputs with fewer
        than two points or lying entirely outside the window.
    """
    logger = logging.getLogger(LOGGER_NAME)
    points = as_polyline(line)
    if len(points) < 2:
        return []
    rect = as_rect(rect)

    results: list[Polyline] = []
    current: Polyline = []

    for i in range(1, len(points)):
        outcome = clip_segment(points[i - 1], points[i], rect)
        if outcome is None:
            logger.debug(f"Segment {i - 1}-{i} rejected")
            if current:
                results.append(current)
                current = []
            continue

        # A corner exit leaves end_edge at NONE; re-entry elsewhere shows up
        # as a start that does not continue the current tail.
        if current and outcome.start != current[-1]:
            logger.debug(f"Segment {i - 1}-{i} re-enters at {tuple(outcome.start)}; "
                         f"closing sub-polyline of {len(current)} points")
            results.append(current)
            current = []

        if not current:
            current = [outcome.start, outcome.end]
        else:
            current.append(outcome.end)

        if outcome.end_edge is not Edge.NONE:
            logger.debug(f"Segment {i - 1}-{i} exits through {outcome.end_edge.name}; "
                         f"closing sub-polyline of {len(current)} points")
            results.append(current)
            current = []

    if current:
        results.append(current)
    return results


def clip_polylines(lines: Iterable[Sequence[PointLike]], rect: RectLike) -> list[Polyline]:
    """Clip several polylines against the same window."""
    rect = as_rect(rect)
    results: list[Polyline] = []
    for line in lines:
        results.extend(clip_polyline(line, rect))
    return results
