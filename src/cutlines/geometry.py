"""
geometry.py
-----------

Value types shared by the clipping routines.

    Point         immutable (x, y) pair; compares equal to a plain tuple.
    Rect          axis-aligned clip window (x_min, x_max, y_min, y_max).
    Edge          window boundary a clipped endpoint was moved onto.
    ClipOutcome   visible part of one segment plus per-endpoint Edge tags.
    Polyline      list of Points joined by straight segments.
"""

from __future__ import annotations

__all__ = ["Point", "Rect", "Edge", "ClipOutcome", "Polyline", "RectLike",
           "as_point", "as_polyline", "as_rect",]

import math
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import NamedTuple, Sequence, TypeAlias, Union

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    x: float
    y: float


Polyline: TypeAlias = list[Point]


class Edge(Enum):
    """Rectangle boundary an endpoint was clipped against."""
    NONE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 3
    TOP = 4


@dataclass(frozen=True)
class Rect:
    """Axis-aligned clip window.

    Boundaries are inclusive: a point with x == x_max is inside.

    Attributes:
        x_min, x_max: Horizontal extent, x_min <= x_max.
        y_min, y_max: Vertical extent, y_min <= y_max.
    """

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        """Validate that all bounds are finite reals and coerce to float."""
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, Real) or isinstance(value, bool):
                raise TypeError(
                    f"{field.name} must be a real number, "
                    f"got {value!r} of type {type(value).__name__}"
                )
            float_val = float(value)
            if not math.isfinite(float_val):
                raise ValueError(f"{field.name} must be finite, got {float_val!r}")
            object.__setattr__(self, field.name, float_val)

        if self.x_min > self.x_max:
            raise ValueError(f"x_min ({self.x_min}) exceeds x_max ({self.x_max})")
        if self.y_min > self.y_max:
            raise ValueError(f"y_min ({self.y_min}) exceeds y_max ({self.y_max})")

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


RectLike: TypeAlias = Union[Rect, Sequence[float]]


@dataclass(frozen=True)
class ClipOutcome:
    """Visible portion of a segment that survived clipping.

    `start_edge`/`end_edge` name the boundary each endpoint was moved onto,
    or Edge.NONE when that endpoint was already inside the window.
    """

    start: Point
    end: Point
    start_edge: Edge = Edge.NONE
    end_edge: Edge = Edge.NONE

    @property
    def clipped(self) -> bool:
        return self.start_edge is not Edge.NONE or self.end_edge is not Edge.NONE


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------
def as_rect(rect: RectLike) -> Rect:
    """Accept a Rect or an (x_min, x_max, y_min, y_max) sequence."""
    if isinstance(rect, Rect):
        return rect
    try:
        x_min, x_max, y_min, y_max = rect
    except (TypeError, ValueError):
        raise TypeError(
            f"rect must be a Rect or (x_min, x_max, y_min, y_max), got {rect!r}"
        ) from None
    return Rect(x_min, x_max, y_min, y_max)


def as_point(point: Sequence[float]) -> Point:
    if isinstance(point, Point):
        return point
    try:
        x, y = point
    except (TypeError, ValueError):
        raise ValueError(f"point must be an (x, y) pair, got {point!r}") from None
    return Point(float(x), float(y))


def as_polyline(points: Union[Sequence[Sequence[float]], NDArray]) -> Polyline:
    """Normalize a sequence of pairs or an (N, 2) array into a Polyline."""
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return []
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"expected an (N, 2) array, got shape {points.shape}")
        return [Point(float(x), float(y)) for x, y in points.tolist()]
    return [as_point(p) for p in points]
