"""
cutlines
--------

Clip 2D polylines against an axis-aligned rectangular window.

    >>> from cutlines import Rect, clip_polyline
    >>> clip_polyline([(-1, 5), (5, 5), (5, -1), (11, 5)], Rect(0, 10, 0, 10))
    [[Point(x=0.0, y=5.0), Point(x=5.0, y=5.0), Point(x=5.0, y=0.0)], [Point(x=6.0, y=0.0), Point(x=10.0, y=4.0)]]

Matplotlib helpers live in `cutlines.mpl_utils`, the batch CLI in
`cutlines.runner`.
"""

from .geometry import ClipOutcome, Edge, Point, Polyline, Rect, as_polyline, as_rect
from .clipping import (
    Outcode, clip_polyline, clip_polylines, clip_segment, compute_outcode, outcode_to_edge,
)
from .formatting import format_point, format_polyline, format_polylines, format_segment

__version__ = "0.1.0"

__all__ = [
    "ClipOutcome", "Edge", "Point", "Polyline", "Rect", "as_polyline", "as_rect",
    "Outcode", "clip_polyline", "clip_polylines", "clip_segment",
    "compute_outcode", "outcode_to_edge",
    "format_point", "format_polyline", "format_polylines", "format_segment",
]
