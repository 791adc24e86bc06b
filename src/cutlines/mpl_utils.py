"""
mpl_utils.py
------------

Matplotlib helpers for inspecting clip results: the clip window as a
Rectangle patch, polylines as a LineCollection, and a combined
before/after plot.
"""

from __future__ import annotations

__all__ = ["rect_patch", "polylines_to_collection", "plot_clip", "save_clip_preview",]

import os
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.patches import Rectangle

from .clipping import clip_polylines
from .geometry import Polyline, RectLike, as_polyline, as_rect

PathLike = Union[str, os.PathLike]

WINDOW_STYLE = dict(fill=False, edgecolor="tab:gray", linestyle="--", linewidth=1.0)
SOURCE_STYLE = dict(colors="tab:blue", linewidths=1.0, alpha=0.35)
CLIPPED_STYLE = dict(colors="tab:red", linewidths=2.0)


def rect_patch(rect: RectLike, **style: Any) -> Rectangle:
    """Return an unfilled Rectangle outlining the clip window."""
    rect = as_rect(rect)
    kwargs = {**WINDOW_STYLE, **style}
    return Rectangle((rect.x_min, rect.y_min), rect.width, rect.height, **kwargs)


def polylines_to_collection(lines: Sequence[Sequence[Sequence[float]]],
                            **style: Any) -> LineCollection:
    """Pack polylines into a single LineCollection.

    Polylines with fewer than two points have nothing to draw and are skipped.
    """
    segments = [np.asarray(as_polyline(line), dtype=float) for line in lines]
    segments = [s for s in segments if len(s) >= 2]
    return LineCollection(segments, **style)


def plot_clip(ax: Axes,
              lines: Sequence[Sequence[Sequence[float]]],
              rect: RectLike,
              clipped: Optional[Sequence[Polyline]] = None,
              margin: float = 0.05) -> list[Polyline]:
    """Draw window, source polylines and clip result on `ax`.

    Args:
        ax: Target Axes.
        lines: Source polylines.
        rect: Clip window.
        clipped: Precomputed result; computed with clip_polylines when None.
        margin: Fractional padding around the combined extent.

    Returns:
        The clipped polylines that were drawn.
    """
    rect = as_rect(rect)
    if clipped is None:
        clipped = clip_polylines(lines, rect)

    ax.add_patch(rect_patch(rect))
    ax.add_collection(polylines_to_collection(lines, **SOURCE_STYLE))
    ax.add_collection(polylines_to_collection(clipped, **CLIPPED_STYLE))

    pts = [p for line in lines for p in as_polyline(line)]
    xs = [rect.x_min, rect.x_max] + [p.x for p in pts]
    ys = [rect.y_min, rect.y_max] + [p.y for p in pts]
    dx = (max(xs) - min(xs)) * margin or 1.0
    dy = (max(ys) - min(ys)) * margin or 1.0
    ax.set_xlim(min(xs) - dx, max(xs) + dx)
    ax.set_ylim(min(ys) - dy, max(ys) + dy)
    ax.set_aspect("equal")
    return list(clipped)


def save_clip_preview(output_path: PathLike,
                      lines: Sequence[Sequence[Sequence[float]]],
                      rect: RectLike,
                      clipped: Optional[Sequence[Polyline]] = None,
                      img_size: Tuple[int, int] = (800, 800),
                      dpi: int = 100) -> Path:
    """Render plot_clip into an image file and return its path."""
    out = Path(output_path)
    fig, ax = plt.subplots(figsize=(img_size[0] / dpi, img_size[1] / dpi))
    try:
        plot_clip(ax, lines, rect, clipped)
        fig.savefig(out, dpi=dpi)
    finally:
        plt.close(fig)
    return out
