"""
test_clipping.py
----------------
Unit tests for clip_segment and the outcode helpers in clipping.py
"""

import math

import pytest

from cutlines.clipping import Outcode, clip_segment, compute_outcode, outcode_to_edge
from cutlines.geometry import ClipOutcome, Edge, Point, Rect


# ---------------------------------------------------------------------------
# 1. Outcodes
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("xy, expected", [
  ((5, 5), Outcode.INSIDE),
  ((-1, 5), Outcode.LEFT),
  ((11, 5), Outcode.RIGHT),
  ((5, -1), Outcode.BOTTOM),
  ((5, 11), Outcode.TOP),
  ((-1, -1), Outcode.LEFT | Outcode.BOTTOM),
  ((11, 11), Outcode.RIGHT | Outcode.TOP),
])
def test_compute_outcode_regions(window, xy, expected):
  assert compute_outcode(*xy, window) == expected


@pytest.mark.parametrize("xy", [(0, 0), (10, 10), (0, 10), (10, 5), (5, 0)])
def test_boundary_points_are_inside(window, xy):
  assert compute_outcode(*xy, window) == Outcode.INSIDE


def test_outcode_to_edge_single_bits_only():
  assert outcode_to_edge(Outcode.LEFT) is Edge.LEFT
  assert outcode_to_edge(Outcode.RIGHT) is Edge.RIGHT
  assert outcode_to_edge(Outcode.BOTTOM) is Edge.BOTTOM
  assert outcode_to_edge(Outcode.TOP) is Edge.TOP
  assert outcode_to_edge(Outcode.INSIDE) is Edge.NONE
  assert outcode_to_edge(Outcode.LEFT | Outcode.BOTTOM) is Edge.NONE
  assert outcode_to_edge(Outcode.RIGHT | Outcode.TOP) is Edge.NONE


# ---------------------------------------------------------------------------
# 2. Trivial accept / reject
# ---------------------------------------------------------------------------

def test_inside_segment_unchanged(window):
  out = clip_segment((1, 1), (9, 9), window)
  assert out == ClipOutcome(Point(1, 1), Point(9, 9), Edge.NONE, Edge.NONE)
  assert not out.clipped


@pytest.mark.parametrize("a, b", [
  ((11, 1), (12, 9)),    # right
  ((-3, 1), (-1, 9)),    # left
  ((1, 11), (9, 12)),    # top
  ((1, -1), (9, -12)),   # bottom
  ((11, 11), (11, 11)),  # zero length, outside
])
def test_same_side_rejected(window, a, b):
  assert clip_segment(a, b, window) is None


def test_touching_boundary_is_inside(window):
  out = clip_segment((5, 5), (10, 5), window)
  assert out.end == (10, 5)
  assert out.end_edge is Edge.NONE


def test_zero_length_inside(window):
  out = clip_segment((3, 3), (3, 3), window)
  assert out.start == out.end == (3, 3)


# ---------------------------------------------------------------------------
# 3. Clipping
# ---------------------------------------------------------------------------

def test_horizontal_crossing_both_edges(window):
  out = clip_segment((-5, 5), (15, 5), window)
  assert out.start == (0, 5)
  assert out.end == (10, 5)
  assert out.start_edge is Edge.LEFT
  assert out.end_edge is Edge.RIGHT


def test_vertical_crossing_both_edges(window):
  out = clip_segment((5, -5), (5, 15), window)
  assert out.start == (5, 0)
  assert out.end == (5, 10)
  assert out.start_edge is Edge.BOTTOM
  assert out.end_edge is Edge.TOP


def test_exit_only_end_clipped(window):
  out = clip_segment((5, 5), (5, -1), window)
  assert out.start == (5, 5)
  assert out.end == (5, 0)
  assert out.start_edge is Edge.NONE
  assert out.end_edge is Edge.BOTTOM


def test_oblique_clip_coordinates(window):
  out = clip_segment((5, -1), (11, 5), window)
  assert out.start == pytest.approx((6, 0))
  assert out.end == pytest.approx((10, 4))
  assert out.start_edge is Edge.BOTTOM
  assert out.end_edge is Edge.RIGHT


def test_corner_region_reports_no_edge(window):
  """A point outside on two sides has a two-bit outcode, which maps to NONE."""
  out = clip_segment((-1, -1), (5, 5), window)
  assert out.start == pytest.approx((0, 0))
  assert out.start_edge is Edge.NONE
  assert out.end_edge is Edge.NONE


def test_multi_edge_crossing_clips_larger_outcode_first(window):
  # TOP (8) beats LEFT (1): the end is moved first, then the start
  out = clip_segment((-1, 8), (3, 12), window)
  assert out.start == pytest.approx((0, 9))
  assert out.end == pytest.approx((1, 10))
  assert out.start_edge is Edge.LEFT
  assert out.end_edge is Edge.TOP


def test_corner_graze_collapses_to_point(window):
  out = clip_segment((-5, 5), (5, 15), window)
  assert out.start == pytest.approx((0, 10))
  assert out.end == pytest.approx((0, 10))
  assert out.start_edge is Edge.LEFT
  assert out.end_edge is Edge.TOP


def test_rejected_after_partial_clip(window):
  """Both endpoints on different sides, but the line passes outside a corner."""
  assert clip_segment((-2, 9), (2, 13), window) is None


def test_direction_is_preserved(window):
  out = clip_segment((15, 5), (-5, 5), window)
  assert out.start == (10, 5)
  assert out.end == (0, 5)
  assert out.start_edge is Edge.RIGHT
  assert out.end_edge is Edge.LEFT


def test_result_points_are_point_instances(window):
  out = clip_segment([-5, 5], [15, 5], window)
  assert isinstance(out.start, Point)
  assert isinstance(out.end, Point)


# ---------------------------------------------------------------------------
# 4. Input handling
# ---------------------------------------------------------------------------

def test_rect_as_tuple():
  out = clip_segment((-5, 5), (15, 5), (0, 10, 0, 10))
  assert out.start == (0, 5)
  assert out.end == (10, 5)


def test_degenerate_window_line():
  rect = Rect(0, 10, 5, 5)
  out = clip_segment((-5, 0), (15, 10), rect)
  assert out.start == pytest.approx((5, 5))
  assert out.end == pytest.approx((5, 5))


@pytest.mark.parametrize("a, b", [
  ((math.nan, 1), (5, 5)),
  ((1, 1), (5, math.nan)),
  ((math.inf, 1), (5, 5)),
  ((1, 1), (5, -math.inf)),
])
def test_non_finite_rejected(window, a, b):
  with pytest.raises(ValueError):
    clip_segment(a, b, window)
