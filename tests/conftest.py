"""
-------
conftest.py
-------
Shared pytest fixtures for clipping tests.
"""

import pytest
import matplotlib
matplotlib.use("Agg")  # headless backend for CI
import matplotlib.pyplot as plt

from cutlines.geometry import Rect


# -----------------------------------------------------------------------------
# Geometry fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def window() -> Rect:
  """The 0..10 x 0..10 clip window used throughout the tests."""
  return Rect(x_min=0.0, x_max=10.0, y_min=0.0, y_max=10.0)


@pytest.fixture
def zigzag():
  """Enters through the left edge, exits through the bottom, re-enters and exits right."""
  return [(-1, 5), (5, 5), (5, -1), (11, 5)]


# -----------------------------------------------------------------------------
# Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
  """
  Create and yield an isolated Matplotlib Figure/Axes pair.

  The figure is automatically closed after the test to avoid memory leaks.
  """
  fig, ax = plt.subplots(figsize=(4, 3))
  yield fig, ax
  plt.close(fig)
