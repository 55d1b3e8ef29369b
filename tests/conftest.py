"""
-------
conftest.py
-------
Shared pytest fixtures for pen and shape tests.
"""

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt

from scribble.pen import Pen
from scribble.rng import RNG


# -----------------------------------------------------------------------------
# Test doubles
# -----------------------------------------------------------------------------
class StubRNG:
  """Random source returning a fixed fraction of each requested range.

  Records every (low, high) request in `calls`.
  """

  def __init__(self, fraction: float = 0.0):
    self.fraction = fraction
    self.calls = []

  def uniform(self, low, high):
    self.calls.append((low, high))
    return low + (high - low) * self.fraction


class RecordingPen(Pen):
  """Pen that remembers every attraction target it was offered."""

  __slots__ = ("targets",)

  def __init__(self, *args, **kwargs):
    self.targets = []
    super().__init__(*args, **kwargs)

  def attract(self, x, y):
    self.targets.append((x, y))
    super().attract(x, y)


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
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


# -----------------------------------------------------------------------------
# Pen fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def stub_rng():
  return StubRNG()


@pytest.fixture
def seeded_rng():
  """Provide a deterministic RNG with fixed seed."""
  return RNG(seed=123)


@pytest.fixture
def pen(seeded_rng):
  """Default-parameter pen at the origin with a seeded RNG."""
  return Pen(0, 0, rng=seeded_rng)


@pytest.fixture
def still_pen(stub_rng):
  """Recording pen with zero curl, so its heading never changes."""
  p = RecordingPen(0, 0, rng=stub_rng)
  p.set_curl(0)
  return p
