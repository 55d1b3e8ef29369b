"""
stroke.py
---------

Growable point buffer for one continuous pen stroke.

Points live in a preallocated ``(capacity, 2)`` float64 numpy array. Shape
routines know their iteration count up front and call `reserve()` before the
stepping loop, so high-count shapes (1e5 steps and more) fill the buffer
without reallocation.
"""

from __future__ import annotations

__all__ = ["Stroke",]

from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from .geometry import Point

MIN_CAPACITY = 16


class Stroke:
    """Ordered sequence of points produced between two pen relocations."""

    __slots__ = ("_buf", "_size",)

    def __init__(self, capacity: int = MIN_CAPACITY) -> None:
        self._buf: NDArray[np.float64] = np.empty((max(int(capacity), 1), 2), dtype=np.float64)
        self._size: int = 0

    # -------------------------------------------------------------------------
    # Storage management
    # -------------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._buf.shape[0]

    def reserve(self, extra: int) -> None:
        """Make room for at least `extra` more points."""
        needed = self._size + int(extra)
        if needed > self.capacity:
            self._grow(needed)

    def _grow(self, needed: int) -> None:
        buf = np.empty((max(needed, 2 * self.capacity), 2), dtype=np.float64)
        buf[:self._size] = self._buf[:self._size]
        self._buf = buf

    def append(self, x: float, y: float) -> None:
        if self._size == self.capacity:
            self._grow(self._size + 1)
        self._buf[self._size, 0] = x
        self._buf[self._size, 1] = y
        self._size += 1

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Point]:
        for x, y in self._buf[:self._size].tolist():
            yield Point(x, y)

    def __getitem__(self, index: int) -> Point:
        if isinstance(index, slice):
            raise TypeError("Stroke indices must be integers; use to_array() for slicing")
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("Stroke index out of range")
        x, y = self._buf[index]
        return Point(float(x), float(y))

    @property
    def first(self) -> Optional[Point]:
        return self[0] if self._size else None

    @property
    def last(self) -> Optional[Point]:
        return self[-1] if self._size else None

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the used ``(n, 2)`` portion of the buffer."""
        return self._buf[:self._size].copy()

    @property
    def xy(self) -> tuple[list[float], list[float]]:
        """Separate x and y coordinate lists, as taken by ``ax.plot(x, y)``."""
        used = self._buf[:self._size]
        return used[:, 0].tolist(), used[:, 1].tolist()

    def length(self) -> float:
        """Polyline length of the stroke."""
        if self._size < 2:
            return 0.0
        deltas = np.diff(self._buf[:self._size], axis=0)
        return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())

    def is_finite(self) -> bool:
        return bool(np.isfinite(self._buf[:self._size]).all())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stroke):
            return NotImplemented
        return len(self) == len(other) and np.array_equal(
            self._buf[:self._size], other._buf[:other._size]
        )

    __hash__ = None

    def __repr__(self) -> str:
        first, last = self.first, self.last
        if first is None:
            return "<Stroke points=0>"
        return (
            f"<Stroke points={self._size} "
            f"first=({first.x:.3f}, {first.y:.3f}) last=({last.x:.3f}, {last.y:.3f})>"
        )
