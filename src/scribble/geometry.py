"""
geometry.py
-----------

Small planar geometry helpers shared by the pen and the shape synthesizer.

Includes:
- Point: immutable (x, y) pair with Euclidean distance.
- as_point(): coerce a Point or (x, y) pair, validating type and finiteness.
- lerp(), normalize_angle(): scalar helpers.
- segment_lengths(), polyline_length(): polyline measurements, optionally
  including the closing (last -> first) segment.
"""

from __future__ import annotations

__all__ = [
    "TAU", "numeric", "PointXY", "Point", "as_finite", "as_point", "lerp",
    "normalize_angle", "segment_lengths", "polyline_length",
]

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, TypeAlias, Union

TAU = 2.0 * math.pi

numeric: TypeAlias = Union[int, float]
PointXY: TypeAlias = tuple[numeric, numeric]


@dataclass(frozen=True, slots=True)
class Point:
    """An (x, y) float pair. Unpacks like a tuple: ``x, y = point``."""
    x: float
    y: float

    def distance(self, other: Union["Point", PointXY]) -> float:
        """Euclidean distance to another point."""
        ox, oy = other
        return math.hypot(ox - self.x, oy - self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2


def as_finite(name: str, value: numeric) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Unsupported {name} type: {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def as_point(value: Union[Point, PointXY, Sequence[numeric]]) -> Point:
    """Return `value` as a Point.

    Raises:
        TypeError: If `value` is not an (x, y) pair of real numbers.
        ValueError: If a coordinate is NaN or infinite.
    """
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise TypeError(f"Expected an (x, y) pair, got {value!r}") from None
    return Point(as_finite("x", x), as_finite("y", y))


def lerp(t: float, a: float, b: float) -> float:
    """Linear interpolation between `a` (t=0) and `b` (t=1)."""
    return a + (b - a) * t


def normalize_angle(angle: float) -> float:
    """Map an angle in radians into [0, 2pi)."""
    angle = math.fmod(angle, TAU)
    if angle < 0:
        angle += TAU
    # fmod of a tiny negative value can round up to exactly TAU
    return 0.0 if angle >= TAU else angle


def segment_lengths(points: Sequence[Union[Point, PointXY]], closed: bool = False) -> list[float]:
    """Lengths of consecutive segments, plus last -> first when `closed`."""
    pts = [as_point(p) for p in points]
    lengths = [p0.distance(p1) for p0, p1 in zip(pts, pts[1:])]
    if closed and len(pts) > 1:
        lengths.append(pts[-1].distance(pts[0]))
    return lengths


def polyline_length(points: Sequence[Union[Point, PointXY]], closed: bool = False) -> float:
    """Total polyline length."""
    return math.fsum(segment_lengths(points, closed))
